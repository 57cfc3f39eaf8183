"""Storage collaborator errors."""

from __future__ import annotations

from patentflow.domain.exceptions import WorkflowError


class StorageError(WorkflowError):
    """Raised when the storage collaborator fails.

    This is the only retryable workflow error: the failure is transient
    and the same request may succeed later. No partial write survives a
    StorageError.

    Attributes:
        operation: The storage operation that failed (load, save, ...).
        cause: The underlying exception, if any.
    """

    retryable = True

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Storage operation '{operation}' failed{detail}")
