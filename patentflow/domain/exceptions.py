"""Base exception classes for the patentflow domain layer."""


class WorkflowError(Exception):
    """Base exception for all workflow errors.

    All domain-specific exceptions MUST inherit from this class so the
    application boundary can convert them into typed results.

    Attributes:
        retryable: Whether the caller may retry the same request unchanged.
            Only storage failures are transient; everything else needs a
            different input.
    """

    retryable: bool = False

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)

    @property
    def message(self) -> str:
        """Return the human-readable message."""
        return str(self)
