"""Domain errors for patentflow.

All errors inherit from WorkflowError.
"""

from patentflow.domain.errors.concurrent_modification import (
    ConcurrentModificationError,
)
from patentflow.domain.errors.storage import StorageError
from patentflow.domain.errors.workflow import (
    AlreadyInStateError,
    DuplicateTrackingCodeError,
    NotAssignedError,
    NotAuthorizedError,
    PatentNotFoundError,
    PreconditionNotMetError,
    UnknownRoundError,
)

__all__: list[str] = [
    "AlreadyInStateError",
    "ConcurrentModificationError",
    "DuplicateTrackingCodeError",
    "NotAssignedError",
    "NotAuthorizedError",
    "PatentNotFoundError",
    "PreconditionNotMetError",
    "StorageError",
    "UnknownRoundError",
]
