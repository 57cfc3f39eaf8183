"""Concurrent modification error for optimistic version checks."""

from __future__ import annotations

from uuid import UUID

from patentflow.domain.exceptions import WorkflowError


class ConcurrentModificationError(WorkflowError):
    """Raised when a save finds a newer version than the one it read.

    Another writer persisted the patent between this writer's load and
    save. The caller should re-read and recompute; the workflow service
    does so automatically a bounded number of times.

    Attributes:
        patent_id: The patent being saved.
        expected_version: The version the writer read.
        actual_version: The version found in storage.
    """

    def __init__(
        self, patent_id: UUID, expected_version: int, actual_version: int
    ) -> None:
        self.patent_id = patent_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"Concurrent modification detected for patent {patent_id}: "
            f"expected version {expected_version}, found {actual_version}"
        )
