"""Workflow storage port.

Defines the storage collaborator the workflow engine persists through.
Implementations may use a relational store, a document store, or the
in-memory stub.

Rules for implementations:
1. FAIL LOUD - raise on errors, never return partial results
2. CAS ON COMMIT - commit() checks the expected version and bumps it
3. ALL OR NOTHING - commit() and add() store the record and its timeline
   event together, or neither
4. APPEND ONLY - timeline events are never updated or deleted
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from patentflow.domain.models.patent import Patent
from patentflow.domain.models.timeline_event import TimelineEvent


class WorkflowStorageProtocol(Protocol):
    """Protocol for patent and timeline storage.

    Methods:
        load: Retrieve a patent by id
        add: Store a newly created patent with its creation event
        commit: Replace a patent and append its event in one write
        append_event: Append a standalone timeline event
        list_all: List every patent (for queue builders)
        list_events: List a patent's timeline events in append order
        find_by_tracking_code: Look up a patent by tracking code
    """

    async def load(self, patent_id: UUID) -> Patent:
        """Retrieve a patent by id.

        Raises:
            PatentNotFoundError: If the patent does not exist.
        """
        ...

    async def add(self, patent: Patent, event: TimelineEvent | None = None) -> Patent:
        """Store a new patent, together with its creation event when given.

        Returns:
            The stored patent.

        Raises:
            DuplicateTrackingCodeError: If the tracking code is taken.
        """
        ...

    async def commit(
        self, patent: Patent, expected_version: int, event: TimelineEvent
    ) -> Patent:
        """Replace a patent and append its timeline event atomically.

        Either both the new record and the event are stored, or neither
        is: a failure on either half leaves storage as it was.

        Args:
            patent: The full new patent record.
            expected_version: Version the caller read before computing.
            event: The timeline event describing the change.

        Returns:
            The stored patent with its version incremented.

        Raises:
            ConcurrentModificationError: If the stored version differs.
            PatentNotFoundError: If the patent does not exist.
        """
        ...

    async def append_event(self, event: TimelineEvent) -> None:
        """Append a timeline event that accompanies no record change."""
        ...

    async def list_all(self) -> list[Patent]:
        """List every patent in creation order."""
        ...

    async def list_events(self, patent_id: UUID) -> list[TimelineEvent]:
        """List a patent's timeline events in append order."""
        ...

    async def find_by_tracking_code(self, tracking_code: str) -> Patent | None:
        """Return the patent with this tracking code, or None."""
        ...
