"""Timeline recorder: the append-only audit log.

Records one TimelineEvent per applied transition or administrative
change and serves the per-patent history newest first. No business
validation happens here; the only failure mode is a storage error, which
is propagated as StorageError.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID, uuid4

from patentflow.application.ports.time_authority import TimeAuthorityProtocol
from patentflow.application.ports.workflow_storage import WorkflowStorageProtocol
from patentflow.application.services.base import LoggingMixin
from patentflow.domain.errors.storage import StorageError
from patentflow.domain.exceptions import WorkflowError
from patentflow.domain.models.timeline_event import TimelineEvent
from patentflow.domain.models.transition import TimelineEntryDraft


class TimelineRecorder(LoggingMixin):
    """Builds, appends and queries timeline events."""

    def __init__(
        self,
        storage: WorkflowStorageProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._storage = storage
        self._time = time_authority
        self._init_logger()

    def build(self, entry: TimelineEntryDraft) -> TimelineEvent:
        """Stamp a draft entry with an id and the current UTC time."""
        return TimelineEvent(
            id=uuid4(),
            patent_id=entry.patent_id,
            kind=entry.kind,
            description=entry.description,
            created_at=self._time.utcnow(),
            actor_name=entry.actor_name,
            deadline=entry.deadline,
        )

    async def append(self, event: TimelineEvent) -> TimelineEvent:
        """Append an already-built event.

        Raises:
            StorageError: If the storage collaborator fails.
        """
        try:
            await self._storage.append_event(event)
        except WorkflowError:
            raise
        except Exception as exc:
            self._log_operation(
                "append", patent_id=str(event.patent_id), kind=event.kind
            ).error("storage_error", error=str(exc))
            raise StorageError("append_event", exc) from exc
        return event

    async def record(
        self,
        patent_id: UUID,
        kind: str,
        description: str,
        actor_name: str | None = None,
        deadline: date | None = None,
    ) -> TimelineEvent:
        """Build and append one event.

        Args:
            patent_id: The patent the event belongs to.
            kind: Event kind from the fixed vocabulary.
            description: Human-readable description, recorded verbatim.
            actor_name: Acting employee, if any.
            deadline: Deadline snapshot, if any.

        Returns:
            The appended TimelineEvent.

        Raises:
            StorageError: If the storage collaborator fails.
        """
        event = self.build(
            TimelineEntryDraft(
                patent_id=patent_id,
                kind=kind,
                description=description,
                actor_name=actor_name,
                deadline=deadline,
            )
        )
        return await self.append(event)

    async def history(self, patent_id: UUID) -> list[TimelineEvent]:
        """Return a patent's events, newest first.

        Events with equal timestamps keep reverse append order.

        Raises:
            StorageError: If the storage collaborator fails.
        """
        try:
            events = await self._storage.list_events(patent_id)
        except WorkflowError:
            raise
        except Exception as exc:
            raise StorageError("list_events", exc) from exc
        return sorted(reversed(events), key=lambda e: e.created_at, reverse=True)
