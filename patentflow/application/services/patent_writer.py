"""Atomic read-modify-write for patent records.

Every mutation of a patent (workflow transition or administrative
change) goes through PatentWriter:

1. Serialize per patent with an asyncio.Lock (same-process callers).
2. Load the patent and compute the new record plus its timeline entry
   in memory (pure domain call).
3. Commit the record and its timeline event in one storage write, with a
   version check (other processes). On a version conflict, reload and
   recompute, up to ``max_conflict_retries`` times. A failed commit
   leaves nothing behind, so there is never anything to undo.

A compute function raising AlreadyInStateError yields an unchanged
result; any other WorkflowError propagates to the caller.
"""

from __future__ import annotations

import asyncio
import weakref
from collections.abc import Callable
from dataclasses import dataclass, replace
from uuid import UUID

from patentflow.application.ports.workflow_storage import WorkflowStorageProtocol
from patentflow.application.services.base import LoggingMixin
from patentflow.application.services.timeline_recorder import TimelineRecorder
from patentflow.domain.errors.concurrent_modification import (
    ConcurrentModificationError,
)
from patentflow.domain.errors.storage import StorageError
from patentflow.domain.errors.workflow import AlreadyInStateError
from patentflow.domain.exceptions import WorkflowError
from patentflow.domain.models.patent import Patent
from patentflow.domain.models.timeline_event import TimelineEvent
from patentflow.domain.models.transition import TransitionOutcome
from patentflow.infrastructure.monitoring.workflow_metrics import (
    WorkflowMetricsCollector,
)

Compute = Callable[[Patent], TransitionOutcome]


@dataclass(frozen=True)
class CommitResult:
    """What a write produced.

    Attributes:
        patent: The stored patent (unchanged when nothing was written).
        event: The appended event, or None for a no-op.
        no_change: The AlreadyInStateError explaining a no-op.
    """

    patent: Patent
    event: TimelineEvent | None = None
    no_change: AlreadyInStateError | None = None

    @property
    def changed(self) -> bool:
        return self.event is not None


class PatentWriter(LoggingMixin):
    """Applies computed patent changes as one all-or-nothing unit."""

    def __init__(
        self,
        storage: WorkflowStorageProtocol,
        recorder: TimelineRecorder,
        *,
        max_conflict_retries: int = 3,
        metrics: WorkflowMetricsCollector | None = None,
    ) -> None:
        self._storage = storage
        self._recorder = recorder
        self._max_conflict_retries = max_conflict_retries
        self._metrics = metrics
        # Entries vanish once no caller holds or awaits the lock
        self._locks: weakref.WeakValueDictionary[UUID, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._init_logger()

    def _lock_for(self, patent_id: UUID) -> asyncio.Lock:
        lock = self._locks.get(patent_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[patent_id] = lock
        return lock

    async def load(self, patent_id: UUID) -> Patent:
        """Load a patent, wrapping collaborator failures.

        Raises:
            PatentNotFoundError: If the patent does not exist.
            StorageError: If the storage collaborator fails.
        """
        try:
            return await self._storage.load(patent_id)
        except WorkflowError:
            raise
        except Exception as exc:
            raise StorageError("load", exc) from exc

    async def _commit(
        self, patent: Patent, expected_version: int, event: TimelineEvent
    ) -> Patent:
        try:
            return await self._storage.commit(patent, expected_version, event)
        except WorkflowError:
            raise
        except Exception as exc:
            raise StorageError("commit", exc) from exc

    async def update(
        self, patent_id: UUID, compute: Compute, *, operation: str
    ) -> CommitResult:
        """Run one serialized read-modify-write on a patent.

        Args:
            patent_id: The patent to modify.
            compute: Pure function from the current patent to the outcome.
            operation: Operation name for logs and metrics.

        Returns:
            CommitResult for the applied change or the no-op.

        Raises:
            WorkflowError: Whatever ``compute`` refused with.
            StorageError: On collaborator failure or exhausted retries.
        """
        log = self._log_operation(operation, patent_id=str(patent_id))
        last_conflict: ConcurrentModificationError | None = None

        async with self._lock_for(patent_id):
            for attempt in range(self._max_conflict_retries + 1):
                current = await self.load(patent_id)
                try:
                    outcome = compute(current)
                except AlreadyInStateError as exc:
                    return CommitResult(patent=current, no_change=exc)

                event = self._recorder.build(outcome.entry)
                candidate = replace(outcome.patent, updated_at=event.created_at)
                try:
                    saved = await self._commit(candidate, current.version, event)
                except ConcurrentModificationError as exc:
                    last_conflict = exc
                    log.info(
                        "version_conflict",
                        attempt=attempt + 1,
                        expected_version=exc.expected_version,
                        actual_version=exc.actual_version,
                    )
                    if self._metrics is not None:
                        self._metrics.record_conflict_retry(operation)
                    continue
                return CommitResult(patent=saved, event=event)

        log.error("conflict_retries_exhausted", retries=self._max_conflict_retries)
        raise StorageError("commit", last_conflict)

    async def create(self, outcome: TransitionOutcome, *, operation: str) -> CommitResult:
        """Store a newly built patent and its creation event together.

        Raises:
            DuplicateTrackingCodeError: If the tracking code is taken.
            StorageError: On collaborator failure (nothing is left stored).
        """
        patent = outcome.patent
        event = self._recorder.build(outcome.entry)
        try:
            stored = await self._storage.add(patent, event)
        except WorkflowError:
            raise
        except Exception as exc:
            raise StorageError("add", exc) from exc
        self._log_operation(operation, patent_id=str(patent.id)).debug("patent_stored")
        return CommitResult(patent=stored, event=event)
