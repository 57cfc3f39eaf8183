"""In-memory workflow storage stub.

Implements WorkflowStorageProtocol for development and testing. Commits
use compare-and-swap on the patent version under an asyncio.Lock, the
in-memory equivalent of ``UPDATE ... WHERE version = :expected`` with the
event INSERT in the same transaction.

Failure injection (fail_next) lets tests exercise retry and
atomicity paths without a real backend.
"""

from __future__ import annotations

import asyncio
from collections import defaultdict
from dataclasses import replace
from uuid import UUID

from patentflow.application.ports.workflow_storage import WorkflowStorageProtocol
from patentflow.domain.errors.concurrent_modification import (
    ConcurrentModificationError,
)
from patentflow.domain.errors.workflow import (
    DuplicateTrackingCodeError,
    PatentNotFoundError,
)
from patentflow.domain.models.patent import Patent
from patentflow.domain.models.timeline_event import TimelineEvent


class WorkflowStorageStub(WorkflowStorageProtocol):
    """In-memory implementation of WorkflowStorageProtocol.

    NOT suitable for production use.

    Attributes:
        _patents: Patents by id, in insertion order.
        _events: Timeline events by patent id, in append order.
        _failures: Queued exceptions per operation name.
    """

    def __init__(self) -> None:
        self._patents: dict[UUID, Patent] = {}
        self._events: dict[UUID, list[TimelineEvent]] = defaultdict(list)
        self._failures: dict[str, list[BaseException]] = defaultdict(list)
        # Simulates the row lock of an atomic conditional update
        self._cas_lock = asyncio.Lock()
        self.commit_calls = 0

    def fail_next(self, operation: str, error: BaseException | None = None) -> None:
        """Make the next call to ``operation`` raise ``error``.

        Args:
            operation: One of the protocol method names, e.g. ``commit``.
                ``append_event`` also fails the event half of ``commit``
                and ``add``.
            error: The exception to raise. Defaults to a RuntimeError.
        """
        self._failures[operation].append(
            error if error is not None else RuntimeError(f"injected {operation} failure")
        )

    def _maybe_fail(self, operation: str) -> None:
        queued = self._failures.get(operation)
        if queued:
            raise queued.pop(0)

    async def load(self, patent_id: UUID) -> Patent:
        self._maybe_fail("load")
        patent = self._patents.get(patent_id)
        if patent is None:
            raise PatentNotFoundError(patent_id)
        return patent

    async def add(self, patent: Patent, event: TimelineEvent | None = None) -> Patent:
        self._maybe_fail("add")
        async with self._cas_lock:
            if any(
                p.tracking_code == patent.tracking_code for p in self._patents.values()
            ):
                raise DuplicateTrackingCodeError(patent.tracking_code)
            if patent.id in self._patents:
                raise ValueError(f"Patent already exists: {patent.id}")
            if event is not None:
                self._check_event(patent, event)
                self._maybe_fail("append_event")
                self._events[patent.id].append(event)
            self._patents[patent.id] = patent
        return patent

    async def commit(
        self, patent: Patent, expected_version: int, event: TimelineEvent
    ) -> Patent:
        """Replace a patent and append its event as one write.

        Every check runs before either half is applied.

        Raises:
            ConcurrentModificationError: If the stored version differs.
            PatentNotFoundError: If the patent does not exist.
        """
        self._maybe_fail("commit")
        async with self._cas_lock:
            self.commit_calls += 1
            current = self._patents.get(patent.id)
            if current is None:
                raise PatentNotFoundError(patent.id)
            if current.version != expected_version:
                raise ConcurrentModificationError(
                    patent.id, expected_version, current.version
                )
            self._check_event(patent, event)
            self._maybe_fail("append_event")
            stored = replace(patent, version=expected_version + 1)
            self._patents[patent.id] = stored
            self._events[patent.id].append(event)
            return stored

    @staticmethod
    def _check_event(patent: Patent, event: TimelineEvent) -> None:
        if event.patent_id != patent.id:
            raise ValueError(
                f"Event {event.id} belongs to {event.patent_id}, not {patent.id}"
            )

    async def append_event(self, event: TimelineEvent) -> None:
        self._maybe_fail("append_event")
        self._events[event.patent_id].append(event)

    async def list_all(self) -> list[Patent]:
        self._maybe_fail("list_all")
        return list(self._patents.values())

    async def list_events(self, patent_id: UUID) -> list[TimelineEvent]:
        self._maybe_fail("list_events")
        return list(self._events.get(patent_id, []))

    async def find_by_tracking_code(self, tracking_code: str) -> Patent | None:
        for patent in self._patents.values():
            if patent.tracking_code == tracking_code:
                return patent
        return None

    def clear(self) -> None:
        """Reset all stored data (for testing)."""
        self._patents.clear()
        self._events.clear()
        self._failures.clear()
        self.commit_calls = 0
