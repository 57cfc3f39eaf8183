"""Unit tests for TimelineRecorder."""

from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from patentflow.application.services.timeline_recorder import TimelineRecorder
from patentflow.domain.errors.storage import StorageError
from patentflow.domain.models.transition import TimelineEntryDraft
from patentflow.infrastructure.stubs.workflow_storage_stub import WorkflowStorageStub
from tests.helpers import FakeTimeAuthority


class TestRecord:
    """Tests for build/append/record."""

    def test_build_stamps_id_and_time(
        self, recorder: TimelineRecorder, fake_time_authority: FakeTimeAuthority
    ) -> None:
        expected_time = fake_time_authority.current_time
        entry = TimelineEntryDraft(
            patent_id=uuid4(),
            kind="ps_draft_completed",
            description="PS Drafting completed by Dana",
            actor_name="Dana",
            deadline=date(2026, 2, 1),
        )

        event = recorder.build(entry)

        assert event.created_at == expected_time
        assert event.kind == entry.kind
        assert event.deadline == date(2026, 2, 1)
        assert recorder.build(entry).id != event.id

    @pytest.mark.asyncio
    async def test_record_appends(
        self, recorder: TimelineRecorder, storage: WorkflowStorageStub
    ) -> None:
        patent_id = uuid4()

        event = await recorder.record(patent_id, "patent_created", "created", "Ada")

        assert await storage.list_events(patent_id) == [event]

    @pytest.mark.asyncio
    async def test_append_failure_is_storage_error(
        self, recorder: TimelineRecorder, storage: WorkflowStorageStub
    ) -> None:
        storage.fail_next("append_event", OSError("disk full"))

        with pytest.raises(StorageError) as exc_info:
            await recorder.record(uuid4(), "patent_created", "created")

        assert exc_info.value.operation == "append_event"
        assert exc_info.value.retryable is True


class TestHistory:
    """Tests for history()."""

    @pytest.mark.asyncio
    async def test_newest_first(self, recorder: TimelineRecorder) -> None:
        patent_id = uuid4()
        first = await recorder.record(patent_id, "patent_created", "one")
        second = await recorder.record(patent_id, "idf_received_updated", "two")

        history = await recorder.history(patent_id)

        assert history == [second, first]

    @pytest.mark.asyncio
    async def test_equal_timestamps_keep_reverse_append_order(
        self, storage: WorkflowStorageStub
    ) -> None:
        recorder = TimelineRecorder(storage, FakeTimeAuthority())
        patent_id = uuid4()
        events = [
            await recorder.record(patent_id, "patent_created", str(n)) for n in range(3)
        ]

        history = await recorder.history(patent_id)

        assert history == list(reversed(events))

    @pytest.mark.asyncio
    async def test_other_patents_are_not_mixed_in(self, recorder: TimelineRecorder) -> None:
        await recorder.record(uuid4(), "patent_created", "elsewhere")
        assert await recorder.history(uuid4()) == []
