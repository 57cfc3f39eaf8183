"""Unit tests for workflow bootstrap wiring."""

from __future__ import annotations

import pytest

from patentflow.bootstrap import workflow as bootstrap
from patentflow.config.workflow_config import TEST_WORKFLOW_CONFIG
from patentflow.domain.models.workflow import PS, Stage
from patentflow.infrastructure.adapters.system_time_authority import SystemTimeAuthority
from patentflow.infrastructure.monitoring.workflow_metrics import (
    reset_workflow_metrics_collector,
)
from patentflow.infrastructure.stubs.workflow_storage_stub import WorkflowStorageStub
from tests.helpers import ADMIN, DRAFTER, FakeTimeAuthority


@pytest.fixture(autouse=True)
def _reset():
    bootstrap.reset_workflow_services()
    reset_workflow_metrics_collector()
    yield
    bootstrap.reset_workflow_services()
    reset_workflow_metrics_collector()


class TestWorkflowBootstrap:
    """Tests for lazy singletons."""

    def test_defaults(self) -> None:
        assert isinstance(bootstrap.get_workflow_storage(), WorkflowStorageStub)
        assert isinstance(bootstrap.get_time_authority(), SystemTimeAuthority)

    def test_singletons_are_reused(self) -> None:
        assert bootstrap.get_workflow_service() is bootstrap.get_workflow_service()
        assert bootstrap.get_queue_service() is bootstrap.get_queue_service()

    def test_reset_rebuilds(self) -> None:
        first = bootstrap.get_administration_service()
        bootstrap.reset_workflow_services()
        assert bootstrap.get_administration_service() is not first

    @pytest.mark.asyncio
    async def test_injected_collaborators_are_shared(self) -> None:
        """Admin, workflow and queue services see the same storage."""
        storage = WorkflowStorageStub()
        bootstrap.set_workflow_config(TEST_WORKFLOW_CONFIG)
        bootstrap.set_workflow_storage(storage)
        bootstrap.set_time_authority(FakeTimeAuthority())

        created = await bootstrap.get_administration_service().create_patent(
            "PF-5000", ADMIN
        )
        patent_id = created.patent.id
        await bootstrap.get_administration_service().set_gate(
            patent_id, "idf_received", True, ADMIN
        )
        await bootstrap.get_administration_service().assign(
            patent_id, PS, stage=Stage.DRAFT, assignee="Dana", actor=ADMIN
        )

        result = await bootstrap.get_workflow_service().complete_drafting(
            patent_id, PS, DRAFTER
        )
        review = await bootstrap.get_queue_service().queue_for(ADMIN)

        assert result.changed is True
        assert [t.tracking_code for t in review] == ["PF-5000"]
        assert len(await bootstrap.get_timeline_recorder().history(patent_id)) == 4
