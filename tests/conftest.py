"""
Pytest configuration and shared fixtures for patentflow tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Time is injected through FakeTimeAuthority, never read from the system clock
"""

from datetime import timedelta

import pytest

from patentflow.application.services.administration_service import (
    PatentAdministrationService,
)
from patentflow.application.services.patent_writer import PatentWriter
from patentflow.application.services.queue_service import QueueService
from patentflow.application.services.timeline_recorder import TimelineRecorder
from patentflow.application.services.workflow_service import WorkflowService
from patentflow.config.workflow_config import TEST_WORKFLOW_CONFIG, WorkflowConfig
from patentflow.infrastructure.stubs.workflow_storage_stub import WorkflowStorageStub
from tests.helpers import FakeTimeAuthority


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from patentflow import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Clock that advances one second per read, so events order cleanly."""
    return FakeTimeAuthority(tick=timedelta(seconds=1))


@pytest.fixture
def workflow_config() -> WorkflowConfig:
    return TEST_WORKFLOW_CONFIG


@pytest.fixture
def storage() -> WorkflowStorageStub:
    return WorkflowStorageStub()


@pytest.fixture
def recorder(
    storage: WorkflowStorageStub, fake_time_authority: FakeTimeAuthority
) -> TimelineRecorder:
    return TimelineRecorder(storage, fake_time_authority)


@pytest.fixture
def writer(
    storage: WorkflowStorageStub,
    recorder: TimelineRecorder,
    workflow_config: WorkflowConfig,
) -> PatentWriter:
    return PatentWriter(
        storage,
        recorder,
        max_conflict_retries=workflow_config.max_conflict_retries,
    )


@pytest.fixture
def workflow_service(
    writer: PatentWriter,
    fake_time_authority: FakeTimeAuthority,
    workflow_config: WorkflowConfig,
) -> WorkflowService:
    return WorkflowService(writer, fake_time_authority, workflow_config)


@pytest.fixture
def admin_service(
    writer: PatentWriter,
    fake_time_authority: FakeTimeAuthority,
    workflow_config: WorkflowConfig,
) -> PatentAdministrationService:
    return PatentAdministrationService(writer, fake_time_authority, workflow_config)


@pytest.fixture
def queue_service(storage: WorkflowStorageStub) -> QueueService:
    return QueueService(storage)
