"""Bootstrap wiring for workflow dependencies.

Module-level singletons, created lazily. Tests call reset_workflow_services()
between cases, or use set_workflow_storage() to inject a storage
implementation before the services are first built.
"""

from __future__ import annotations

from structlog import get_logger

from patentflow.application.ports.time_authority import TimeAuthorityProtocol
from patentflow.application.ports.workflow_storage import WorkflowStorageProtocol
from patentflow.application.services.administration_service import (
    PatentAdministrationService,
)
from patentflow.application.services.patent_writer import PatentWriter
from patentflow.application.services.queue_service import QueueService
from patentflow.application.services.timeline_recorder import TimelineRecorder
from patentflow.application.services.workflow_service import WorkflowService
from patentflow.config.workflow_config import WorkflowConfig
from patentflow.infrastructure.adapters.system_time_authority import SystemTimeAuthority
from patentflow.infrastructure.monitoring.workflow_metrics import (
    get_workflow_metrics_collector,
)
from patentflow.infrastructure.stubs.workflow_storage_stub import WorkflowStorageStub

logger = get_logger()

_workflow_config: WorkflowConfig | None = None
_workflow_storage: WorkflowStorageProtocol | None = None
_time_authority: TimeAuthorityProtocol | None = None
_timeline_recorder: TimelineRecorder | None = None
_patent_writer: PatentWriter | None = None
_workflow_service: WorkflowService | None = None
_administration_service: PatentAdministrationService | None = None
_queue_service: QueueService | None = None


def get_workflow_config() -> WorkflowConfig:
    global _workflow_config
    if _workflow_config is None:
        _workflow_config = WorkflowConfig.from_environment()
    return _workflow_config


def set_workflow_config(config: WorkflowConfig) -> None:
    """Override the config (before services are first built)."""
    global _workflow_config
    _workflow_config = config


def get_workflow_storage() -> WorkflowStorageProtocol:
    """Get the storage collaborator.

    No persistent backend ships with the engine; without an injected
    implementation the in-memory stub is used.
    """
    global _workflow_storage
    if _workflow_storage is None:
        logger.warning(
            "workflow_storage_stub_in_use",
            message="No storage configured, using in-memory stub",
        )
        _workflow_storage = WorkflowStorageStub()
    return _workflow_storage


def set_workflow_storage(storage: WorkflowStorageProtocol) -> None:
    """Inject the storage collaborator (before services are first built)."""
    global _workflow_storage
    _workflow_storage = storage


def get_time_authority() -> TimeAuthorityProtocol:
    global _time_authority
    if _time_authority is None:
        _time_authority = SystemTimeAuthority()
    return _time_authority


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    global _time_authority
    _time_authority = time_authority


def get_timeline_recorder() -> TimelineRecorder:
    global _timeline_recorder
    if _timeline_recorder is None:
        _timeline_recorder = TimelineRecorder(get_workflow_storage(), get_time_authority())
    return _timeline_recorder


def _get_patent_writer() -> PatentWriter:
    global _patent_writer
    if _patent_writer is None:
        _patent_writer = PatentWriter(
            get_workflow_storage(),
            get_timeline_recorder(),
            max_conflict_retries=get_workflow_config().max_conflict_retries,
            metrics=get_workflow_metrics_collector(),
        )
    return _patent_writer


def get_workflow_service() -> WorkflowService:
    global _workflow_service
    if _workflow_service is None:
        _workflow_service = WorkflowService(
            _get_patent_writer(),
            get_time_authority(),
            get_workflow_config(),
            metrics=get_workflow_metrics_collector(),
        )
    return _workflow_service


def get_administration_service() -> PatentAdministrationService:
    global _administration_service
    if _administration_service is None:
        _administration_service = PatentAdministrationService(
            _get_patent_writer(),
            get_time_authority(),
            get_workflow_config(),
            metrics=get_workflow_metrics_collector(),
        )
    return _administration_service


def get_queue_service() -> QueueService:
    global _queue_service
    if _queue_service is None:
        _queue_service = QueueService(get_workflow_storage())
    return _queue_service


def reset_workflow_services() -> None:
    """Reset all singletons (for testing)."""
    global _workflow_config, _workflow_storage, _time_authority
    global _timeline_recorder, _patent_writer
    global _workflow_service, _administration_service, _queue_service
    _workflow_config = None
    _workflow_storage = None
    _time_authority = None
    _timeline_recorder = None
    _patent_writer = None
    _workflow_service = None
    _administration_service = None
    _queue_service = None
