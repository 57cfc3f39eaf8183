"""Dependency wiring for patentflow."""

from patentflow.bootstrap.logging import configure_structlog
from patentflow.bootstrap.workflow import (
    get_administration_service,
    get_queue_service,
    get_time_authority,
    get_timeline_recorder,
    get_workflow_config,
    get_workflow_service,
    get_workflow_storage,
    reset_workflow_services,
    set_time_authority,
    set_workflow_config,
    set_workflow_storage,
)

__all__: list[str] = [
    "configure_structlog",
    "get_administration_service",
    "get_queue_service",
    "get_time_authority",
    "get_timeline_recorder",
    "get_workflow_config",
    "get_workflow_service",
    "get_workflow_storage",
    "reset_workflow_services",
    "set_time_authority",
    "set_workflow_config",
    "set_workflow_storage",
]
