"""Configuration for patentflow."""

from patentflow.config.workflow_config import (
    DEFAULT_WORKFLOW_CONFIG,
    TEST_WORKFLOW_CONFIG,
    WorkflowConfig,
)

__all__: list[str] = [
    "DEFAULT_WORKFLOW_CONFIG",
    "TEST_WORKFLOW_CONFIG",
    "WorkflowConfig",
]
