"""Workflow engine configuration.

Environment Variables:
- PATENTFLOW_ENVIRONMENT: 'production' (JSON logs) or 'development'
  (console logs) (default: production)
- PATENTFLOW_EMPTY_EXAMINATION_COMPLETE: Treat active examination with zero
  rounds as complete (default: false)
- PATENTFLOW_MAX_CONFLICT_RETRIES: Read-modify-write retries after a
  version conflict (default: 3)
- PATENTFLOW_REQUIRE_REJECTION_REASON: Refuse rejections without a
  reason (default: true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ENVIRONMENTS: tuple[str, ...] = ("production", "development")

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable, falling back to default if invalid."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable, falling back to default if invalid."""
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class WorkflowConfig:
    """Configuration for the workflow engine.

    Attributes:
        environment: Selects the log renderer.
        empty_examination_complete: Roll-up policy for an active examination
            with no rounds. Default False: incomplete.
        max_conflict_retries: How many times a read-modify-write is retried
            after a version conflict before failing with StorageError.
        require_rejection_reason: Blank rejection reasons are refused.
    """

    environment: str = "production"
    empty_examination_complete: bool = False
    max_conflict_retries: int = 3
    require_rejection_reason: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {ENVIRONMENTS}, got {self.environment!r}"
            )
        if self.max_conflict_retries < 0:
            raise ValueError(
                f"max_conflict_retries must be non-negative, got {self.max_conflict_retries}"
            )

    @classmethod
    def from_environment(cls) -> WorkflowConfig:
        """Create config from environment variables with defaults."""
        return cls(
            environment=os.environ.get("PATENTFLOW_ENVIRONMENT", "production"),
            empty_examination_complete=_get_bool_env(
                "PATENTFLOW_EMPTY_EXAMINATION_COMPLETE", False
            ),
            max_conflict_retries=_get_int_env("PATENTFLOW_MAX_CONFLICT_RETRIES", 3),
            require_rejection_reason=_get_bool_env(
                "PATENTFLOW_REQUIRE_REJECTION_REASON", True
            ),
        )


# Default production config
DEFAULT_WORKFLOW_CONFIG = WorkflowConfig()

# Testing config: console logs, one retry
TEST_WORKFLOW_CONFIG = WorkflowConfig(
    environment="development",
    max_conflict_retries=1,
)
