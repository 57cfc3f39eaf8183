"""Observability infrastructure: structured logging and correlation ids.

Usage:
    from patentflow.infrastructure.observability import (
        configure_structlog,
        get_correlation_id,
        set_correlation_id,
    )

    configure_structlog(environment="production")
    set_correlation_id(request_correlation_id)
"""

from patentflow.infrastructure.observability.correlation import (
    correlation_id_processor,
    ensure_correlation_id,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from patentflow.infrastructure.observability.logging import (
    WORKFLOW_COMPONENT,
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "WORKFLOW_COMPONENT",
    "configure_structlog",
    "correlation_id_processor",
    "ensure_correlation_id",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "set_correlation_id",
]
