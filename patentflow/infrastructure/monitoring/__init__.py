"""Prometheus metrics for the workflow engine."""

from patentflow.infrastructure.monitoring.workflow_metrics import (
    OUTCOMES,
    WorkflowMetricsCollector,
    get_workflow_metrics_collector,
    reset_workflow_metrics_collector,
)

__all__: list[str] = [
    "OUTCOMES",
    "WorkflowMetricsCollector",
    "get_workflow_metrics_collector",
    "reset_workflow_metrics_collector",
]
