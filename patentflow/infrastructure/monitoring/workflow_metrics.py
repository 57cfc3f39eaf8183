"""Workflow metrics for Prometheus exposition.

Counters for transition outcomes and optimistic-concurrency retries.
Rates such as "rejections per hour by operation" come from Prometheus
queries over these counters.
"""

from __future__ import annotations

import threading

from prometheus_client import CollectorRegistry, Counter

# Thread lock for singleton initialization
_metrics_lock = threading.Lock()

OUTCOMES: tuple[str, ...] = ("applied", "no_change", "rejected", "storage_error")


class WorkflowMetricsCollector:
    """Collects workflow outcome metrics.

    Attributes:
        transitions_total: Counter by operation and outcome.
        conflict_retries_total: Counter of version-conflict retries.
    """

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        environment: str = "production",
    ) -> None:
        """Initialize the collector.

        Args:
            registry: Optional custom registry for testing isolation.
            environment: Value of the ``environment`` label.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = environment

        self.transitions_total = Counter(
            name="patentflow_transitions_total",
            documentation="Workflow operations by outcome",
            labelnames=["operation", "outcome", "environment"],
            registry=self._registry,
        )
        self.conflict_retries_total = Counter(
            name="patentflow_conflict_retries_total",
            documentation="Read-modify-write retries after a version conflict",
            labelnames=["operation", "environment"],
            registry=self._registry,
        )

    def record_outcome(self, operation: str, outcome: str) -> None:
        """Record one finished workflow operation.

        Raises:
            ValueError: If outcome is not one of OUTCOMES.
        """
        if outcome not in OUTCOMES:
            raise ValueError(f"Invalid outcome '{outcome}'. Must be one of {OUTCOMES}.")
        self.transitions_total.labels(
            operation=operation,
            outcome=outcome,
            environment=self._environment,
        ).inc()

    def record_conflict_retry(self, operation: str) -> None:
        self.conflict_retries_total.labels(
            operation=operation,
            environment=self._environment,
        ).inc()

    def get_registry(self) -> CollectorRegistry:
        return self._registry


# Singleton instance
_workflow_metrics_collector: WorkflowMetricsCollector | None = None


def get_workflow_metrics_collector() -> WorkflowMetricsCollector:
    """Get the singleton WorkflowMetricsCollector (thread-safe)."""
    global _workflow_metrics_collector
    if _workflow_metrics_collector is None:
        with _metrics_lock:
            if _workflow_metrics_collector is None:
                _workflow_metrics_collector = WorkflowMetricsCollector()
    return _workflow_metrics_collector


def reset_workflow_metrics_collector() -> None:
    """Reset the singleton collector (for testing only)."""
    global _workflow_metrics_collector
    with _metrics_lock:
        _workflow_metrics_collector = None
