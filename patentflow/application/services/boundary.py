"""Result boundary shared by the workflow and administration services.

Domain services raise WorkflowError subclasses. This is the one place
they are caught and turned into TransitionResult values, with exactly
one outcome log line and one metrics sample per operation.
"""

from __future__ import annotations

from uuid import UUID

import structlog

from patentflow.application.dtos.transition_result import TransitionResult
from patentflow.application.ports.time_authority import TimeAuthorityProtocol
from patentflow.application.services.base import LoggingMixin
from patentflow.application.services.patent_writer import (
    CommitResult,
    Compute,
    PatentWriter,
)
from patentflow.config.workflow_config import WorkflowConfig
from patentflow.domain.errors.storage import StorageError
from patentflow.domain.exceptions import WorkflowError
from patentflow.domain.models.transition import TransitionOutcome
from patentflow.infrastructure.monitoring.workflow_metrics import (
    WorkflowMetricsCollector,
)


class WorkflowBoundary(LoggingMixin):
    """Runs writer operations and converts their outcome into results."""

    def __init__(
        self,
        writer: PatentWriter,
        time_authority: TimeAuthorityProtocol,
        config: WorkflowConfig,
        metrics: WorkflowMetricsCollector | None = None,
    ) -> None:
        self._writer = writer
        self._time = time_authority
        self._config = config
        self._metrics = metrics
        self._init_logger()

    def _record_outcome(self, operation: str, outcome: str) -> None:
        if self._metrics is not None:
            self._metrics.record_outcome(operation, outcome)

    async def _execute(
        self,
        operation: str,
        patent_id: UUID,
        compute: Compute,
        **context: object,
    ) -> TransitionResult:
        """Apply ``compute`` atomically to one patent and report the result."""
        log = self._log_operation(operation, patent_id=str(patent_id), **context)
        started = self._time.monotonic()
        try:
            commit = await self._writer.update(patent_id, compute, operation=operation)
        except WorkflowError as exc:
            return self._refused(operation, log, exc)
        return self._finished(operation, log, commit, started)

    async def _execute_create(
        self, operation: str, outcome: TransitionOutcome, **context: object
    ) -> TransitionResult:
        log = self._log_operation(
            operation, patent_id=str(outcome.patent.id), **context
        )
        started = self._time.monotonic()
        try:
            commit = await self._writer.create(outcome, operation=operation)
        except WorkflowError as exc:
            return self._refused(operation, log, exc)
        return self._finished(operation, log, commit, started)

    def _refused(
        self, operation: str, log: structlog.BoundLogger, exc: WorkflowError
    ) -> TransitionResult:
        if isinstance(exc, StorageError):
            log.error(
                "storage_error",
                storage_operation=exc.operation,
                error=exc.message,
            )
            self._record_outcome(operation, "storage_error")
        else:
            log.warning(
                "transition_rejected",
                error_code=type(exc).__name__,
                missing=getattr(exc, "missing", None),
                reason=exc.message,
            )
            self._record_outcome(operation, "rejected")
        return TransitionResult.failed(exc)

    def _finished(
        self,
        operation: str,
        log: structlog.BoundLogger,
        commit: CommitResult,
        started: float,
    ) -> TransitionResult:
        duration_ms = round((self._time.monotonic() - started) * 1000, 3)
        if commit.event is None:
            message = commit.no_change.message if commit.no_change else "No change"
            log.info(
                "transition_no_change", reason=message, duration_ms=duration_ms
            )
            self._record_outcome(operation, "no_change")
            return TransitionResult.unchanged(commit.patent, message)

        log.info(
            "transition_applied",
            event_kind=commit.event.kind,
            version=commit.patent.version,
            duration_ms=duration_ms,
        )
        self._record_outcome(operation, "applied")
        return TransitionResult.applied(commit.patent, commit.event)
