"""Typed result of a workflow operation.

The workflow service never lets a WorkflowError escape; it returns a
TransitionResult instead. Three shapes exist:

- applied:   ok=True,  changed=True,  event set
- unchanged: ok=True,  changed=False (the AlreadyInState no-op)
- failed:    ok=False, error set
"""

from __future__ import annotations

from dataclasses import dataclass

from patentflow.domain.errors.workflow import PreconditionNotMetError
from patentflow.domain.exceptions import WorkflowError
from patentflow.domain.models.patent import Patent
from patentflow.domain.models.timeline_event import TimelineEvent


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of one workflow or administrative operation.

    Attributes:
        ok: The request was accepted (applied or no-op).
        changed: The patent was modified and an event appended.
        patent: The patent after the operation, when known.
        event: The appended timeline event, when changed.
        error: The refusal or storage failure, when not ok.
        message: Human-readable summary.
    """

    ok: bool
    changed: bool
    patent: Patent | None = None
    event: TimelineEvent | None = None
    error: WorkflowError | None = None
    message: str = ""

    @classmethod
    def applied(cls, patent: Patent, event: TimelineEvent) -> TransitionResult:
        return cls(
            ok=True,
            changed=True,
            patent=patent,
            event=event,
            message=event.description,
        )

    @classmethod
    def unchanged(cls, patent: Patent, message: str) -> TransitionResult:
        return cls(ok=True, changed=False, patent=patent, message=message)

    @classmethod
    def failed(cls, error: WorkflowError, patent: Patent | None = None) -> TransitionResult:
        return cls(ok=False, changed=False, patent=patent, error=error, message=error.message)

    @property
    def retryable(self) -> bool:
        """Whether the same request may succeed if retried unchanged."""
        return self.error is not None and self.error.retryable

    @property
    def missing(self) -> str | None:
        """The missing prerequisite token for precondition failures."""
        if isinstance(self.error, PreconditionNotMetError):
            return self.error.missing
        return None

    @property
    def error_code(self) -> str | None:
        return type(self.error).__name__ if self.error is not None else None
