"""Serializable views for callers outside the engine.

Pydantic models shared with whatever surface renders the workflow (web
handlers, exports, dashboards). They hold plain values only; the domain
dataclasses stay internal to the application layer.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from patentflow.application.dtos.transition_result import TransitionResult
from patentflow.domain.models.patent import Patent
from patentflow.domain.models.task import TaskDescriptor
from patentflow.domain.models.timeline_event import TimelineEvent
from patentflow.domain.services.status_model import (
    STATUS_LABELS,
    determine_patent_status,
    work_state,
)


class TaskView(BaseModel):
    """One queue entry."""

    model_config = ConfigDict(frozen=True)

    patent_id: UUID
    tracking_code: str
    kind: str
    stage_name: Annotated[str, Field(description="e.g. ps_draft, fer_file")]
    round_sequence: int | None = None
    deadline: date | None = None

    @classmethod
    def from_task(cls, task: TaskDescriptor) -> TaskView:
        return cls(
            patent_id=task.patent_id,
            tracking_code=task.tracking_code,
            kind=task.kind.value,
            stage_name=task.stage_name,
            round_sequence=task.round_sequence,
            deadline=task.deadline,
        )


class TimelineEntryView(BaseModel):
    """One timeline row."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    kind: str
    description: str
    created_at: datetime
    actor_name: str | None = None
    deadline: date | None = None

    @classmethod
    def from_event(cls, event: TimelineEvent) -> TimelineEntryView:
        return cls(
            id=event.id,
            kind=event.kind,
            description=event.description,
            created_at=event.created_at,
            actor_name=event.actor_name,
            deadline=event.deadline,
        )


class RoundStateView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    sequence: Annotated[int, Field(ge=1)]
    state: str
    complete: bool


class PatentStatusView(BaseModel):
    """Display status of one patent with per-unit lifecycle states."""

    model_config = ConfigDict(frozen=True)

    patent_id: UUID
    tracking_code: str
    status: str
    label: str
    ps_state: str
    cs_state: str
    examination_active: bool
    examination_completion: bool
    rounds: list[RoundStateView] = Field(default_factory=list)

    @classmethod
    def from_patent(cls, patent: Patent) -> PatentStatusView:
        status = determine_patent_status(patent)
        return cls(
            patent_id=patent.id,
            tracking_code=patent.tracking_code,
            status=status.value,
            label=STATUS_LABELS[status],
            ps_state=work_state(patent.ps).value,
            cs_state=work_state(patent.cs).value,
            examination_active=patent.examination_active,
            examination_completion=patent.examination_completion,
            rounds=[
                RoundStateView(
                    id=r.id,
                    sequence=r.sequence,
                    state=work_state(r).value,
                    complete=r.complete,
                )
                for r in patent.rounds
            ],
        )


class TransitionResponse(BaseModel):
    """Plain-data rendering of a TransitionResult."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    changed: bool
    message: str
    error_code: str | None = None
    missing: str | None = None
    retryable: bool = False
    status: PatentStatusView | None = None
    event: TimelineEntryView | None = None

    @classmethod
    def from_result(cls, result: TransitionResult) -> TransitionResponse:
        return cls(
            ok=result.ok,
            changed=result.changed,
            message=result.message,
            error_code=result.error_code,
            missing=result.missing,
            retryable=result.retryable,
            status=(
                PatentStatusView.from_patent(result.patent)
                if result.patent is not None
                else None
            ),
            event=(
                TimelineEntryView.from_event(result.event)
                if result.event is not None
                else None
            ),
        )
