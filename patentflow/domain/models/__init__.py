"""Domain models for patentflow."""

from patentflow.domain.models.patent import (
    Assignment,
    ExaminationRound,
    Patent,
    Track,
    WorkUnit,
)
from patentflow.domain.models.task import CompletedWork, TaskDescriptor
from patentflow.domain.models.timeline_event import TimelineEvent
from patentflow.domain.models.transition import (
    TimelineEntryDraft,
    TransitionOutcome,
    TransitionRequest,
)
from patentflow.domain.models.workflow import (
    CS,
    PS,
    Actor,
    ActorRole,
    Stage,
    TaskKind,
    TrackId,
    TransitionKind,
    WorkItemRef,
    WorkState,
)

__all__: list[str] = [
    "CS",
    "PS",
    "Actor",
    "ActorRole",
    "Assignment",
    "CompletedWork",
    "ExaminationRound",
    "Patent",
    "Stage",
    "TaskDescriptor",
    "TaskKind",
    "TimelineEntryDraft",
    "TimelineEvent",
    "Track",
    "TrackId",
    "TransitionKind",
    "TransitionOutcome",
    "TransitionRequest",
    "WorkItemRef",
    "WorkState",
    "WorkUnit",
]
