"""Application-layer DTOs.

Dataclass DTOs for internal use, Pydantic views for callers outside the
engine.
"""

from patentflow.application.dtos.transition_result import TransitionResult
from patentflow.application.dtos.views import (
    PatentStatusView,
    RoundStateView,
    TaskView,
    TimelineEntryView,
    TransitionResponse,
)

__all__: list[str] = [
    "PatentStatusView",
    "RoundStateView",
    "TaskView",
    "TimelineEntryView",
    "TransitionResponse",
    "TransitionResult",
]
