"""Workflow vocabulary: tracks, stages, roles, states and work-item references.

The engine never reads an ambient identity. Every operation receives an
explicit Actor (name + role) and a WorkItemRef naming which unit of work
(PS track, CS track, or one examination round) it addresses.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class TrackId(str, Enum):
    """The two parallel specification pipelines on a patent."""

    PS = "ps"
    CS = "cs"

    @property
    def label(self) -> str:
        """Display prefix used in timeline descriptions."""
        return self.value.upper()


class Stage(str, Enum):
    """Sub-stage of a work unit that can be handed in and reviewed."""

    DRAFT = "draft"
    FILE = "file"

    @property
    def label(self) -> str:
        return "Drafting" if self is Stage.DRAFT else "Filing"


class ActorRole(str, Enum):
    """Role names recognised by the engine.

    Only role-name checks are performed; authentication belongs to the
    surrounding application.
    """

    DRAFTER = "drafter"
    FILER = "filer"
    ADMIN = "admin"


class WorkState(str, Enum):
    """Projection of a work unit's stored flags onto lifecycle states.

    State Machine (per track and, identically, per round):
        NOT_STARTED -> DRAFTING -> DRAFT_UNDER_REVIEW -> DRAFTED
        DRAFTED -> FILING -> FILE_UNDER_REVIEW -> COMPLETE

    DRAFTED is never stored. It is implied by drafting_done=True,
    drafting_under_review=False, filing_done=False.
    """

    NOT_STARTED = "not_started"
    DRAFTING = "drafting"
    DRAFT_UNDER_REVIEW = "draft_under_review"
    DRAFTED = "drafted"
    FILING = "filing"
    FILE_UNDER_REVIEW = "file_under_review"
    COMPLETE = "complete"


class TaskKind(str, Enum):
    """Kind of actionable task the eligibility resolver can hand out.

    Declaration order is pipeline order.
    """

    PENDING_DRAFTING = "pending_drafting"
    PENDING_FILING = "pending_filing"
    PENDING_REVIEW = "pending_review"


class TransitionKind(str, Enum):
    """The four transitions a work unit accepts."""

    COMPLETE_DRAFTING = "complete_drafting"
    COMPLETE_FILING = "complete_filing"
    APPROVE_REVIEW = "approve_review"
    REJECT_REVIEW = "reject_review"


@dataclass(frozen=True, eq=True)
class Actor:
    """An employee acting on the workflow.

    Attributes:
        name: Employee name as recorded in assignments.
        role: Role the employee acts in.
    """

    name: str
    role: ActorRole

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Actor name cannot be empty")

    @property
    def is_admin(self) -> bool:
        return self.role is ActorRole.ADMIN


@dataclass(frozen=True, eq=True)
class WorkItemRef:
    """Reference to one unit of work on a patent: a track or a round.

    Exactly one of ``track`` and ``round_id`` is set.

    Attributes:
        track: The specification track, for PS/CS work.
        round_id: The examination round identifier, for FER work.
    """

    track: TrackId | None = None
    round_id: UUID | None = None

    def __post_init__(self) -> None:
        if (self.track is None) == (self.round_id is None):
            raise ValueError("WorkItemRef needs exactly one of track or round_id")

    @classmethod
    def for_track(cls, track: TrackId) -> WorkItemRef:
        return cls(track=track)

    @classmethod
    def for_round(cls, round_id: UUID) -> WorkItemRef:
        return cls(round_id=round_id)

    @property
    def is_round(self) -> bool:
        return self.round_id is not None

    @property
    def prefix(self) -> str:
        """Event-kind prefix: ``ps``, ``cs`` or ``fer``."""
        if self.track is not None:
            return self.track.value
        return "fer"


PS = WorkItemRef.for_track(TrackId.PS)
CS = WorkItemRef.for_track(TrackId.CS)
