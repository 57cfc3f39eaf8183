"""Task descriptors handed out by the eligibility resolver."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from patentflow.domain.models.workflow import Stage, TaskKind, WorkItemRef


@dataclass(frozen=True, eq=True)
class TaskDescriptor:
    """An actionable task for one actor on one work unit.

    Attributes:
        patent_id: The patent the task belongs to.
        tracking_code: The patent's tracking code, for display.
        kind: Drafting, filing or review.
        target: The track or round the task addresses.
        stage: The stage to hand in or review.
        round_sequence: Round number when the target is a round.
        deadline: Deadline snapshot of the assignment slot, if any.
    """

    patent_id: UUID
    tracking_code: str
    kind: TaskKind
    target: WorkItemRef
    stage: Stage
    round_sequence: int | None = None
    deadline: date | None = None

    @property
    def stage_name(self) -> str:
        """Review stage name such as ``ps_draft`` or ``fer_file``."""
        return f"{self.target.prefix}_{self.stage.value}"


@dataclass(frozen=True, eq=True)
class CompletedWork:
    """Work an actor has already handed in on one work unit.

    Attributes:
        patent_id: The patent the work belongs to.
        tracking_code: The patent's tracking code, for display.
        target: The track or round.
        stage: The stage that was handed in.
        under_review: Still awaiting administrator approval.
        round_sequence: Round number when the target is a round.
    """

    patent_id: UUID
    tracking_code: str
    target: WorkItemRef
    stage: Stage
    under_review: bool
    round_sequence: int | None = None
