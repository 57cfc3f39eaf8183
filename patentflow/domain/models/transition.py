"""Transition requests and the in-memory outcome of applying one.

A TransitionRequest is the single tagged variant dispatched through the
transition engine; there is one code path for every kind.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from uuid import UUID

from patentflow.domain.models.patent import Patent
from patentflow.domain.models.workflow import (
    Actor,
    Stage,
    TransitionKind,
    WorkItemRef,
    WorkState,
)


@dataclass(frozen=True, eq=True)
class TransitionRequest:
    """A requested transition on one work unit.

    Attributes:
        kind: Which transition to apply.
        target: The track or round addressed.
        actor: Who is acting.
        stage: Reviewed stage (approve/reject only).
        reason: Rejection reason, recorded verbatim.
        form_flags: Auxiliary boolean form flags merged on filing.
    """

    kind: TransitionKind
    target: WorkItemRef
    actor: Actor
    stage: Stage | None = None
    reason: str | None = None
    form_flags: Mapping[str, bool] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        review_kinds = (TransitionKind.APPROVE_REVIEW, TransitionKind.REJECT_REVIEW)
        if self.kind in review_kinds and self.stage is None:
            raise ValueError(f"{self.kind.value} requires a stage")
        for key, value in self.form_flags.items():
            if not isinstance(key, str) or not isinstance(value, bool):
                raise TypeError(
                    f"form flags must map str -> bool, got {key!r}: {value!r}"
                )
        if self.form_flags and self.kind is not TransitionKind.COMPLETE_FILING:
            raise ValueError("form flags are only accepted when completing filing")

    @classmethod
    def complete_drafting(cls, target: WorkItemRef, actor: Actor) -> TransitionRequest:
        return cls(kind=TransitionKind.COMPLETE_DRAFTING, target=target, actor=actor)

    @classmethod
    def complete_filing(
        cls,
        target: WorkItemRef,
        actor: Actor,
        form_flags: Mapping[str, bool] | None = None,
    ) -> TransitionRequest:
        return cls(
            kind=TransitionKind.COMPLETE_FILING,
            target=target,
            actor=actor,
            form_flags=MappingProxyType(dict(form_flags or {})),
        )

    @classmethod
    def approve_review(
        cls, target: WorkItemRef, stage: Stage, actor: Actor
    ) -> TransitionRequest:
        return cls(
            kind=TransitionKind.APPROVE_REVIEW, target=target, actor=actor, stage=stage
        )

    @classmethod
    def reject_review(
        cls, target: WorkItemRef, stage: Stage, actor: Actor, reason: str
    ) -> TransitionRequest:
        return cls(
            kind=TransitionKind.REJECT_REVIEW,
            target=target,
            actor=actor,
            stage=stage,
            reason=reason,
        )


@dataclass(frozen=True, eq=True)
class TimelineEntryDraft:
    """Everything needed to record a timeline event, minus id and timestamp."""

    patent_id: UUID
    kind: str
    description: str
    actor_name: str | None = None
    deadline: date | None = None


@dataclass(frozen=True, eq=True)
class TransitionOutcome:
    """The computed result of a transition, before persistence.

    Attributes:
        patent: The new patent, roll-ups already recomputed.
        entry: The timeline entry describing the transition.
        before: Work state of the target before the transition.
        after: Work state of the target after the transition.
    """

    patent: Patent
    entry: TimelineEntryDraft
    before: WorkState | None = None
    after: WorkState | None = None
