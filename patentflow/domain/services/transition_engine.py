"""Transition engine: the per-unit state machine.

Every transition on a track or an examination round goes through
apply_transition(). The request is a tagged variant dispatched through
one handler table; there are no per-track copies of the logic.

State Machine (identical for PS, CS and every round):
    NOT_STARTED/DRAFTING --complete_drafting--> DRAFT_UNDER_REVIEW
    DRAFT_UNDER_REVIEW   --approve(draft)-----> DRAFTED
    DRAFT_UNDER_REVIEW   --reject(draft)------> DRAFTING (filing reset too)
    FILE_UNDER_REVIEW    --reject(draft)------> DRAFTING (filing reset too)
    DRAFTED/FILING       --complete_filing----> FILE_UNDER_REVIEW
    FILE_UNDER_REVIEW    --approve(file)------> COMPLETE
    FILE_UNDER_REVIEW    --reject(file)-------> FILING

Check order per transition is fixed: unit lookup, gates, role and
assignment, then idempotence. Gates come first so a blocked stage is
reported as blocked regardless of who asks.

The engine is pure: it returns a TransitionOutcome holding the new
patent (roll-ups recomputed) and the timeline entry to append. Nothing is
persisted here.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from datetime import date
from typing import cast
from uuid import UUID

from patentflow.domain.errors.workflow import (
    AlreadyInStateError,
    NotAssignedError,
    NotAuthorizedError,
    PreconditionNotMetError,
    UnknownRoundError,
)
from patentflow.domain.events.timeline import hand_in_event_kind, review_event_kind
from patentflow.domain.models.patent import (
    Assignment,
    ExaminationRound,
    Patent,
    WorkUnit,
)
from patentflow.domain.models.transition import (
    TimelineEntryDraft,
    TransitionOutcome,
    TransitionRequest,
)
from patentflow.domain.models.workflow import (
    Actor,
    ActorRole,
    Stage,
    TrackId,
    TransitionKind,
    WorkItemRef,
)
from patentflow.domain.services.completion_aggregator import recompute
from patentflow.domain.services.status_model import (
    can_file,
    missing_drafting_gates,
    work_state,
)


@dataclass(frozen=True)
class _UnitChange:
    """What a handler decided, before roll-ups and bookkeeping."""

    unit: WorkUnit
    kind: str
    description: str
    deadline: date | None = None
    forms: Mapping[str, bool] | None = None


def unit_label(ref: WorkItemRef, unit: WorkUnit) -> str:
    """Display label such as ``PS``, ``CS`` or ``FER 2``."""
    if isinstance(unit, ExaminationRound):
        return f"FER {unit.sequence}"
    return cast(TrackId, ref.track).label


def slot_name(ref: WorkItemRef, unit: WorkUnit, stage: Stage) -> str:
    """Assignment slot name such as ``ps.drafter`` or ``fer-2.filer``."""
    owner = f"fer-{unit.sequence}" if isinstance(unit, ExaminationRound) else ref.prefix
    role = "drafter" if stage is Stage.DRAFT else "filer"
    return f"{owner}.{role}"


def resolve_unit(patent: Patent, ref: WorkItemRef) -> WorkUnit:
    """Look up the addressed unit.

    Raises:
        UnknownRoundError: If the round id is not on this patent.
        PreconditionNotMetError: If a round is addressed while examination
            is inactive (rounds are inert).
    """
    unit = patent.unit(ref)
    if unit is None:
        raise UnknownRoundError(patent.id, cast(UUID, ref.round_id))
    if ref.is_round and not patent.examination_active:
        raise PreconditionNotMetError("examination_active")
    return unit


def _require_assignee(
    assignment: Assignment, actor: Actor, ref: WorkItemRef, unit: WorkUnit, stage: Stage
) -> None:
    if not assignment.is_assigned_to(actor.name):
        raise NotAssignedError(actor.name, slot_name(ref, unit, stage), assignment.assignee)


def require_role(actor: Actor, *roles: ActorRole) -> None:
    """Raise NotAuthorizedError unless the actor acts in one of ``roles``."""
    if actor.role not in roles:
        raise NotAuthorizedError(actor.name, actor.role, tuple(roles))


def _reviewed_stage(request: TransitionRequest) -> Stage:
    if request.stage is None:
        raise ValueError(f"{request.kind.value} requires a stage")
    return request.stage


def _complete_drafting(
    patent: Patent, request: TransitionRequest, unit: WorkUnit, **_: object
) -> _UnitChange:
    ref = request.target
    missing = missing_drafting_gates(patent, ref)
    if missing:
        raise PreconditionNotMetError(missing[0])
    _require_assignee(unit.drafter, request.actor, ref, unit, Stage.DRAFT)
    if unit.drafting_done:
        raise AlreadyInStateError(work_state(unit))
    return _UnitChange(
        unit=replace(unit, drafting_done=True, drafting_under_review=True),
        kind=hand_in_event_kind(ref, Stage.DRAFT),
        description=f"{unit_label(ref, unit)} Drafting completed by {request.actor.name}",
        deadline=unit.drafter.deadline,
    )


def _complete_filing(
    patent: Patent, request: TransitionRequest, unit: WorkUnit, **_: object
) -> _UnitChange:
    ref = request.target
    if not can_file(unit):
        raise PreconditionNotMetError("drafting_done")
    _require_assignee(unit.filer, request.actor, ref, unit, Stage.FILE)
    if unit.filing_done:
        raise AlreadyInStateError(work_state(unit))
    return _UnitChange(
        unit=replace(unit, filing_done=True, filing_under_review=True),
        kind=hand_in_event_kind(ref, Stage.FILE),
        description=f"{unit_label(ref, unit)} Filing completed by {request.actor.name}",
        deadline=unit.filer.deadline,
        forms=request.form_flags or None,
    )


def _require_pending_review(ref: WorkItemRef, unit: WorkUnit, stage: Stage) -> None:
    """Raise unless the stage is awaiting review.

    Both outcomes that are not a pending review are distinguished: work
    never handed in is a precondition failure, while work already in the
    requested resting state is reported by the caller as a no-op.
    """
    if unit.is_under_review(stage):
        return
    label = f"{unit_label(ref, unit)} {stage.label}"
    if not unit.is_done(stage):
        token = "drafting_done" if stage is Stage.DRAFT else "filing_done"
        raise PreconditionNotMetError(token, f"{label} has not been handed in for review")
    token = "drafting_under_review" if stage is Stage.DRAFT else "filing_under_review"
    raise PreconditionNotMetError(token, f"{label} is not awaiting review")


def _approve_review(
    patent: Patent, request: TransitionRequest, unit: WorkUnit, **_: object
) -> _UnitChange:
    ref = request.target
    stage = _reviewed_stage(request)
    require_role(request.actor, ActorRole.ADMIN)
    if not unit.is_under_review(stage) and unit.is_done(stage):
        raise AlreadyInStateError(work_state(unit))
    _require_pending_review(ref, unit, stage)
    field_name = "drafting_under_review" if stage is Stage.DRAFT else "filing_under_review"
    return _UnitChange(
        unit=replace(unit, **{field_name: False}),
        kind=review_event_kind(ref, stage, approved=True),
        description=(
            f"{unit_label(ref, unit)} {stage.label} approved by {request.actor.name}"
        ),
        deadline=unit.assignment(stage).deadline,
    )


def _reject_review(
    patent: Patent,
    request: TransitionRequest,
    unit: WorkUnit,
    *,
    require_rejection_reason: bool = True,
    **_: object,
) -> _UnitChange:
    ref = request.target
    stage = _reviewed_stage(request)
    require_role(request.actor, ActorRole.ADMIN)
    if not unit.is_under_review(stage) and not unit.is_done(stage):
        raise AlreadyInStateError(work_state(unit), "Nothing handed in to reject")
    # a filing under review may be bounced all the way back to drafting
    filing_pending = stage is Stage.DRAFT and unit.filing_under_review
    if not filing_pending:
        _require_pending_review(ref, unit, stage)
    reason = request.reason or ""
    if require_rejection_reason and not reason.strip():
        raise PreconditionNotMetError("rejection_reason")

    cascaded = False
    if stage is Stage.DRAFT:
        updated = replace(unit, drafting_done=False, drafting_under_review=False)
        if unit.filing_done or unit.filing_under_review:
            # filing cannot stay done once drafting is bounced back
            updated = replace(updated, filing_done=False, filing_under_review=False)
            cascaded = True
    else:
        updated = replace(unit, filing_done=False, filing_under_review=False)

    description = (
        f"{unit_label(ref, unit)} {stage.label} rejected by {request.actor.name}"
    )
    if reason:
        description += f": {reason}"
    if cascaded:
        description += " (filing reset)"
    return _UnitChange(
        unit=updated,
        kind=review_event_kind(ref, stage, approved=False),
        description=description,
        deadline=unit.assignment(stage).deadline,
    )


_Handler = Callable[..., _UnitChange]

_HANDLERS: dict[TransitionKind, _Handler] = {
    TransitionKind.COMPLETE_DRAFTING: _complete_drafting,
    TransitionKind.COMPLETE_FILING: _complete_filing,
    TransitionKind.APPROVE_REVIEW: _approve_review,
    TransitionKind.REJECT_REVIEW: _reject_review,
}


def apply_transition(
    patent: Patent,
    request: TransitionRequest,
    *,
    empty_examination_complete: bool = False,
    require_rejection_reason: bool = True,
) -> TransitionOutcome:
    """Apply one transition to a patent in memory.

    Args:
        patent: The current patent.
        request: The transition to apply.
        empty_examination_complete: Roll-up policy for active examination
            with no rounds.
        require_rejection_reason: Reject blank rejection reasons.

    Returns:
        TransitionOutcome with the recomputed patent and the timeline entry.

    Raises:
        PreconditionNotMetError: A gate or upstream stage blocks the request.
        NotAssignedError: The actor is not the assignee of the slot.
        NotAuthorizedError: A review was requested by a non-admin.
        UnknownRoundError: The round is not on this patent.
        AlreadyInStateError: Nothing would change.
    """
    ref = request.target
    unit = resolve_unit(patent, ref)
    before = work_state(unit)

    change = _HANDLERS[request.kind](
        patent,
        request,
        unit,
        require_rejection_reason=require_rejection_reason,
    )

    updated = patent.with_unit(ref, change.unit)
    if change.forms:
        updated = updated.with_forms(change.forms)
    updated = recompute(updated, empty_examination_complete=empty_examination_complete)

    after = work_state(resolve_unit(updated, ref))

    return TransitionOutcome(
        patent=updated,
        entry=TimelineEntryDraft(
            patent_id=patent.id,
            kind=change.kind,
            description=f"{change.description} [{before.value} -> {after.value}]",
            actor_name=request.actor.name,
            deadline=change.deadline,
        ),
        before=before,
        after=after,
    )
