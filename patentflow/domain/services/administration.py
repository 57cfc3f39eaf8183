"""Administrative patent operations.

Pure functions that compute a new patent plus the timeline entry for
one administrative change: creation, assignment, gate toggles,
withdrawal, examination activation, round creation and the manual
overall-completion checkpoint.

Like the transition engine, every function raises a WorkflowError on
refusal and AlreadyInStateError when nothing would change. Roll-ups are
recomputed before returning.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from uuid import UUID, uuid4

from patentflow.domain.errors.workflow import (
    AlreadyInStateError,
    PreconditionNotMetError,
)
from patentflow.domain.events.timeline import (
    ASSIGNMENT_UPDATED_EVENT_KIND,
    EXAMINATION_ACTIVATED_EVENT_KIND,
    EXAMINATION_DEACTIVATED_EVENT_KIND,
    FER_ROUND_CREATED_EVENT_KIND,
    PATENT_COMPLETED_EVENT_KIND,
    PATENT_CREATED_EVENT_KIND,
    PATENT_REINSTATED_EVENT_KIND,
    PATENT_WITHDRAWN_EVENT_KIND,
    gate_event_kind,
)
from patentflow.domain.models.patent import Assignment, ExaminationRound, Patent, Track
from patentflow.domain.models.transition import TimelineEntryDraft, TransitionOutcome
from patentflow.domain.models.workflow import Actor, ActorRole, Stage, WorkItemRef
from patentflow.domain.services.completion_aggregator import recompute
from patentflow.domain.services.transition_engine import (
    require_role,
    resolve_unit,
    slot_name,
    unit_label,
)

GATES: tuple[str, ...] = ("idf_sent", "idf_received", "cs_data_sent", "cs_data_received")

_GATE_LABELS: dict[str, str] = {
    "idf_sent": "IDF sent",
    "idf_received": "IDF received",
    "cs_data_sent": "CS Data sent",
    "cs_data_received": "CS Data received",
}

ROUND_CREATOR_ROLES: tuple[ActorRole, ...] = (ActorRole.ADMIN, ActorRole.FILER)


def _outcome(
    patent: Patent,
    kind: str,
    description: str,
    actor: Actor,
    *,
    deadline: date | None = None,
    empty_examination_complete: bool = False,
) -> TransitionOutcome:
    updated = recompute(patent, empty_examination_complete=empty_examination_complete)
    return TransitionOutcome(
        patent=updated,
        entry=TimelineEntryDraft(
            patent_id=updated.id,
            kind=kind,
            description=description,
            actor_name=actor.name,
            deadline=deadline,
        ),
    )


def new_patent(
    tracking_code: str,
    actor: Actor,
    now: datetime,
    *,
    title: str = "",
    applicant: str = "",
    ps_drafter: Assignment | None = None,
    ps_filer: Assignment | None = None,
    cs_drafter: Assignment | None = None,
    cs_filer: Assignment | None = None,
    idf_sent: bool = False,
    patent_id: UUID | None = None,
) -> TransitionOutcome:
    """Build a fresh patent with both tracks not started.

    Tracking-code uniqueness is a storage concern and is checked by the
    caller.
    """
    require_role(actor, ActorRole.ADMIN)
    patent = Patent(
        id=patent_id or uuid4(),
        tracking_code=tracking_code.strip(),
        title=title,
        applicant=applicant,
        ps=Track(drafter=ps_drafter or Assignment(), filer=ps_filer or Assignment()),
        cs=Track(drafter=cs_drafter or Assignment(), filer=cs_filer or Assignment()),
        idf_sent=idf_sent,
        created_at=now,
        updated_at=now,
    )
    return _outcome(
        patent,
        PATENT_CREATED_EVENT_KIND,
        f"Patent {patent.tracking_code} created by {actor.name}",
        actor,
    )


def assign(
    patent: Patent,
    ref: WorkItemRef,
    stage: Stage,
    assignment: Assignment,
    actor: Actor,
    *,
    empty_examination_complete: bool = False,
) -> TransitionOutcome:
    """Set the drafter (``Stage.DRAFT``) or filer (``Stage.FILE``) of a unit."""
    require_role(actor, ActorRole.ADMIN)
    unit = resolve_unit(patent, ref)
    current = unit.assignment(stage)
    if current == assignment:
        raise AlreadyInStateError("assigned", f"{slot_name(ref, unit, stage)} is unchanged")

    field_name = "drafter" if stage is Stage.DRAFT else "filer"
    updated = patent.with_unit(ref, replace(unit, **{field_name: assignment}))
    assignee = assignment.assignee or "nobody"
    description = (
        f"{unit_label(ref, unit)} {field_name} set to {assignee} by {actor.name}"
    )
    if assignment.deadline is not None:
        description += f" (due {assignment.deadline.isoformat()})"
    return _outcome(
        updated,
        ASSIGNMENT_UPDATED_EVENT_KIND,
        description,
        actor,
        deadline=assignment.deadline,
        empty_examination_complete=empty_examination_complete,
    )


def set_gate(
    patent: Patent,
    gate: str,
    value: bool,
    actor: Actor,
    *,
    empty_examination_complete: bool = False,
) -> TransitionOutcome:
    """Toggle one of the patent-level gating flags.

    Raises:
        ValueError: If ``gate`` is not one of GATES.
    """
    if gate not in GATES:
        raise ValueError(f"Unknown gate: {gate!r}")
    require_role(actor, ActorRole.ADMIN)
    if getattr(patent, gate) == value:
        raise AlreadyInStateError(gate)
    state = "set" if value else "cleared"
    return _outcome(
        replace(patent, **{gate: value}),
        gate_event_kind(gate),
        f"{_GATE_LABELS[gate]} {state} by {actor.name}",
        actor,
        empty_examination_complete=empty_examination_complete,
    )


def set_withdrawn(
    patent: Patent,
    withdrawn: bool,
    actor: Actor,
    *,
    empty_examination_complete: bool = False,
) -> TransitionOutcome:
    require_role(actor, ActorRole.ADMIN)
    if patent.withdrawn == withdrawn:
        raise AlreadyInStateError("withdrawn" if withdrawn else "active")
    if withdrawn:
        kind, verb = PATENT_WITHDRAWN_EVENT_KIND, "withdrawn"
    else:
        kind, verb = PATENT_REINSTATED_EVENT_KIND, "reinstated"
    return _outcome(
        replace(patent, withdrawn=withdrawn),
        kind,
        f"Patent {patent.tracking_code} {verb} by {actor.name}",
        actor,
        empty_examination_complete=empty_examination_complete,
    )


def set_examination_active(
    patent: Patent,
    active: bool,
    actor: Actor,
    *,
    empty_examination_complete: bool = False,
) -> TransitionOutcome:
    """Activate or deactivate further examination.

    Deactivation resets every round through the completion aggregator.
    """
    require_role(actor, ActorRole.ADMIN)
    if patent.examination_active == active:
        raise AlreadyInStateError("active" if active else "inactive")
    if active:
        kind, verb = EXAMINATION_ACTIVATED_EVENT_KIND, "activated"
    else:
        kind, verb = EXAMINATION_DEACTIVATED_EVENT_KIND, "deactivated"
    return _outcome(
        replace(patent, examination_active=active),
        kind,
        f"Further examination {verb} by {actor.name}",
        actor,
        empty_examination_complete=empty_examination_complete,
    )


def create_round(
    patent: Patent,
    actor: Actor,
    now: datetime,
    *,
    drafter: Assignment | None = None,
    filer: Assignment | None = None,
    issued_on: date | None = None,
    round_id: UUID | None = None,
    empty_examination_complete: bool = False,
) -> TransitionOutcome:
    """Open the next examination round.

    The sequence number is derived from the patent as loaded, so callers
    must run this under per-patent serialization to keep numbering dense.

    Raises:
        NotAuthorizedError: If the actor is neither admin nor filer.
        PreconditionNotMetError: If examination is not active.
    """
    require_role(actor, *ROUND_CREATOR_ROLES)
    if not patent.examination_active:
        raise PreconditionNotMetError("examination_active")

    sequence = patent.next_round_sequence()
    examination_round = ExaminationRound(
        id=round_id or uuid4(),
        sequence=sequence,
        drafter=drafter or Assignment(),
        filer=filer or Assignment(),
        issued_on=issued_on,
        created_at=now,
    )
    updated = replace(patent, rounds=(*patent.rounds, examination_round))
    return _outcome(
        updated,
        FER_ROUND_CREATED_EVENT_KIND,
        f"FER {sequence} created by {actor.name}",
        actor,
        deadline=examination_round.drafter.deadline,
        empty_examination_complete=empty_examination_complete,
    )


def mark_overall_completed(
    patent: Patent,
    actor: Actor,
    *,
    empty_examination_complete: bool = False,
) -> TransitionOutcome:
    """The manual overall-completion checkpoint.

    Raises:
        PreconditionNotMetError: With ``ps_stage_complete``,
            ``cs_stage_complete`` or ``examination_completion``.
    """
    require_role(actor, ActorRole.ADMIN)
    if patent.overall_completed:
        raise AlreadyInStateError("completed")
    current = recompute(patent, empty_examination_complete=empty_examination_complete)
    if not current.ps.stage_complete:
        raise PreconditionNotMetError("ps_stage_complete")
    if not current.cs.stage_complete:
        raise PreconditionNotMetError("cs_stage_complete")
    if not current.examination_completion:
        raise PreconditionNotMetError("examination_completion")
    return _outcome(
        replace(current, overall_completed=True),
        PATENT_COMPLETED_EVENT_KIND,
        f"Patent {patent.tracking_code} marked completed by {actor.name}",
        actor,
        empty_examination_complete=empty_examination_complete,
    )
