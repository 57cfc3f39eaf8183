"""Eligibility resolver: which task, if any, an actor has on a record.

Pure queries derived entirely from current state. A missing gate yields
no task rather than an error; callers that want to show "blocked,
waiting on X" use status_model.missing_drafting_gates.

Rules:
- drafter: assigned drafter, drafting not done, drafting gate holds.
- filer: assigned filer, filing not done, drafting done.
- admin: any under-review flag, tagged with which unit and stage.

Tie-break: when several tasks are eligible for one actor on one record,
the earliest in the pipeline wins: drafting before filing before review,
then PS before CS before rounds by sequence. Draft reviews on any unit
come before file reviews.
"""

from __future__ import annotations

from patentflow.domain.models.patent import ExaminationRound, Patent, WorkUnit
from patentflow.domain.models.task import TaskDescriptor
from patentflow.domain.models.workflow import (
    ActorRole,
    Stage,
    TaskKind,
    WorkItemRef,
)
from patentflow.domain.services.status_model import can_file, can_start_drafting


def _task(
    patent: Patent,
    kind: TaskKind,
    ref: WorkItemRef,
    unit: WorkUnit,
    stage: Stage,
) -> TaskDescriptor:
    sequence = unit.sequence if isinstance(unit, ExaminationRound) else None
    return TaskDescriptor(
        patent_id=patent.id,
        tracking_code=patent.tracking_code,
        kind=kind,
        target=ref,
        stage=stage,
        round_sequence=sequence,
        deadline=unit.assignment(stage).deadline,
    )


def _units(patent: Patent) -> list[tuple[WorkItemRef, WorkUnit]]:
    """Work units that can carry tasks. Rounds are inert while inactive."""
    return [
        (ref, unit)
        for ref, unit in patent.work_items()
        if not ref.is_round or patent.examination_active
    ]


def _drafting_tasks(patent: Patent, actor_name: str) -> list[TaskDescriptor]:
    return [
        _task(patent, TaskKind.PENDING_DRAFTING, ref, unit, Stage.DRAFT)
        for ref, unit in _units(patent)
        if unit.drafter.is_assigned_to(actor_name)
        and not unit.drafting_done
        and can_start_drafting(patent, ref)
    ]


def _filing_tasks(patent: Patent, actor_name: str) -> list[TaskDescriptor]:
    return [
        _task(patent, TaskKind.PENDING_FILING, ref, unit, Stage.FILE)
        for ref, unit in _units(patent)
        if unit.filer.is_assigned_to(actor_name)
        and not unit.filing_done
        and can_file(unit)
    ]


def _review_tasks(patent: Patent) -> list[TaskDescriptor]:
    tasks: list[TaskDescriptor] = []
    for stage in (Stage.DRAFT, Stage.FILE):
        for ref, unit in _units(patent):
            if unit.is_under_review(stage):
                tasks.append(_task(patent, TaskKind.PENDING_REVIEW, ref, unit, stage))
    return tasks


def resolve_tasks(
    patent: Patent, actor_name: str, actor_role: ActorRole
) -> list[TaskDescriptor]:
    """Return every task the actor currently has on the record, in pipeline order."""
    if actor_role is ActorRole.DRAFTER:
        return _drafting_tasks(patent, actor_name)
    if actor_role is ActorRole.FILER:
        return _filing_tasks(patent, actor_name)
    return _review_tasks(patent)


def resolve_task(
    patent: Patent, actor_name: str, actor_role: ActorRole
) -> TaskDescriptor | None:
    """Return the earliest-in-pipeline task for the actor, or None.

    Args:
        patent: A well-formed patent with its rounds.
        actor_name: The acting employee's name.
        actor_role: drafter, filer or admin.

    Returns:
        The task descriptor, or None when the actor has nothing to do.
    """
    tasks = resolve_tasks(patent, actor_name, actor_role)
    return tasks[0] if tasks else None
