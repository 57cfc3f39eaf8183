"""Queue builders: role-scoped views over the full record set.

Each queue is a filter + map over the eligibility resolver, recomputed on
demand and never cached. Drafters and filers get at most one task per
patent, the earliest in the pipeline. The review queue lists every
pending review, so two units awaiting review on one patent give two
entries. Withdrawn patents are excluded from every queue.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from patentflow.domain.models.patent import ExaminationRound, Patent
from patentflow.domain.models.task import CompletedWork, TaskDescriptor
from patentflow.domain.models.workflow import ActorRole, Stage
from patentflow.domain.services.eligibility import resolve_task, resolve_tasks


def _in_progress(patents: Iterable[Patent]) -> Iterator[Patent]:
    return (patent for patent in patents if not patent.withdrawn)


def _queue(
    patents: Iterable[Patent], actor_name: str, role: ActorRole
) -> list[TaskDescriptor]:
    tasks = (resolve_task(patent, actor_name, role) for patent in _in_progress(patents))
    return [task for task in tasks if task is not None]


def drafting_queue(patents: Iterable[Patent], actor_name: str) -> list[TaskDescriptor]:
    """Pending drafting tasks for a drafter, in input order."""
    return _queue(patents, actor_name, ActorRole.DRAFTER)


def filing_queue(patents: Iterable[Patent], actor_name: str) -> list[TaskDescriptor]:
    """Pending filing tasks for a filer, in input order."""
    return _queue(patents, actor_name, ActorRole.FILER)


def review_queue(patents: Iterable[Patent], actor_name: str = "") -> list[TaskDescriptor]:
    """Pending reviews across all patents.

    Every unit and stage under review is listed, in pipeline order within
    a patent. Any administrator sees the same queue; ``actor_name`` is
    accepted for symmetry with the other builders.
    """
    return [
        task
        for patent in _in_progress(patents)
        for task in resolve_tasks(patent, actor_name, ActorRole.ADMIN)
    ]


def _completed(
    patents: Iterable[Patent], actor_name: str, stage: Stage
) -> list[CompletedWork]:
    completed: list[CompletedWork] = []
    for patent in _in_progress(patents):
        for ref, unit in patent.work_items():
            if ref.is_round and not patent.examination_active:
                continue
            if not unit.assignment(stage).is_assigned_to(actor_name):
                continue
            if not unit.is_done(stage):
                continue
            completed.append(
                CompletedWork(
                    patent_id=patent.id,
                    tracking_code=patent.tracking_code,
                    target=ref,
                    stage=stage,
                    under_review=unit.is_under_review(stage),
                    round_sequence=(
                        unit.sequence if isinstance(unit, ExaminationRound) else None
                    ),
                )
            )
    return completed


def completed_drafting(patents: Iterable[Patent], actor_name: str) -> list[CompletedWork]:
    """Drafting the actor has handed in, approved or still under review."""
    return _completed(patents, actor_name, Stage.DRAFT)


def completed_filing(patents: Iterable[Patent], actor_name: str) -> list[CompletedWork]:
    """Filing the actor has handed in, approved or still under review."""
    return _completed(patents, actor_name, Stage.FILE)
