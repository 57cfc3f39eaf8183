"""Patent administration service.

Administrative operations (creation, assignment, gates, withdrawal,
examination, rounds, overall completion) share the workflow service's
atomic persist path: one serialized read-modify-write per patent, one
timeline event per change, typed results instead of exceptions.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from patentflow.application.dtos.transition_result import TransitionResult
from patentflow.application.services.boundary import WorkflowBoundary
from patentflow.domain.exceptions import WorkflowError
from patentflow.domain.models.patent import Assignment, Patent
from patentflow.domain.models.transition import TransitionOutcome
from patentflow.domain.models.workflow import Actor, Stage, WorkItemRef
from patentflow.domain.services import administration


class PatentAdministrationService(WorkflowBoundary):
    """Admin-side operations on patents."""

    async def create_patent(
        self,
        tracking_code: str,
        actor: Actor,
        *,
        title: str = "",
        applicant: str = "",
        ps_drafter: Assignment | None = None,
        ps_filer: Assignment | None = None,
        cs_drafter: Assignment | None = None,
        cs_filer: Assignment | None = None,
        idf_sent: bool = False,
    ) -> TransitionResult:
        """Create a patent with both tracks not started.

        Fails with DuplicateTrackingCodeError when the code is taken.

        Raises:
            ValueError: If ``tracking_code`` is blank.
        """
        try:
            outcome = administration.new_patent(
                tracking_code,
                actor,
                self._time.utcnow(),
                title=title,
                applicant=applicant,
                ps_drafter=ps_drafter,
                ps_filer=ps_filer,
                cs_drafter=cs_drafter,
                cs_filer=cs_filer,
                idf_sent=idf_sent,
            )
        except WorkflowError as exc:
            log = self._log_operation("create_patent", tracking_code=tracking_code)
            return self._refused("create_patent", log, exc)
        return await self._execute_create(
            "create_patent", outcome, tracking_code=outcome.patent.tracking_code
        )

    async def assign(
        self,
        patent_id: UUID,
        target: WorkItemRef,
        stage: Stage,
        assignee: str | None,
        actor: Actor,
        deadline: date | None = None,
    ) -> TransitionResult:
        """Set the drafter (DRAFT) or filer (FILE) of a track or round."""
        assignment = Assignment(assignee=assignee, deadline=deadline)

        def compute(patent: Patent) -> TransitionOutcome:
            return administration.assign(
                patent,
                target,
                stage,
                assignment,
                actor,
                empty_examination_complete=self._config.empty_examination_complete,
            )

        return await self._execute(
            "assign", patent_id, compute, target=target.prefix, stage=stage.value
        )

    async def set_gate(
        self, patent_id: UUID, gate: str, value: bool, actor: Actor
    ) -> TransitionResult:
        """Set or clear idf_sent, idf_received, cs_data_sent or cs_data_received.

        Raises:
            ValueError: If ``gate`` is not a known gate.
        """
        if gate not in administration.GATES:
            raise ValueError(f"Unknown gate: {gate!r}")

        def compute(patent: Patent) -> TransitionOutcome:
            return administration.set_gate(
                patent,
                gate,
                value,
                actor,
                empty_examination_complete=self._config.empty_examination_complete,
            )

        return await self._execute("set_gate", patent_id, compute, gate=gate, value=value)

    async def set_withdrawn(
        self, patent_id: UUID, withdrawn: bool, actor: Actor
    ) -> TransitionResult:
        def compute(patent: Patent) -> TransitionOutcome:
            return administration.set_withdrawn(
                patent,
                withdrawn,
                actor,
                empty_examination_complete=self._config.empty_examination_complete,
            )

        return await self._execute(
            "set_withdrawn", patent_id, compute, withdrawn=withdrawn
        )

    async def set_examination_active(
        self, patent_id: UUID, active: bool, actor: Actor
    ) -> TransitionResult:
        """Activate or deactivate further examination (deactivation resets rounds)."""

        def compute(patent: Patent) -> TransitionOutcome:
            return administration.set_examination_active(
                patent,
                active,
                actor,
                empty_examination_complete=self._config.empty_examination_complete,
            )

        return await self._execute(
            "set_examination_active", patent_id, compute, active=active
        )

    async def create_round(
        self,
        patent_id: UUID,
        actor: Actor,
        *,
        drafter: Assignment | None = None,
        filer: Assignment | None = None,
        issued_on: date | None = None,
    ) -> TransitionResult:
        """Open the next examination round.

        The sequence number is taken inside the serialized write, so
        concurrent callers always produce dense numbering.
        """

        def compute(patent: Patent) -> TransitionOutcome:
            return administration.create_round(
                patent,
                actor,
                self._time.utcnow(),
                drafter=drafter,
                filer=filer,
                issued_on=issued_on,
                empty_examination_complete=self._config.empty_examination_complete,
            )

        return await self._execute("create_round", patent_id, compute, actor=actor.name)

    async def mark_overall_completed(self, patent_id: UUID, actor: Actor) -> TransitionResult:
        """Manual checkpoint; needs both tracks complete and examination complete."""

        def compute(patent: Patent) -> TransitionOutcome:
            return administration.mark_overall_completed(
                patent,
                actor,
                empty_examination_complete=self._config.empty_examination_complete,
            )

        return await self._execute("mark_overall_completed", patent_id, compute)
