"""Workflow service: the entry point for the four workflow transitions.

Each call receives an explicit Actor; nothing here reads an ambient
identity. Every call returns a TransitionResult and never raises a
WorkflowError:

- applied: the new patent was saved and one timeline event appended
- unchanged: the request was an idempotent no-op; nothing was written
- failed: a precondition, assignment or role check refused the request,
  or storage failed (the only retryable case)
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import partial
from uuid import UUID

from patentflow.application.dtos.transition_result import TransitionResult
from patentflow.application.services.boundary import WorkflowBoundary
from patentflow.domain.models.transition import TransitionRequest
from patentflow.domain.models.workflow import Actor, Stage, WorkItemRef
from patentflow.domain.services.transition_engine import apply_transition


class WorkflowService(WorkflowBoundary):
    """Applies workflow transitions atomically per patent.

    Example:
        result = await service.complete_drafting(patent_id, PS, drafter)
        if not result.ok:
            show(result.message)  # "IDF must be received before ..."
    """

    async def apply(self, patent_id: UUID, request: TransitionRequest) -> TransitionResult:
        """Apply any transition request.

        Args:
            patent_id: The patent to transition.
            request: The tagged transition request.

        Returns:
            TransitionResult (applied, unchanged or failed).
        """
        compute = partial(
            apply_transition,
            request=request,
            empty_examination_complete=self._config.empty_examination_complete,
            require_rejection_reason=self._config.require_rejection_reason,
        )
        return await self._execute(
            request.kind.value,
            patent_id,
            compute,
            target=request.target.prefix,
            round_id=str(request.target.round_id) if request.target.round_id else None,
            stage=request.stage.value if request.stage else None,
            actor=request.actor.name,
            role=request.actor.role.value,
        )

    async def complete_drafting(
        self, patent_id: UUID, target: WorkItemRef, actor: Actor
    ) -> TransitionResult:
        return await self.apply(patent_id, TransitionRequest.complete_drafting(target, actor))

    async def complete_filing(
        self,
        patent_id: UUID,
        target: WorkItemRef,
        actor: Actor,
        form_flags: Mapping[str, bool] | None = None,
    ) -> TransitionResult:
        """Hand in filing, merging the optional form flags into the patent."""
        return await self.apply(
            patent_id, TransitionRequest.complete_filing(target, actor, form_flags)
        )

    async def approve_review(
        self, patent_id: UUID, target: WorkItemRef, stage: Stage, actor: Actor
    ) -> TransitionResult:
        return await self.apply(
            patent_id, TransitionRequest.approve_review(target, stage, actor)
        )

    async def reject_review(
        self,
        patent_id: UUID,
        target: WorkItemRef,
        stage: Stage,
        actor: Actor,
        reason: str,
    ) -> TransitionResult:
        """Bounce a stage back to its assignee.

        Rejecting drafting also resets filing when filing had been handed
        in. The reason is recorded verbatim on the timeline.
        """
        return await self.apply(
            patent_id, TransitionRequest.reject_review(target, stage, actor, reason)
        )
