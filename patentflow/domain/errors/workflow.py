"""Workflow transition errors.

Domain services raise these errors; the workflow service boundary catches
them and returns typed results so callers can render actionable messages
such as "CS Data must be received before CS Drafting can be completed".

None of these errors is retryable: each one needs a different input.
"""

from __future__ import annotations

from uuid import UUID

from patentflow.domain.exceptions import WorkflowError
from patentflow.domain.models.workflow import ActorRole, WorkState

# Missing-prerequisite tokens -> user-facing messages
PRECONDITION_MESSAGES: dict[str, str] = {
    "idf_received": "IDF must be received before PS Drafting can be completed",
    "cs_data_sent": "CS Data must be sent before CS Drafting can be completed",
    "cs_data_received": "CS Data must be received before CS Drafting can be completed",
    "drafting_done": "Drafting must be completed before Filing can be completed",
    "drafting_under_review": "Drafting is not awaiting review",
    "filing_under_review": "Filing is not awaiting review",
    "examination_active": "Further examination is not active for this patent",
    "ps_stage_complete": "PS stage must be complete before the patent can be completed",
    "cs_stage_complete": "CS stage must be complete before the patent can be completed",
    "examination_completion": (
        "All examination rounds must be complete before the patent can be completed"
    ),
    "rejection_reason": "A rejection reason is required",
}


class PreconditionNotMetError(WorkflowError):
    """Raised when a gate or upstream stage blocks a transition.

    Attributes:
        missing: Stable token naming the missing prerequisite.
    """

    def __init__(self, missing: str, message: str | None = None) -> None:
        self.missing = missing
        super().__init__(
            message or PRECONDITION_MESSAGES.get(missing, f"Prerequisite not met: {missing}")
        )


class NotAssignedError(WorkflowError):
    """Raised when the actor is not the recorded assignee for a slot.

    Attributes:
        actor_name: The employee who attempted the transition.
        slot: Slot name, e.g. ``ps.drafter`` or ``fer-2.filer``.
        assignee: The recorded assignee, if any.
    """

    def __init__(self, actor_name: str, slot: str, assignee: str | None) -> None:
        self.actor_name = actor_name
        self.slot = slot
        self.assignee = assignee
        recorded = assignee if assignee else "nobody"
        super().__init__(
            f"{actor_name} is not assigned to {slot} (assigned: {recorded})"
        )


class NotAuthorizedError(WorkflowError):
    """Raised when the actor's role does not permit the operation.

    Attributes:
        actor_name: The employee who attempted the operation.
        role: The role the employee acted in.
        required: Roles that may perform the operation.
    """

    def __init__(
        self, actor_name: str, role: ActorRole, required: tuple[ActorRole, ...]
    ) -> None:
        self.actor_name = actor_name
        self.role = role
        self.required = required
        allowed = ", ".join(r.value for r in required)
        super().__init__(
            f"{actor_name} acting as {role.value} cannot perform this operation "
            f"(requires: {allowed})"
        )


class UnknownRoundError(WorkflowError):
    """Raised when a round id is not found under the patent.

    Attributes:
        patent_id: The patent searched.
        round_id: The round id that was not found.
    """

    def __init__(self, patent_id: UUID, round_id: UUID) -> None:
        self.patent_id = patent_id
        self.round_id = round_id
        super().__init__(f"Examination round {round_id} not found on patent {patent_id}")


class AlreadyInStateError(WorkflowError):
    """Raised when a request would not change anything.

    The workflow service treats this as a successful no-op, never as a
    failure.

    Attributes:
        state: The state the work unit is already in.
    """

    def __init__(self, state: WorkState | str, message: str | None = None) -> None:
        self.state = state
        label = state.value if isinstance(state, WorkState) else state
        super().__init__(message or f"Already in state: {label}")


class PatentNotFoundError(WorkflowError):
    """Raised when a patent cannot be loaded.

    Attributes:
        patent_id: The patent id that was not found.
    """

    def __init__(self, patent_id: UUID) -> None:
        self.patent_id = patent_id
        super().__init__(f"Patent not found: {patent_id}")


class DuplicateTrackingCodeError(WorkflowError):
    """Raised when creating a patent with a tracking code already in use.

    Attributes:
        tracking_code: The conflicting tracking code.
    """

    def __init__(self, tracking_code: str) -> None:
        self.tracking_code = tracking_code
        super().__init__(f"Tracking code already in use: {tracking_code}")
