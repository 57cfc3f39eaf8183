"""Pure domain services for the patent workflow.

Everything here is synchronous and side-effect free. Persistence,
logging and timestamps belong to the application layer.
"""

from patentflow.domain.services.administration import (
    GATES,
    assign,
    create_round,
    mark_overall_completed,
    new_patent,
    set_examination_active,
    set_gate,
    set_withdrawn,
)
from patentflow.domain.services.completion_aggregator import (
    examination_is_complete,
    recompute,
)
from patentflow.domain.services.eligibility import resolve_task, resolve_tasks
from patentflow.domain.services.queues import (
    completed_drafting,
    completed_filing,
    drafting_queue,
    filing_queue,
    review_queue,
)
from patentflow.domain.services.status_model import (
    STATUS_LABELS,
    PatentStatus,
    can_file,
    can_start_cs_drafting,
    can_start_drafting,
    can_start_ps_drafting,
    determine_patent_status,
    is_stage_complete,
    missing_drafting_gates,
    work_state,
)
from patentflow.domain.services.transition_engine import apply_transition

__all__: list[str] = [
    "GATES",
    "STATUS_LABELS",
    "PatentStatus",
    "apply_transition",
    "assign",
    "can_file",
    "can_start_cs_drafting",
    "can_start_drafting",
    "can_start_ps_drafting",
    "completed_drafting",
    "completed_filing",
    "create_round",
    "determine_patent_status",
    "drafting_queue",
    "examination_is_complete",
    "filing_queue",
    "is_stage_complete",
    "mark_overall_completed",
    "missing_drafting_gates",
    "new_patent",
    "recompute",
    "resolve_task",
    "resolve_tasks",
    "review_queue",
    "set_examination_active",
    "set_gate",
    "set_withdrawn",
    "work_state",
]
