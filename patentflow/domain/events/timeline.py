"""Timeline event-kind vocabulary.

Event kinds are stable strings used for audit descriptions and
downstream filtering. Hand-in kinds follow ``{prefix}_draft_completed`` /
``{prefix}_filing_completed``; review outcomes follow
``{stage}_approved`` / ``{stage}_rejected`` where stage is one of
``ps_draft``, ``ps_file``, ``cs_draft``, ``cs_file``, ``fer_draft``,
``fer_file``.
"""

from __future__ import annotations

from patentflow.domain.models.workflow import Stage, WorkItemRef

PATENT_CREATED_EVENT_KIND: str = "patent_created"
ASSIGNMENT_UPDATED_EVENT_KIND: str = "assignment_updated"
PATENT_WITHDRAWN_EVENT_KIND: str = "patent_withdrawn"
PATENT_REINSTATED_EVENT_KIND: str = "patent_reinstated"
EXAMINATION_ACTIVATED_EVENT_KIND: str = "examination_activated"
EXAMINATION_DEACTIVATED_EVENT_KIND: str = "examination_deactivated"
FER_ROUND_CREATED_EVENT_KIND: str = "fer_round_created"
PATENT_COMPLETED_EVENT_KIND: str = "patent_completed"


def stage_name(ref: WorkItemRef, stage: Stage) -> str:
    """Return the review stage name, e.g. ``cs_file``."""
    return f"{ref.prefix}_{stage.value}"


def hand_in_event_kind(ref: WorkItemRef, stage: Stage) -> str:
    """Event kind for an assignee marking a stage done."""
    suffix = "draft_completed" if stage is Stage.DRAFT else "filing_completed"
    return f"{ref.prefix}_{suffix}"


def review_event_kind(ref: WorkItemRef, stage: Stage, *, approved: bool) -> str:
    """Event kind for an administrator's review outcome."""
    outcome = "approved" if approved else "rejected"
    return f"{stage_name(ref, stage)}_{outcome}"


def gate_event_kind(gate: str) -> str:
    """Event kind for a gating flag change, e.g. ``idf_received_updated``."""
    return f"{gate}_updated"
