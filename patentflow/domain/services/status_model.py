"""Status model predicates and derived display status.

Pure, total functions over well-formed records. Every other component
asks these predicates instead of reading gating flags directly.
"""

from __future__ import annotations

from enum import Enum

from patentflow.domain.models.patent import Patent, WorkUnit
from patentflow.domain.models.workflow import TrackId, WorkItemRef, WorkState


def can_start_ps_drafting(patent: Patent) -> bool:
    """PS drafting may be handed in only once the IDF is received."""
    return patent.idf_received


def can_start_cs_drafting(patent: Patent) -> bool:
    """CS drafting needs CS data both sent and received."""
    return patent.cs_data_sent and patent.cs_data_received


def can_file(unit: WorkUnit) -> bool:
    """Filing may be handed in only while drafting is done."""
    return unit.drafting_done


def is_stage_complete(unit: WorkUnit) -> bool:
    """Both stages done and neither awaiting review."""
    return (
        unit.drafting_done
        and unit.filing_done
        and not unit.drafting_under_review
        and not unit.filing_under_review
    )


def missing_drafting_gates(patent: Patent, ref: WorkItemRef) -> tuple[str, ...]:
    """Return the gate tokens blocking drafting on a work unit, in order.

    An empty tuple means drafting may be handed in. Callers may surface a
    non-empty result as "blocked, waiting on X".
    """
    if ref.is_round:
        return () if patent.examination_active else ("examination_active",)
    if ref.track is TrackId.PS:
        return () if can_start_ps_drafting(patent) else ("idf_received",)
    missing: list[str] = []
    if not patent.cs_data_sent:
        missing.append("cs_data_sent")
    if not patent.cs_data_received:
        missing.append("cs_data_received")
    return tuple(missing)


def can_start_drafting(patent: Patent, ref: WorkItemRef) -> bool:
    return not missing_drafting_gates(patent, ref)


def work_state(unit: WorkUnit) -> WorkState:
    """Project the four stored flags onto a lifecycle state.

    Inconsistent combinations (filing flags without drafting) cannot be
    produced by the engine; they project to the furthest drafting state
    the flags support.
    """
    if not unit.drafting_done:
        return WorkState.DRAFTING if unit.drafter.assignee else WorkState.NOT_STARTED
    if unit.drafting_under_review:
        return WorkState.DRAFT_UNDER_REVIEW
    if not unit.filing_done:
        return WorkState.FILING if unit.filer.assignee else WorkState.DRAFTED
    if unit.filing_under_review:
        return WorkState.FILE_UNDER_REVIEW
    return WorkState.COMPLETE


class PatentStatus(str, Enum):
    """Single display status per patent, from the priority ladder."""

    WITHDRAWN = "withdrawn"
    COMPLETED = "completed"
    CS_COMPLETED = "cs_completed"
    CS_FILING_APPROVAL = "cs_filing_approval"
    CS_FILING = "cs_filing"
    CS_DRAFTING_APPROVAL = "cs_drafting_approval"
    CS_DRAFTING = "cs_drafting"
    CS_DATA_RECEIVED = "cs_data_received"
    CS_DATA_SENT = "cs_data_sent"
    PS_COMPLETED = "ps_completed"
    PS_FILING_APPROVAL = "ps_filing_approval"
    PS_FILING = "ps_filing"
    PS_DRAFTING_APPROVAL = "ps_drafting_approval"
    PS_DRAFTING = "ps_drafting"
    IDF_RECEIVED = "idf_received"
    IDF_SENT = "idf_sent"


STATUS_LABELS: dict[PatentStatus, str] = {
    PatentStatus.WITHDRAWN: "Patent withdrawn",
    PatentStatus.COMPLETED: "Patent process completed",
    PatentStatus.CS_COMPLETED: "CS section fully completed",
    PatentStatus.CS_FILING_APPROVAL: "CS filing pending review/approval",
    PatentStatus.CS_FILING: "CS being filed",
    PatentStatus.CS_DRAFTING_APPROVAL: "CS draft pending review/approval",
    PatentStatus.CS_DRAFTING: "CS being drafted",
    PatentStatus.CS_DATA_RECEIVED: "CS data received from client",
    PatentStatus.CS_DATA_SENT: "CS data sent to client",
    PatentStatus.PS_COMPLETED: "PS section fully completed",
    PatentStatus.PS_FILING_APPROVAL: "PS filing pending review/approval",
    PatentStatus.PS_FILING: "PS being filed",
    PatentStatus.PS_DRAFTING_APPROVAL: "PS draft pending review/approval",
    PatentStatus.PS_DRAFTING: "PS being drafted",
    PatentStatus.IDF_RECEIVED: "IDF received, ready for PS drafting",
    PatentStatus.IDF_SENT: "Patent waiting for IDF to be received",
}


def _track_status(patent: Patent, track_id: TrackId) -> PatentStatus | None:
    track = patent.track(track_id)
    prefix = track_id.value.upper()
    if track.stage_complete:
        return PatentStatus[f"{prefix}_COMPLETED"]
    if track.filing_done:
        if track.filing_under_review:
            return PatentStatus[f"{prefix}_FILING_APPROVAL"]
        return PatentStatus[f"{prefix}_FILING"]
    if track.drafting_done:
        if track.drafting_under_review:
            return PatentStatus[f"{prefix}_DRAFTING_APPROVAL"]
        return PatentStatus[f"{prefix}_DRAFTING"]
    return None


def determine_patent_status(patent: Patent) -> PatentStatus:
    """Return exactly one status, highest priority first.

    Terminal flags win, then the CS track, then CS data gates, then the
    PS track, then the IDF gate.
    """
    if patent.withdrawn:
        return PatentStatus.WITHDRAWN
    if patent.overall_completed:
        return PatentStatus.COMPLETED

    cs_status = _track_status(patent, TrackId.CS)
    if cs_status is not None:
        return cs_status
    if patent.cs_data_received:
        return PatentStatus.CS_DATA_RECEIVED
    if patent.cs_data_sent:
        return PatentStatus.CS_DATA_SENT

    ps_status = _track_status(patent, TrackId.PS)
    if ps_status is not None:
        return ps_status
    if patent.idf_received:
        return PatentStatus.IDF_RECEIVED
    return PatentStatus.IDF_SENT
