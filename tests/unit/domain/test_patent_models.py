"""Unit tests for patent, round, request and timeline models."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date, datetime, timezone
from uuid import uuid4

import pytest

from patentflow.domain.models.patent import Assignment, ExaminationRound
from patentflow.domain.models.timeline_event import TimelineEvent
from patentflow.domain.models.transition import TransitionRequest
from patentflow.domain.models.workflow import (
    CS,
    PS,
    Actor,
    ActorRole,
    Stage,
    TrackId,
    TransitionKind,
    WorkItemRef,
)
from tests.helpers import DRAFTER, FILER, make_patent, make_round


class TestActorAndRefs:
    """Tests for actors and work-item references."""

    def test_actor_name_required(self) -> None:
        with pytest.raises(ValueError):
            Actor("  ", ActorRole.ADMIN)

    def test_ref_needs_exactly_one_target(self) -> None:
        with pytest.raises(ValueError):
            WorkItemRef()
        with pytest.raises(ValueError):
            WorkItemRef(track=TrackId.PS, round_id=uuid4())

    def test_prefixes(self) -> None:
        assert PS.prefix == "ps"
        assert CS.prefix == "cs"
        assert WorkItemRef.for_round(uuid4()).prefix == "fer"


class TestPatent:
    """Tests for the patent root record."""

    def test_is_frozen(self) -> None:
        patent = make_patent()
        with pytest.raises(FrozenInstanceError):
            patent.withdrawn = True  # type: ignore[misc]

    def test_work_items_in_pipeline_order(self) -> None:
        second = make_round(2)
        first = make_round(1)
        patent = make_patent(examination_active=True, rounds=(second, first))

        refs = [ref for ref, _ in patent.work_items()]

        assert refs == [
            PS,
            CS,
            WorkItemRef.for_round(first.id),
            WorkItemRef.for_round(second.id),
        ]

    def test_with_round_replaces_by_id(self) -> None:
        examination_round = make_round(1)
        patent = make_patent(examination_active=True, rounds=(examination_round,))

        updated = patent.with_round(examination_round.reset())

        assert updated.find_round(examination_round.id) == examination_round.reset()
        assert updated.find_round(uuid4()) is None

    def test_with_unit_rejects_mismatched_unit(self) -> None:
        """A round cannot replace a track, nor a track a round."""
        examination_round = make_round(1)
        patent = make_patent(examination_active=True, rounds=(examination_round,))

        with pytest.raises(TypeError):
            patent.with_unit(PS, examination_round)
        with pytest.raises(TypeError):
            patent.with_unit(WorkItemRef.for_round(examination_round.id), patent.ps)

    def test_unit_lookup(self) -> None:
        examination_round = make_round(1)
        patent = make_patent(examination_active=True, rounds=(examination_round,))

        assert patent.unit(CS) == patent.cs
        assert patent.unit(WorkItemRef.for_round(examination_round.id)) == examination_round
        assert patent.unit(WorkItemRef.for_round(uuid4())) is None

    def test_forms_merge(self) -> None:
        patent = make_patent().with_forms({"form_1": True})
        merged = patent.with_forms({"form_2": False})
        assert dict(merged.forms) == {"form_1": True, "form_2": False}

    def test_round_sequence_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            ExaminationRound(sequence=0)

    def test_assignment_matching(self) -> None:
        assert Assignment("Dana").is_assigned_to("Dana")
        assert not Assignment().is_assigned_to("Dana")


class TestTransitionRequest:
    """Tests for transition request construction."""

    def test_review_needs_stage(self) -> None:
        with pytest.raises(ValueError, match="requires a stage"):
            TransitionRequest(
                kind=TransitionKind.APPROVE_REVIEW, target=PS, actor=DRAFTER
            )

    def test_form_flags_only_on_filing(self) -> None:
        with pytest.raises(ValueError):
            TransitionRequest(
                kind=TransitionKind.COMPLETE_DRAFTING,
                target=PS,
                actor=DRAFTER,
                form_flags={"form_1": True},
            )

    def test_form_flags_must_be_booleans(self) -> None:
        with pytest.raises(TypeError):
            TransitionRequest.complete_filing(PS, FILER, {"form_1": 1})  # type: ignore[dict-item]

    def test_factories(self) -> None:
        request = TransitionRequest.reject_review(CS, Stage.FILE, DRAFTER, "why")
        assert request.kind is TransitionKind.REJECT_REVIEW
        assert request.stage is Stage.FILE
        assert request.reason == "why"


class TestTimelineEvent:
    """Tests for timeline events."""

    def test_to_dict(self) -> None:
        event = TimelineEvent(
            id=uuid4(),
            patent_id=uuid4(),
            kind="ps_draft_completed",
            description="PS Drafting completed by Dana",
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            actor_name="Dana",
            deadline=date(2026, 2, 1),
        )

        data = event.to_dict()

        assert data["kind"] == "ps_draft_completed"
        assert data["created_at"] == "2026-01-01T00:00:00+00:00"
        assert data["deadline"] == "2026-02-01"

    def test_kind_required(self) -> None:
        with pytest.raises(ValueError):
            TimelineEvent(
                id=uuid4(),
                patent_id=uuid4(),
                kind="",
                description="",
                created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            )
