"""Unit tests for status model predicates and the display-status ladder."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from patentflow.domain.models.patent import Track
from patentflow.domain.models.workflow import CS, PS, WorkState
from patentflow.domain.services.status_model import (
    STATUS_LABELS,
    PatentStatus,
    can_file,
    can_start_cs_drafting,
    can_start_ps_drafting,
    determine_patent_status,
    is_stage_complete,
    missing_drafting_gates,
    work_state,
)
from tests.helpers import make_patent, make_round, make_track

flags = st.booleans()


class TestGatePredicates:
    """Tests for drafting and filing gates."""

    def test_ps_drafting_needs_idf(self) -> None:
        """PS drafting follows idf_received."""
        assert can_start_ps_drafting(make_patent(idf_received=True)) is True
        assert can_start_ps_drafting(make_patent(idf_sent=True)) is False

    @pytest.mark.parametrize(
        ("sent", "received", "expected"),
        [(False, False, False), (True, False, False), (False, True, False), (True, True, True)],
    )
    def test_cs_drafting_needs_both_data_flags(
        self, sent: bool, received: bool, expected: bool
    ) -> None:
        """CS drafting needs data sent and received."""
        patent = make_patent(cs_data_sent=sent, cs_data_received=received)
        assert can_start_cs_drafting(patent) is expected

    def test_can_file_follows_drafting_done(self) -> None:
        """Filing depends only on drafting_done."""
        assert can_file(make_track(drafting_done=True, drafting_under_review=True))
        assert not can_file(make_track())

    def test_missing_gates_in_order(self) -> None:
        """Missing CS gates are listed sent first."""
        assert missing_drafting_gates(make_patent(), CS) == (
            "cs_data_sent",
            "cs_data_received",
        )
        assert missing_drafting_gates(make_patent(), PS) == ("idf_received",)
        assert missing_drafting_gates(make_patent(idf_received=True), PS) == ()


class TestStageComplete:
    """Tests for the stage-completion predicate."""

    @given(flags, flags, flags, flags)
    def test_complete_iff_done_and_not_under_review(
        self, d_done: bool, d_review: bool, f_done: bool, f_review: bool
    ) -> None:
        """stage_complete holds exactly for (True, False, True, False)."""
        track = Track(
            drafting_done=d_done,
            drafting_under_review=d_review,
            filing_done=f_done,
            filing_under_review=f_review,
        )

        expected = d_done and f_done and not d_review and not f_review
        assert is_stage_complete(track) is expected


class TestWorkState:
    """Tests for projecting flags onto work states."""

    @pytest.mark.parametrize(
        ("track", "expected"),
        [
            (make_track(drafter_name=None), WorkState.NOT_STARTED),
            (make_track(), WorkState.DRAFTING),
            (
                make_track(drafting_done=True, drafting_under_review=True),
                WorkState.DRAFT_UNDER_REVIEW,
            ),
            (make_track(drafting_done=True, filer_name=None), WorkState.DRAFTED),
            (make_track(drafting_done=True), WorkState.FILING),
            (
                make_track(drafting_done=True, filing_done=True, filing_under_review=True),
                WorkState.FILE_UNDER_REVIEW,
            ),
            (make_track(drafting_done=True, filing_done=True), WorkState.COMPLETE),
        ],
    )
    def test_projection(self, track: Track, expected: WorkState) -> None:
        """Each flag combination maps to one state."""
        assert work_state(track) is expected

    def test_rounds_project_like_tracks(self) -> None:
        """Rounds share the track projection."""
        examination_round = make_round(1, drafting_done=True, drafting_under_review=True)
        assert work_state(examination_round) is WorkState.DRAFT_UNDER_REVIEW


class TestDeterminePatentStatus:
    """Tests for the priority ladder."""

    def test_withdrawn_wins_over_everything(self) -> None:
        """A withdrawn patent reports withdrawn even when completed."""
        patent = make_patent(withdrawn=True, overall_completed=True)
        assert determine_patent_status(patent) is PatentStatus.WITHDRAWN

    def test_completed_wins_over_tracks(self) -> None:
        """overall_completed outranks track progress."""
        patent = make_patent(
            overall_completed=True,
            cs=make_track(drafting_done=True, drafting_under_review=True),
        )
        assert determine_patent_status(patent) is PatentStatus.COMPLETED

    def test_ps_under_review_with_cs_gates_open(self) -> None:
        """An active CS data gate outranks PS progress."""
        patent = make_patent(
            idf_received=True,
            cs_data_sent=True,
            ps=make_track(drafting_done=True, drafting_under_review=True),
        )
        assert determine_patent_status(patent) is PatentStatus.CS_DATA_SENT

    def test_ps_drafting_approval(self) -> None:
        """PS under review is reported when CS has not started."""
        patent = make_patent(
            idf_received=True,
            ps=make_track(drafting_done=True, drafting_under_review=True),
        )
        status = determine_patent_status(patent)
        assert status is PatentStatus.PS_DRAFTING_APPROVAL
        assert STATUS_LABELS[status] == "PS draft pending review/approval"

    @pytest.mark.parametrize(
        ("cs", "expected"),
        [
            (make_track(drafting_done=True, drafting_under_review=True),
             PatentStatus.CS_DRAFTING_APPROVAL),
            (make_track(drafting_done=True), PatentStatus.CS_DRAFTING),
            (make_track(drafting_done=True, filing_done=True, filing_under_review=True),
             PatentStatus.CS_FILING_APPROVAL),
            (make_track(drafting_done=True, filing_done=True), PatentStatus.CS_COMPLETED),
        ],
    )
    def test_cs_track_statuses(self, cs: Track, expected: PatentStatus) -> None:
        """CS progress maps onto the CS rungs."""
        patent = make_patent(cs_data_sent=True, cs_data_received=True, cs=cs)
        assert determine_patent_status(patent) is expected

    def test_fresh_patent_waits_for_idf(self) -> None:
        """With nothing set the patent is waiting for the IDF."""
        assert determine_patent_status(make_patent()) is PatentStatus.IDF_SENT

    def test_idf_received(self) -> None:
        assert determine_patent_status(make_patent(idf_received=True)) is (
            PatentStatus.IDF_RECEIVED
        )

    def test_every_status_has_a_label(self) -> None:
        """The label table covers the whole enum."""
        assert set(STATUS_LABELS) == set(PatentStatus)
