"""Completion aggregator: derived roll-up flags.

Applied after every mutation, before anything is persisted. Roll-ups are
never written by any other component.

Roll-ups:
- Track.stage_complete: both done flags true, both review flags false.
- ExaminationRound.complete: same rule per round.
- Patent.examination_completion: examination inactive, or every round
  complete. Zero rounds while active counts as incomplete unless the
  caller opts into the other policy.

overall_completed is deliberately NOT derived here; it stays a manual
administrator checkpoint.
"""

from __future__ import annotations

from dataclasses import replace

from patentflow.domain.models.patent import ExaminationRound, Patent, Track
from patentflow.domain.services.status_model import is_stage_complete


def _recompute_track(track: Track) -> Track:
    complete = is_stage_complete(track)
    if track.stage_complete == complete:
        return track
    return replace(track, stage_complete=complete)


def _recompute_round(examination_round: ExaminationRound, active: bool) -> ExaminationRound:
    if not active:
        return examination_round.reset()
    complete = is_stage_complete(examination_round)
    if examination_round.complete == complete:
        return examination_round
    return replace(examination_round, complete=complete)


def examination_is_complete(
    patent: Patent, *, empty_examination_complete: bool = False
) -> bool:
    """Whether the examination roll-up holds for already-recomputed rounds."""
    if not patent.examination_active:
        return True
    if not patent.rounds:
        return empty_examination_complete
    return all(r.complete for r in patent.rounds)


def recompute(patent: Patent, *, empty_examination_complete: bool = False) -> Patent:
    """Return the patent with every roll-up flag recomputed.

    Inactive examination resets every round's flags rather than merely
    ignoring them.

    Args:
        patent: The patent after a primary field mutation.
        empty_examination_complete: Treat an active examination with no
            rounds as complete. Defaults to False (incomplete).

    Returns:
        A new Patent with consistent roll-ups. Idempotent.
    """
    rounds = tuple(
        _recompute_round(r, patent.examination_active)
        for r in sorted(patent.rounds, key=lambda r: r.sequence)
    )
    updated = replace(
        patent,
        ps=_recompute_track(patent.ps),
        cs=_recompute_track(patent.cs),
        rounds=rounds,
    )
    return replace(
        updated,
        examination_completion=examination_is_complete(
            updated, empty_examination_complete=empty_examination_complete
        ),
    )
