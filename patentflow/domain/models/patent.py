"""Patent domain models: tracks, examination rounds and the patent root.

All models are frozen dataclasses. The transition engine never mutates a
record in place; it computes a new Patent and the application layer
persists it as one unit.

Invariants carried by these records (enforced by the transition engine
and completion aggregator, never by field-by-field writers):
- filing_done only becomes true while drafting_done is true
- PS drafting_done only becomes true while idf_received is true
- CS drafting_done only becomes true while cs_data_sent and
  cs_data_received are both true
- stage_complete / complete are true iff both done flags are true and
  both under-review flags are false
- examination_active=False forces every round into the reset state
- round sequence numbers are dense, starting at 1, per patent
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from types import MappingProxyType
from uuid import UUID, uuid4

from patentflow.domain.models.workflow import Stage, TrackId, WorkItemRef


@dataclass(frozen=True, eq=True)
class Assignment:
    """An assignee slot (drafter or filer) with an informational deadline."""

    assignee: str | None = None
    deadline: date | None = None

    def is_assigned_to(self, name: str) -> bool:
        return self.assignee is not None and self.assignee == name


@dataclass(frozen=True, eq=True)
class WorkUnit:
    """Assignment pair plus the four stage flags shared by tracks and rounds.

    Attributes:
        drafter: Drafting assignment.
        filer: Filing assignment.
        drafting_done: Drafting work handed in.
        drafting_under_review: Drafting handed in, not yet approved.
        filing_done: Filing work handed in.
        filing_under_review: Filing handed in, not yet approved.
    """

    drafter: Assignment = field(default_factory=Assignment)
    filer: Assignment = field(default_factory=Assignment)
    drafting_done: bool = False
    drafting_under_review: bool = False
    filing_done: bool = False
    filing_under_review: bool = False

    def assignment(self, stage: Stage) -> Assignment:
        return self.drafter if stage is Stage.DRAFT else self.filer

    def is_done(self, stage: Stage) -> bool:
        return self.drafting_done if stage is Stage.DRAFT else self.filing_done

    def is_under_review(self, stage: Stage) -> bool:
        if stage is Stage.DRAFT:
            return self.drafting_under_review
        return self.filing_under_review

    @property
    def flags(self) -> tuple[bool, bool, bool, bool]:
        return (
            self.drafting_done,
            self.drafting_under_review,
            self.filing_done,
            self.filing_under_review,
        )


@dataclass(frozen=True, eq=True)
class Track(WorkUnit):
    """One specification pipeline (Provisional or Complete).

    Attributes:
        stage_complete: Derived roll-up, recomputed after every mutation.
    """

    stage_complete: bool = False


@dataclass(frozen=True, eq=True)
class ExaminationRound(WorkUnit):
    """A numbered further-examination sub-case on a patent.

    Attributes:
        id: Stable round identifier.
        sequence: 1-based round number, dense per patent.
        issued_on: Date the examination report was issued (informational).
        complete: Derived roll-up, recomputed after every mutation.
        created_at: When the round was opened.
    """

    id: UUID = field(default_factory=uuid4)
    sequence: int = 1
    issued_on: date | None = None
    complete: bool = False
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.sequence < 1:
            raise ValueError(f"Round sequence must be >= 1, got {self.sequence}")

    def reset(self) -> ExaminationRound:
        """Return the inert copy of this round (all flags cleared)."""
        return replace(
            self,
            drafting_done=False,
            drafting_under_review=False,
            filing_done=False,
            filing_under_review=False,
            complete=False,
        )


def _empty_forms() -> Mapping[str, bool]:
    return MappingProxyType({})


@dataclass(frozen=True, eq=True)
class Patent:
    """The root workflow record.

    Attributes:
        id: Stable identifier.
        tracking_code: Human-assigned unique tracking code.
        title: Patent title (informational).
        applicant: Applicant name (informational).
        ps: Provisional Specification track.
        cs: Complete Specification track.
        idf_sent: Invention disclosure form requested from the client.
        idf_received: Invention disclosure form received (gates PS drafting).
        cs_data_sent: CS data requested from the client.
        cs_data_received: CS data received (with cs_data_sent, gates CS drafting).
        withdrawn: Patent withdrawn from processing.
        overall_completed: Manual administrator checkpoint.
        examination_active: Further examination in progress.
        examination_completion: Derived roll-up over the rounds.
        rounds: Examination rounds ordered by sequence.
        forms: Auxiliary boolean form flags merged in by filing hand-ins.
        version: Optimistic concurrency version, bumped on every save.
        created_at: Creation timestamp.
        updated_at: Last persisted modification timestamp.
    """

    id: UUID
    tracking_code: str
    title: str = ""
    applicant: str = ""
    ps: Track = field(default_factory=Track)
    cs: Track = field(default_factory=Track)
    idf_sent: bool = False
    idf_received: bool = False
    cs_data_sent: bool = False
    cs_data_received: bool = False
    withdrawn: bool = False
    overall_completed: bool = False
    examination_active: bool = False
    examination_completion: bool = True
    rounds: tuple[ExaminationRound, ...] = ()
    forms: Mapping[str, bool] = field(default_factory=_empty_forms)
    version: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.tracking_code or not self.tracking_code.strip():
            raise ValueError("tracking_code cannot be empty")

    def track(self, track_id: TrackId) -> Track:
        return self.ps if track_id is TrackId.PS else self.cs

    def with_track(self, track_id: TrackId, track: Track) -> Patent:
        if track_id is TrackId.PS:
            return replace(self, ps=track)
        return replace(self, cs=track)

    def find_round(self, round_id: UUID) -> ExaminationRound | None:
        for examination_round in self.rounds:
            if examination_round.id == round_id:
                return examination_round
        return None

    def with_round(self, updated: ExaminationRound) -> Patent:
        """Return a copy with the round of the same id replaced."""
        return replace(
            self,
            rounds=tuple(
                updated if r.id == updated.id else r for r in self.rounds
            ),
        )

    def unit(self, ref: WorkItemRef) -> WorkUnit | None:
        """Return the track or round a reference points at, if present."""
        if ref.track is not None:
            return self.track(ref.track)
        if ref.round_id is not None:
            return self.find_round(ref.round_id)
        return None

    def with_unit(self, ref: WorkItemRef, unit: WorkUnit) -> Patent:
        """Return a copy with the addressed track or round replaced.

        Raises:
            TypeError: If ``unit`` is not the kind of unit ``ref`` addresses.
        """
        if ref.track is not None and isinstance(unit, Track):
            return self.with_track(ref.track, unit)
        if ref.is_round and isinstance(unit, ExaminationRound):
            return self.with_round(unit)
        raise TypeError(f"{type(unit).__name__} cannot replace {ref.prefix} work")

    def work_items(self) -> tuple[tuple[WorkItemRef, WorkUnit], ...]:
        """All work units in pipeline order: PS, CS, then rounds by sequence."""
        items: list[tuple[WorkItemRef, WorkUnit]] = [
            (WorkItemRef.for_track(TrackId.PS), self.ps),
            (WorkItemRef.for_track(TrackId.CS), self.cs),
        ]
        for examination_round in sorted(self.rounds, key=lambda r: r.sequence):
            items.append((WorkItemRef.for_round(examination_round.id), examination_round))
        return tuple(items)

    def next_round_sequence(self) -> int:
        return len(self.rounds) + 1

    def with_forms(self, flags: Mapping[str, bool]) -> Patent:
        merged = dict(self.forms)
        merged.update(flags)
        return replace(self, forms=MappingProxyType(merged))
