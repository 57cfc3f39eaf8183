"""Test helpers for patentflow tests.

Helpers:
    FakeTimeAuthority: Controllable time authority
    make_patent, make_round, admin, drafter, filer: Patent builders

Usage:
    from tests.helpers import FakeTimeAuthority, make_patent
"""

from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.patent_builders import (
    ADMIN,
    DRAFTER,
    FILER,
    admin,
    drafter,
    filer,
    make_patent,
    make_round,
    make_track,
)

__all__ = [
    "ADMIN",
    "DRAFTER",
    "FILER",
    "FakeTimeAuthority",
    "admin",
    "drafter",
    "filer",
    "make_patent",
    "make_round",
    "make_track",
]
