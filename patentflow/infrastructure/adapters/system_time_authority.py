"""System clock adapter for TimeAuthorityProtocol.

The only place in the package that reads the wall clock.
"""

import time
from datetime import datetime, timezone

from patentflow.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """TimeAuthorityProtocol backed by the system clock (always UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def utcnow(self) -> datetime:
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        return time.monotonic()
