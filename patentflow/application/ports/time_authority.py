"""Time authority port.

Every service that needs a timestamp injects a TimeAuthorityProtocol
implementation instead of calling datetime.now() directly. Timeline
event timestamps, patent updated_at values and round created_at values
all come from here.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for time authority.

    For production:
        Use SystemTimeAuthority from patentflow.infrastructure.adapters

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return current time with timezone awareness (UTC)."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Return current UTC time as a timezone-aware datetime."""
        ...

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock value in seconds.

        Use this for measuring elapsed time, not for timestamps.
        """
        ...
