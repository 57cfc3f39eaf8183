"""Infrastructure adapters."""

from patentflow.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__: list[str] = ["SystemTimeAuthority"]
