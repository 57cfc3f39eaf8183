"""
Domain layer - Pure workflow logic for patentflow.

This layer contains:
- Domain models (Patent, Track, ExaminationRound, TimelineEvent)
- The transition engine and completion aggregator
- Eligibility and queue builders
- Domain errors

CRITICAL: This layer must NOT import from application, infrastructure,
config or bootstrap. Only stdlib and typing imports are allowed.
"""

from patentflow.domain.exceptions import WorkflowError
from patentflow.domain.models import Actor, Patent, TransitionRequest

__all__: list[str] = [
    "Actor",
    "Patent",
    "TransitionRequest",
    "WorkflowError",
]
