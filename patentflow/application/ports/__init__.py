"""Application ports (interfaces to external collaborators)."""

from patentflow.application.ports.time_authority import TimeAuthorityProtocol
from patentflow.application.ports.workflow_storage import WorkflowStorageProtocol

__all__: list[str] = [
    "TimeAuthorityProtocol",
    "WorkflowStorageProtocol",
]
