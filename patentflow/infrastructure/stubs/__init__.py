"""In-memory stub implementations of application ports."""

from patentflow.infrastructure.stubs.workflow_storage_stub import WorkflowStorageStub

__all__: list[str] = ["WorkflowStorageStub"]
