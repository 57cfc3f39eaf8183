"""Queue service: read-only views over all stored patents.

Queues are recomputed from current state on every call; there is no
cache. Storage failures propagate as StorageError.
"""

from __future__ import annotations

from uuid import UUID

from patentflow.application.dtos.views import PatentStatusView, TaskView
from patentflow.application.ports.workflow_storage import WorkflowStorageProtocol
from patentflow.application.services.base import LoggingMixin
from patentflow.domain.errors.storage import StorageError
from patentflow.domain.exceptions import WorkflowError
from patentflow.domain.models.patent import Patent
from patentflow.domain.models.task import CompletedWork, TaskDescriptor
from patentflow.domain.models.workflow import Actor, ActorRole
from patentflow.domain.services import queues


class QueueService(LoggingMixin):
    """Builds drafter, filer and review queues plus status views."""

    def __init__(self, storage: WorkflowStorageProtocol) -> None:
        self._storage = storage
        self._init_logger()

    async def _all(self) -> list[Patent]:
        try:
            return await self._storage.list_all()
        except WorkflowError:
            raise
        except Exception as exc:
            self._log_operation("list_all").error("storage_error", error=str(exc))
            raise StorageError("list_all", exc) from exc

    async def drafting_queue(self, actor_name: str) -> list[TaskDescriptor]:
        return queues.drafting_queue(await self._all(), actor_name)

    async def filing_queue(self, actor_name: str) -> list[TaskDescriptor]:
        return queues.filing_queue(await self._all(), actor_name)

    async def review_queue(self) -> list[TaskDescriptor]:
        return queues.review_queue(await self._all())

    async def completed_drafting(self, actor_name: str) -> list[CompletedWork]:
        return queues.completed_drafting(await self._all(), actor_name)

    async def completed_filing(self, actor_name: str) -> list[CompletedWork]:
        return queues.completed_filing(await self._all(), actor_name)

    async def queue_for(self, actor: Actor) -> list[TaskView]:
        """The queue matching the actor's role, as serializable views."""
        if actor.role is ActorRole.DRAFTER:
            tasks = await self.drafting_queue(actor.name)
        elif actor.role is ActorRole.FILER:
            tasks = await self.filing_queue(actor.name)
        else:
            tasks = await self.review_queue()
        self._log_operation("queue_for", actor=actor.name, role=actor.role.value).debug(
            "queue_built", size=len(tasks)
        )
        return [TaskView.from_task(task) for task in tasks]

    async def status(self, patent_id: UUID) -> PatentStatusView:
        """Display status of one patent.

        Raises:
            PatentNotFoundError: If the patent does not exist.
            StorageError: If the storage collaborator fails.
        """
        try:
            patent = await self._storage.load(patent_id)
        except WorkflowError:
            raise
        except Exception as exc:
            raise StorageError("load", exc) from exc
        return PatentStatusView.from_patent(patent)
