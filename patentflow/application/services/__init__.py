"""Application services for patentflow."""

from patentflow.application.services.administration_service import (
    PatentAdministrationService,
)
from patentflow.application.services.base import LoggingMixin
from patentflow.application.services.patent_writer import CommitResult, PatentWriter
from patentflow.application.services.queue_service import QueueService
from patentflow.application.services.timeline_recorder import TimelineRecorder
from patentflow.application.services.workflow_service import WorkflowService

__all__: list[str] = [
    "CommitResult",
    "LoggingMixin",
    "PatentAdministrationService",
    "PatentWriter",
    "QueueService",
    "TimelineRecorder",
    "WorkflowService",
]
