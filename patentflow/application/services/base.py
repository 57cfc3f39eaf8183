"""Base service logging mixin.

Usage:
    class MyService(LoggingMixin):
        def __init__(self, storage: WorkflowStorageProtocol) -> None:
            self._storage = storage
            self._init_logger()

        async def do_something(self, patent_id: UUID) -> None:
            log = self._log_operation("do_something", patent_id=str(patent_id))
            log.info("operation_started")
"""

import structlog

from patentflow.infrastructure.observability.correlation import get_correlation_id
from patentflow.infrastructure.observability.logging import WORKFLOW_COMPONENT


class LoggingMixin:
    """Mixin providing structured logging for workflow services.

    The logger is bound with ``service`` (the class name) and
    ``component``. Each operation additionally binds ``operation`` and
    the current ``correlation_id``.

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = WORKFLOW_COMPONENT) -> None:
        """Initialize the logger. Call in __init__ after setting dependencies."""
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create an operation-scoped logger with correlation ID.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind to the logger.

        Returns:
            BoundLogger with operation and correlation context.
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )
