"""Unit tests for the workflow error taxonomy."""

from __future__ import annotations

from uuid import uuid4

import pytest

from patentflow.domain.errors import (
    AlreadyInStateError,
    ConcurrentModificationError,
    DuplicateTrackingCodeError,
    NotAssignedError,
    NotAuthorizedError,
    PatentNotFoundError,
    PreconditionNotMetError,
    StorageError,
    UnknownRoundError,
)
from patentflow.domain.exceptions import WorkflowError
from patentflow.domain.models.workflow import ActorRole, WorkState


class TestWorkflowErrors:
    """Tests for messages and retryability."""

    def test_precondition_message_from_token(self) -> None:
        error = PreconditionNotMetError("cs_data_received")
        assert error.missing == "cs_data_received"
        assert error.message == (
            "CS Data must be received before CS Drafting can be completed"
        )

    def test_precondition_unknown_token(self) -> None:
        assert "form_9" in PreconditionNotMetError("form_9").message

    def test_not_assigned_message(self) -> None:
        error = NotAssignedError("Zed", "fer-2.filer", None)
        assert error.message == "Zed is not assigned to fer-2.filer (assigned: nobody)"

    def test_not_authorized_lists_roles(self) -> None:
        error = NotAuthorizedError("Dana", ActorRole.DRAFTER, (ActorRole.ADMIN,))
        assert "requires: admin" in error.message

    def test_already_in_state(self) -> None:
        assert AlreadyInStateError(WorkState.COMPLETE).message == "Already in state: complete"

    @pytest.mark.parametrize(
        "error",
        [
            PreconditionNotMetError("idf_received"),
            NotAssignedError("a", "ps.drafter", "b"),
            NotAuthorizedError("a", ActorRole.FILER, (ActorRole.ADMIN,)),
            UnknownRoundError(uuid4(), uuid4()),
            AlreadyInStateError("x"),
            PatentNotFoundError(uuid4()),
            DuplicateTrackingCodeError("PF-1"),
            ConcurrentModificationError(uuid4(), 1, 2),
        ],
    )
    def test_only_storage_errors_are_retryable(self, error: WorkflowError) -> None:
        """Permanent rejections are not retryable."""
        assert isinstance(error, WorkflowError)
        assert error.retryable is False

    def test_storage_error_is_retryable(self) -> None:
        cause = OSError("disk gone")
        error = StorageError("save", cause)

        assert error.retryable is True
        assert error.cause is cause
        assert error.message == "Storage operation 'save' failed: disk gone"
