"""Timeline event model.

Timeline events are append-only and immutable once created. The engine
never mutates or deletes them; deletion is an administrative override
outside the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True, eq=True)
class TimelineEvent:
    """One audit entry describing a single workflow transition.

    Attributes:
        id: Unique event identifier.
        patent_id: The patent the event belongs to.
        kind: Event kind from the fixed vocabulary.
        description: Human-readable description, including any rejection
            reason verbatim.
        created_at: Creation timestamp (UTC).
        actor_name: Acting employee, if any.
        deadline: Deadline snapshot of the slot acted on, if any.
    """

    id: UUID
    patent_id: UUID
    kind: str
    description: str
    created_at: datetime
    actor_name: str | None = None
    deadline: date | None = None

    def __post_init__(self) -> None:
        if not self.kind:
            raise ValueError("kind cannot be empty")

    def to_dict(self) -> dict[str, Any]:
        """Serialize for display or export."""
        return {
            "id": str(self.id),
            "patent_id": str(self.patent_id),
            "kind": self.kind,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
            "actor_name": self.actor_name,
            "deadline": self.deadline.isoformat() if self.deadline else None,
        }
