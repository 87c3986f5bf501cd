"""
Base Domain Event.

All domain events inherit from this base class.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, ClassVar, Dict
import uuid

_METADATA = ("event_id", "event_type", "aggregate_id", "occurred_at")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class DomainEvent:
    """
    Base class for all domain events.

    Events are broadcast on the event bus so open views can re-sync their own
    state; they are not persisted. Subclasses name their aggregate and the
    field that identifies it, and ``aggregate_id`` is filled from that field.
    """

    aggregate_type: ClassVar[str] = ""
    aggregate_key: ClassVar[str] = ""

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = field(init=False, default="")
    aggregate_id: str = field(default="")
    occurred_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        self.event_type = type(self).__name__
        if not self.aggregate_id and self.aggregate_key:
            self.aggregate_id = getattr(self, self.aggregate_key) or ""

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert event to a JSON-ready dictionary.

        Returns:
            Metadata plus a ``data`` mapping of the event's own fields;
            Decimal amounts are kept exact as strings
        """
        data = {}
        for f in fields(self):
            if f.name in _METADATA:
                continue
            value = getattr(self, f.name)
            data[f.name] = str(value) if isinstance(value, Decimal) else value

        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "data": data,
        }
