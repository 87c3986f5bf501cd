"""Infrastructure: event bus and logging."""
from .event_bus import InMemoryEventBus, get_event_bus

__all__ = ["InMemoryEventBus", "get_event_bus"]
