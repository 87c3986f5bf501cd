"""
Event Bus Implementation (Infrastructure Layer).

Notifies subscribers of domain events inside the running process.
"""
import asyncio
import logging
from typing import Dict, List, Optional

from storefront.domain.event_bus import EventBus, EventHandler, EventKey, Unsubscribe
from storefront.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)


def _event_name(event_type: EventKey) -> str:
    if isinstance(event_type, str):
        return event_type
    return event_type.__name__


class InMemoryEventBus(EventBus):
    """
    In-Memory Event Bus Implementation.

    Features:
    - Handlers registered per event type (class or class name)
    - Sync and async handlers
    - subscribe() hands back an unsubscribe callable so views can tie the
      subscription to their mounted lifetime

    Delivery is fire-and-forget: a failing handler is logged and skipped,
    events are not stored and a handler registered after a publish never
    sees it.
    """

    def __init__(self) -> None:
        """Initialize event bus with an empty registry."""
        self._subscribers: Dict[str, List[EventHandler]] = {}

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event to its subscribers.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")
        logger.debug(f"Event payload: {event.to_dict()}")
        await self._notify_subscribers(event)

    async def publish_all(self, events: List[DomainEvent]) -> None:
        """
        Publish several domain events in order.

        Args:
            events: List of domain events to publish
        """
        if not events:
            return

        logger.info(f"Publishing {len(events)} events")
        for event in events:
            await self.publish(event)

    def subscribe(self, event_type: EventKey, handler: EventHandler) -> Unsubscribe:
        """
        Subscribe to one event type.

        Args:
            event_type: Event class or its name
            handler: Callback function that receives events

        Returns:
            Callable removing this subscription (safe to call twice)
        """
        name = _event_name(event_type)
        self._subscribers.setdefault(name, []).append(handler)
        logger.info(f"Registered event subscriber for {name}: {getattr(handler, '__name__', handler)}")

        def unsubscribe() -> None:
            handlers = self._subscribers.get(name, [])
            if handler in handlers:
                handlers.remove(handler)
                logger.info(f"Unregistered event subscriber for {name}: {getattr(handler, '__name__', handler)}")

        return unsubscribe

    def subscriber_count(self, event_type: EventKey) -> int:
        return len(self._subscribers.get(_event_name(event_type), []))

    async def _notify_subscribers(self, event: DomainEvent) -> None:
        """Notify all subscribers of the event's type."""
        # Copy: handlers may unsubscribe while being notified
        handlers = list(self._subscribers.get(event.event_type, []))
        if not handlers:
            return

        logger.debug(f"Notifying {len(handlers)} subscribers about {event.event_type}")

        for subscriber in handlers:
            try:
                result = subscriber(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(f"Subscriber {getattr(subscriber, '__name__', subscriber)} failed: {e}", exc_info=True)


# Global event bus instance
_event_bus_instance: Optional[InMemoryEventBus] = None


def get_event_bus() -> InMemoryEventBus:
    """
    Get or create global event bus instance.

    Returns:
        Global event bus instance
    """
    global _event_bus_instance

    if _event_bus_instance is None:
        _event_bus_instance = InMemoryEventBus()

    return _event_bus_instance
