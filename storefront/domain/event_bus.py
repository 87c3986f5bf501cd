"""
Event Bus Interface (Domain Layer).

Pure interface definition - no implementation details.
"""
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, List, Type, Union

from .events.base import DomainEvent

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[None]]]
Unsubscribe = Callable[[], None]
EventKey = Union[str, Type[DomainEvent]]


class EventBus(ABC):
    """
    Event Bus Interface.

    Observer registry used to tell open views that shared data changed.
    Delivery is fire-and-forget: at most once per handler per publish, nothing
    is persisted or retried.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """

    @abstractmethod
    async def publish_all(self, events: List[DomainEvent]) -> None:
        """
        Publish several domain events in order.

        Args:
            events: List of domain events to publish
        """

    @abstractmethod
    def subscribe(self, event_type: EventKey, handler: EventHandler) -> Unsubscribe:
        """
        Register a handler for one event type.

        Args:
            event_type: Event class or its name
            handler: Sync or async callable receiving the event

        Returns:
            Callable that removes this subscription
        """
