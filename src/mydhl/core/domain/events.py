"""
Domain Events - Things that happened while creating a shipment.

Events are immutable records of something that occurred.
They let callers audit or react to submissions without wrapping the service.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable
from uuid import uuid4


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""
    
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)
    
    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


@dataclass(frozen=True)
class ShipmentRequested(DomainEvent):
    """Event: A shipment request is about to be submitted."""
    
    product_code: str = ""
    package_count: int = 0
    pickup_requested: bool = False


@dataclass(frozen=True)
class ShipmentCreated(DomainEvent):
    """Event: The carrier confirmed a shipment."""
    
    tracking_number: str = ""
    dispatch_confirmation_number: str = ""
    warning_count: int = 0


class EventBus:
    """
    Simple event bus for publishing and subscribing to domain events.
    
    Handlers subscribed to DomainEvent receive every event.
    """
    
    def __init__(self):
        self._handlers: dict[type, list[Callable[[DomainEvent], None]]] = {}
        self._history: list[DomainEvent] = []
    
    def subscribe(self, event_type: type, handler: Callable[[DomainEvent], None]) -> None:
        """Subscribe a handler to an event type."""
        self._handlers.setdefault(event_type, []).append(handler)
    
    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers."""
        self._history.append(event)
        
        for handler in self._handlers.get(type(event), []):
            handler(event)
        
        if type(event) is not DomainEvent:
            for handler in self._handlers.get(DomainEvent, []):
                handler(event)
    
    def get_history(self) -> list[DomainEvent]:
        """Get all published events."""
        return self._history.copy()
    
    def clear_history(self) -> None:
        """Clear event history."""
        self._history.clear()
