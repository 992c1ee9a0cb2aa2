"""
Domain - Value objects, results and events.
"""

from .value_objects import (
    Account,
    Address,
    Contact,
    Package,
    RateAddress,
    bool_to_string,
)
from .shipment import Shipment
from .events import DomainEvent, EventBus, ShipmentCreated, ShipmentRequested

__all__ = [
    "Account",
    "Address",
    "Contact",
    "Package",
    "RateAddress",
    "bool_to_string",
    "Shipment",
    "DomainEvent",
    "EventBus",
    "ShipmentCreated",
    "ShipmentRequested",
]
