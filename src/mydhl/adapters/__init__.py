"""
Adapters - Concrete implementations of ports.

This module contains implementations for:
- Carrier API: MyDHL REST client
- Parsers: Shipment responses, shipment description files
- Config: Environment variables
"""

from .dhl import MyDHLApiClient
from .parsers import ShipmentResponseParser, ShipmentFileLoader
from .config import EnvironmentConfigProvider

__all__ = [
    "MyDHLApiClient",
    "ShipmentResponseParser",
    "ShipmentFileLoader",
    "EnvironmentConfigProvider",
]
