"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .carrier_api import (
    CarrierApiPort,
    CarrierApiError,
    AuthenticationError,
    NotFoundError,
)
from .config_provider import ConfigProviderPort, ApiConfig, AppConfig
from .response_parser import ShipmentParserPort

__all__ = [
    "CarrierApiPort",
    "CarrierApiError",
    "AuthenticationError",
    "NotFoundError",
    "ConfigProviderPort",
    "ApiConfig",
    "AppConfig",
    "ShipmentParserPort",
]
