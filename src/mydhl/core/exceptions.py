"""
Exceptions - Error hierarchy shared by every layer.

Usage errors (invalid or missing arguments) are raised synchronously and
are never retried. Transport errors live with the carrier port in
core.ports.carrier_api.
"""

from typing import Optional


class MyDHLError(Exception):
    """Base exception for all mydhl errors."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidArgumentError(MyDHLError):
    """A value of the wrong type or shape was passed to a setter or value object."""


class InvalidAddressError(InvalidArgumentError):
    """Address data failed validation."""


class MissingArgumentError(MyDHLError):
    """A required shipment field was not set before sending."""
    
    def __init__(self, argument: str):
        super().__init__(f"Missing argument: {argument}")
        self.argument = argument


class ResponseParseError(MyDHLError):
    """The carrier response lacks data needed to build a result."""


class ShipmentFileError(MyDHLError):
    """A shipment description file could not be read."""


class ConfigurationError(MyDHLError):
    """A configuration value cannot be used."""


__all__ = [
    "MyDHLError",
    "InvalidArgumentError",
    "InvalidAddressError",
    "MissingArgumentError",
    "ResponseParseError",
    "ShipmentFileError",
    "ConfigurationError",
]
