"""
MyDHL Adapter - CarrierApiPort implementation for the DHL Express MyDHL API.
"""

from .client import MyDHLApiClient

__all__ = ["MyDHLApiClient"]
