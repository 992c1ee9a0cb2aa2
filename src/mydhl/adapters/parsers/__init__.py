"""
Parser Adapters - Carrier responses and shipment description files.
"""

from .shipment_response import ShipmentResponseParser
from .shipment_file import ShipmentFileLoader

__all__ = ["ShipmentResponseParser", "ShipmentFileLoader"]
