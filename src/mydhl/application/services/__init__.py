"""
Services - Request builders for MyDHL API operations.
"""

from .shipment_service import ShipmentService

__all__ = ["ShipmentService"]
