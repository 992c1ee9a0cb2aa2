"""
Shipment Response Parser - Maps the carrier's JSON response to a Shipment.
"""

import logging
from typing import Any

from ...core.domain.shipment import Shipment
from ...core.exceptions import ResponseParseError
from ...core.ports.response_parser import ShipmentParserPort


class ShipmentResponseParser(ShipmentParserPort):
    """
    Parser for the body returned by POST /shipments.
    
    Only shipmentTrackingNumber is mandatory; other string fields default
    to "" and list fields to [].
    """
    
    LIST_FIELDS = {
        "warnings": "warnings",
        "packages": "packages",
        "documents": "documents",
        "shipmentDetails": "shipment_details",
        "shipmentCharges": "shipment_charges",
    }
    
    def __init__(self):
        self.logger = logging.getLogger("ShipmentResponseParser")
    
    def parse(self, response: dict[str, Any]) -> Shipment:
        """
        Build a Shipment from a decoded response body.
        
        Raises:
            ResponseParseError: If the response is not a mapping or has no
                tracking number
        """
        if not isinstance(response, dict):
            raise ResponseParseError(
                f"Expected a JSON object, got {type(response).__name__}"
            )
        
        tracking_number = response.get("shipmentTrackingNumber")
        if not tracking_number:
            raise ResponseParseError("Response is missing shipmentTrackingNumber")
        
        lists = {
            attr: self._as_list(response.get(key), key)
            for key, attr in self.LIST_FIELDS.items()
        }
        
        return Shipment(
            shipment_tracking_number=str(tracking_number),
            cancel_pickup_url=response.get("cancelPickupUrl") or "",
            tracking_url=response.get("trackingUrl") or "",
            dispatch_confirmation_number=response.get("dispatchConfirmationNumber") or "",
            label_pdf=self._extract_label(lists["documents"]),
            **lists,
        )
    
    def _extract_label(self, documents: list) -> str:
        """The label is the first document returned."""
        if not documents:
            self.logger.debug("Response carries no documents; label is empty")
            return ""
        first = documents[0]
        if not isinstance(first, dict):
            raise ResponseParseError("Document entries must be JSON objects")
        return first.get("content") or ""
    
    @staticmethod
    def _as_list(value: Any, key: str) -> list:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ResponseParseError(f"Field '{key}' should be a list, got {type(value).__name__}")
        return value
