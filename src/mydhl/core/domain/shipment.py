"""
Shipment - The carrier's confirmed booking record.

Only ever produced by parsing a carrier response.
"""

import base64
import binascii
import copy
import json
from dataclasses import dataclass, field
from typing import Any

from ..exceptions import MyDHLError


@dataclass(frozen=True)
class Shipment:
    """
    Immutable result of a successful shipment creation.
    
    List fields are deep-copied on construction and again by to_dict(),
    so neither the source response nor a rendered mapping can alter it.
    """
    
    # Field name -> key used by the API and by to_dict()
    KEYS = {
        "shipment_tracking_number": "shipmentTrackingNumber",
        "cancel_pickup_url": "cancelPickupUrl",
        "tracking_url": "trackingUrl",
        "dispatch_confirmation_number": "dispatchConfirmationNumber",
        "warnings": "warnings",
        "packages": "packages",
        "documents": "documents",
        "shipment_details": "shipmentDetails",
        "shipment_charges": "shipmentCharges",
    }
    
    LIST_FIELDS = ("warnings", "packages", "documents", "shipment_details", "shipment_charges")
    
    shipment_tracking_number: str
    cancel_pickup_url: str
    tracking_url: str
    dispatch_confirmation_number: str
    label_pdf: str
    warnings: list = field(default_factory=list)
    packages: list = field(default_factory=list)
    documents: list = field(default_factory=list)
    shipment_details: list = field(default_factory=list)
    shipment_charges: list = field(default_factory=list)
    
    def __post_init__(self) -> None:
        for name in self.LIST_FIELDS:
            object.__setattr__(self, name, copy.deepcopy(getattr(self, name)))
    
    def to_dict(self) -> dict[str, Any]:
        """
        Canonical mapping view of the shipment, keyed like the API response.
        
        label_pdf is left out: it duplicates documents[0]["content"].
        """
        return {
            key: copy.deepcopy(getattr(self, name))
            for name, key in self.KEYS.items()
        }
    
    def label_bytes(self) -> bytes:
        """Decode the base64 label content."""
        try:
            return base64.b64decode(self.label_pdf, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MyDHLError(f"Label content is not valid base64: {e}", cause=e)
    
    def __str__(self) -> str:
        return json.dumps(self.to_dict())
