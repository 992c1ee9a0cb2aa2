"""
mydhl - Client-side shipment builder for the DHL Express MyDHL API.

Typical usage:

    from mydhl import MyDHLApiClient, ShipmentResponseParser, ShipmentService

    client = MyDHLApiClient(username="...", password="...", test_mode=True)
    shipment = (
        ShipmentService(client, ShipmentResponseParser())
        .set_planned_shipping_date_and_time(when)
        .set_pickup(False)
        .set_product_code("P")
        .set_accounts([Account("shipper", "123456789")])
        .set_shipper_details(shipper_address, shipper_contact)
        .set_receiver_details(receiver_address, receiver_contact)
        .set_packages([Package(weight=1.5, length=20, width=15, height=10)])
        .send_shipment()
    )
"""

from .core.domain import (
    Account,
    Address,
    Contact,
    Package,
    RateAddress,
    Shipment,
)
from .core.exceptions import (
    MyDHLError,
    InvalidArgumentError,
    InvalidAddressError,
    MissingArgumentError,
    ResponseParseError,
)
from .core.ports.carrier_api import CarrierApiError
from .application.services import ShipmentService
from .adapters.dhl import MyDHLApiClient
from .adapters.parsers import ShipmentResponseParser

__version__ = "1.0.0"

__all__ = [
    "Account",
    "Address",
    "Contact",
    "Package",
    "RateAddress",
    "Shipment",
    "MyDHLError",
    "InvalidArgumentError",
    "InvalidAddressError",
    "MissingArgumentError",
    "ResponseParseError",
    "CarrierApiError",
    "ShipmentService",
    "MyDHLApiClient",
    "ShipmentResponseParser",
]
