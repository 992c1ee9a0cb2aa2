"""
Shipment Service - Fluent builder for the MyDHL shipment-creation request.

Fields are accumulated through setters, validated for presence when the
request is built, rendered into the nested wire mapping and posted to the
carrier API. The response is handed to the injected ShipmentParserPort.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from ...core.domain import (
    Account,
    Address,
    Contact,
    Package,
    Shipment,
    bool_to_string,
)
from ...core.domain.events import EventBus, ShipmentCreated, ShipmentRequested
from ...core.exceptions import InvalidArgumentError, MissingArgumentError
from ...core.ports.carrier_api import CarrierApiPort
from ...core.ports.response_parser import ShipmentParserPort


class ShipmentService:
    """
    Builder for a single shipment request.

    Usage:
        shipment = (
            ShipmentService(client, ShipmentResponseParser())
            .set_planned_shipping_date_and_time(when)
            .set_pickup(False)
            .set_product_code("P")
            .set_accounts([Account("shipper", "123456789")])
            .set_shipper_details(shipper_address, shipper_contact)
            .set_receiver_details(receiver_address, receiver_contact)
            .set_packages([Package(1.5, 20, 15, 10)])
            .send_shipment()
        )
    """

    CREATE_SHIPMENT_URL = "shipments"

    REQUIRED_ARGUMENTS = (
        "planned_shipping_date_and_time",
        "is_pickup_requested",
        "product_code",
        "shipper_address",
        "shipper_contact",
        "receiver_address",
        "receiver_contact",
        "accounts",
        "packages",
    )

    def __init__(
        self,
        client: CarrierApiPort,
        parser: ShipmentParserPort,
        event_bus: Optional[EventBus] = None,
    ):
        """
        Initialize the service.

        Args:
            client: Carrier API used to submit the request
            parser: Maps the response body to a Shipment
            event_bus: Optional event bus receiving ShipmentRequested/ShipmentCreated
        """
        self._client = client
        self.event_bus = event_bus or EventBus()
        self.parser = parser
        self.logger = logging.getLogger("ShipmentService")

        self.planned_shipping_date_and_time: Optional[datetime] = None
        self.is_pickup_requested: Optional[bool] = None
        self.pickup_close_time = ""
        self.pickup_location = ""
        self.pickup_address: Optional[Address] = None
        self.pickup_contact: Optional[Contact] = None
        self.product_code: Optional[str] = None
        self.local_product_code = ""
        self.shipper_address: Optional[Address] = None
        self.shipper_contact: Optional[Contact] = None
        self.receiver_address: Optional[Address] = None
        self.receiver_contact: Optional[Contact] = None
        self.get_rate_estimates = False
        self.accounts: Optional[list[Account]] = None
        self.packages: Optional[list[Package]] = None

    # -------------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------------

    def send_shipment(self) -> Shipment:
        """
        Validate, submit and parse the shipment.

        Returns:
            The confirmed Shipment

        Raises:
            MissingArgumentError: If a required field was not set
            CarrierApiError: If the API call fails
            ResponseParseError: If the response cannot be mapped
        """
        query = self.build_request()

        self.event_bus.publish(ShipmentRequested(
            product_code=self.product_code,
            package_count=len(self.packages),
            pickup_requested=self.is_pickup_requested,
        ))
        self.logger.info(
            f"Submitting shipment: product {self.product_code}, "
            f"{len(self.packages)} package(s)"
        )

        response = self._client.post(self.CREATE_SHIPMENT_URL, query)
        shipment = self.parser.parse(response)

        self.event_bus.publish(ShipmentCreated(
            tracking_number=shipment.shipment_tracking_number,
            dispatch_confirmation_number=shipment.dispatch_confirmation_number,
            warning_count=len(shipment.warnings),
        ))
        self.logger.info(f"Created shipment {shipment.shipment_tracking_number}")
        for warning in shipment.warnings:
            self.logger.warning(f"Carrier warning: {warning}")

        return shipment

    def build_request(self) -> dict[str, Any]:
        """
        Validate required fields and render the request payload.

        Raises:
            MissingArgumentError: If a required field was not set
        """
        self._validate_params()
        return self._prepare_query()

    # -------------------------------------------------------------------------
    # Setters
    # -------------------------------------------------------------------------

    def set_planned_shipping_date_and_time(self, date: datetime) -> "ShipmentService":
        """Naive datetimes are taken as UTC."""
        self._check_type("planned_shipping_date_and_time", date, datetime)
        self.planned_shipping_date_and_time = date
        return self

    def set_pickup(
        self,
        is_pickup_requested: bool,
        pickup_close_time: str = "",
        pickup_location: str = "",
    ) -> "ShipmentService":
        """
        Configure the courier pickup.

        Args:
            is_pickup_requested: Whether a pickup is needed for this shipment
            pickup_close_time: Latest time the premises are available (HH:MM)
            pickup_location: Where the courier should collect the package
        """
        self._check_type("is_pickup_requested", is_pickup_requested, bool)
        self._check_type("pickup_close_time", pickup_close_time, str)
        self._check_type("pickup_location", pickup_location, str)

        self.is_pickup_requested = is_pickup_requested
        self.pickup_close_time = pickup_close_time
        self.pickup_location = pickup_location
        return self

    def set_pickup_details(self, pickup_address: Address, pickup_contact: Contact) -> "ShipmentService":
        self._check_type("pickup_address", pickup_address, Address)
        self._check_type("pickup_contact", pickup_contact, Contact)
        self.pickup_address = pickup_address
        self.pickup_contact = pickup_contact
        return self

    def set_product_code(self, product_code: str) -> "ShipmentService":
        self._check_type("product_code", product_code, str)
        self.product_code = product_code
        return self

    def set_local_product_code(self, local_product_code: str) -> "ShipmentService":
        self._check_type("local_product_code", local_product_code, str)
        self.local_product_code = local_product_code
        return self

    def set_accounts(self, accounts: list[Account]) -> "ShipmentService":
        """
        Raises:
            InvalidArgumentError: If any element is not an Account
        """
        self.accounts = self._check_elements(accounts, Account)
        return self

    def set_shipper_details(self, shipper_address: Address, shipper_contact: Contact) -> "ShipmentService":
        self._check_type("shipper_address", shipper_address, Address)
        self._check_type("shipper_contact", shipper_contact, Contact)
        self.shipper_address = shipper_address
        self.shipper_contact = shipper_contact
        return self

    def set_receiver_details(self, receiver_address: Address, receiver_contact: Contact) -> "ShipmentService":
        self._check_type("receiver_address", receiver_address, Address)
        self._check_type("receiver_contact", receiver_contact, Contact)
        self.receiver_address = receiver_address
        self.receiver_contact = receiver_contact
        return self

    def set_get_rate_estimates(self, get_rate_estimates: bool) -> "ShipmentService":
        self._check_type("get_rate_estimates", get_rate_estimates, bool)
        self.get_rate_estimates = get_rate_estimates
        return self

    def set_packages(self, packages: list[Package]) -> "ShipmentService":
        """
        Raises:
            InvalidArgumentError: If any element is not a Package
        """
        self.packages = self._check_elements(packages, Package)
        return self

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _prepare_query(self) -> dict[str, Any]:
        query: dict[str, Any] = {
            "plannedShippingDateAndTime": self._format_date(self.planned_shipping_date_and_time),
            "accounts": [account.to_dict() for account in self.accounts],
            "customerDetails": {
                "shipperDetails": {
                    "postalAddress": self.shipper_address.to_dict(),
                    "contactInformation": self.shipper_contact.to_dict(),
                },
                "receiverDetails": {
                    "postalAddress": self.receiver_address.to_dict(),
                    "contactInformation": self.receiver_contact.to_dict(),
                },
            },
            "content": {
                "packages": [package.to_dict() for package in self.packages],
            },
            "getRateEstimates": bool_to_string(self.get_rate_estimates),
            "productCode": self.product_code,
        }

        if self.local_product_code != "":
            query["localProductCode"] = self.local_product_code

        if self.receiver_contact.email != "":
            query["shipmentNotification"] = {
                "typeCode": "email",
                "languageCountryCode": self.receiver_address.country_code,
                "receiverId": self.receiver_contact.email,
            }

        if self.is_pickup_requested:
            query["pickup"] = {
                "isRequested": bool_to_string(self.is_pickup_requested),
                "closeTime": self.pickup_close_time,
                "location": self.pickup_location,
            }
            query["pickupDetails"] = {
                "postalAddress": self.pickup_address.to_dict(),
                "contactInformation": self.pickup_contact.to_dict(),
            }

        return query

    def _validate_params(self) -> None:
        for param in self.REQUIRED_ARGUMENTS:
            if getattr(self, param) is None:
                raise MissingArgumentError(param)

        if self.is_pickup_requested:
            for param in ("pickup_address", "pickup_contact"):
                if getattr(self, param) is None:
                    raise MissingArgumentError(param)

    @staticmethod
    def _format_date(date: datetime) -> str:
        if date.tzinfo is None:
            date = date.replace(tzinfo=timezone.utc)
        return date.isoformat(timespec="seconds")

    @staticmethod
    def _check_type(name: str, value: Any, expected: type) -> None:
        if not isinstance(value, expected):
            raise InvalidArgumentError(
                f"{name} should be of type {expected.__name__}, got {type(value).__name__}"
            )

    @staticmethod
    def _check_elements(values: list, expected: type) -> list:
        if not isinstance(values, (list, tuple)):
            raise InvalidArgumentError(
                f"Expected a list of {expected.__name__}, got {type(values).__name__}"
            )
        for value in values:
            if not isinstance(value, expected):
                raise InvalidArgumentError(f"Array should contain values of type {expected.__name__}")
        return list(values)
