"""
Shipment File Loader - Read a JSON shipment description into a builder.

The file uses the API's camelCase vocabulary:

    {
        "plannedShippingDateAndTime": "2024-05-02T14:00:00+02:00",
        "productCode": "P",
        "localProductCode": "P",
        "getRateEstimates": false,
        "accounts": [{"typeCode": "shipper", "number": "123456789"}],
        "shipper": {"address": {...}, "contact": {...}},
        "receiver": {"address": {...}, "contact": {...}},
        "pickup": {
            "isRequested": true, "closeTime": "18:00", "location": "reception",
            "address": {...}, "contact": {...}
        },
        "packages": [{"weight": 1.5, "dimensions": {"length": 20, "width": 15, "height": 10}}]
    }
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from ...core.domain import Account, Address, Contact, Package
from ...core.exceptions import InvalidArgumentError, ShipmentFileError

if TYPE_CHECKING:
    from ...application.services import ShipmentService


class ShipmentFileLoader:
    """Applies a shipment description to a ShipmentService."""

    def __init__(self):
        self.logger = logging.getLogger("ShipmentFileLoader")

    def load(self, path: Union[str, Path]) -> dict[str, Any]:
        """
        Read and decode a shipment description file.

        Raises:
            ShipmentFileError: If the file is missing or not a JSON object
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ShipmentFileError(f"Cannot read shipment file {path}: {e}", cause=e)
        except json.JSONDecodeError as e:
            raise ShipmentFileError(f"Invalid JSON in {path}: {e}", cause=e)

        if not isinstance(data, dict):
            raise ShipmentFileError(f"Shipment file {path} must contain a JSON object")

        self.logger.debug(f"Loaded shipment description from {path}")
        return data

    def apply(self, data: dict[str, Any], service: "ShipmentService") -> "ShipmentService":
        """
        Configure the service from a decoded description.

        Only keys present in the description are applied, so missing
        required fields still surface as MissingArgumentError on send.
        """
        if "plannedShippingDateAndTime" in data:
            service.set_planned_shipping_date_and_time(
                self._parse_date(data["plannedShippingDateAndTime"])
            )

        if "productCode" in data:
            service.set_product_code(data["productCode"])

        if "localProductCode" in data:
            service.set_local_product_code(data["localProductCode"])

        if "getRateEstimates" in data:
            service.set_get_rate_estimates(data["getRateEstimates"])

        if "accounts" in data:
            accounts = self._list(data["accounts"], "accounts")
            service.set_accounts([Account.from_dict(a) for a in accounts])

        if "packages" in data:
            packages = self._list(data["packages"], "packages")
            service.set_packages([Package.from_dict(p) for p in packages])

        if "shipper" in data:
            service.set_shipper_details(*self._party(data["shipper"], "shipper"))

        if "receiver" in data:
            service.set_receiver_details(*self._party(data["receiver"], "receiver"))

        pickup = data.get("pickup")
        if pickup is None:
            service.set_pickup(False)
        elif not isinstance(pickup, dict):
            raise InvalidArgumentError("'pickup' must be an object")
        else:
            service.set_pickup(
                pickup.get("isRequested", False),
                pickup.get("closeTime", ""),
                pickup.get("location", ""),
            )
            if "address" in pickup or "contact" in pickup:
                service.set_pickup_details(*self._party(pickup, "pickup"))

        return service

    def load_into(self, path: Union[str, Path], service: "ShipmentService") -> "ShipmentService":
        """Read a file and apply it to the service."""
        return self.apply(self.load(path), service)

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    @staticmethod
    def _list(value: Any, label: str) -> list:
        if not isinstance(value, list):
            raise InvalidArgumentError(f"'{label}' must be a list, got {type(value).__name__}")
        return value

    @staticmethod
    def _party(block: Any, label: str) -> tuple[Address, Contact]:
        if not isinstance(block, dict):
            raise InvalidArgumentError(f"'{label}' must be an object with address and contact")
        if "address" not in block or "contact" not in block:
            raise InvalidArgumentError(f"'{label}' needs both 'address' and 'contact'")
        return Address.from_dict(block["address"]), Contact.from_dict(block["contact"])

    @staticmethod
    def _parse_date(value: Any) -> datetime:
        if not isinstance(value, str):
            raise InvalidArgumentError(
                f"plannedShippingDateAndTime must be an ISO-8601 string, got {value!r}"
            )
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid plannedShippingDateAndTime '{value}': {e}", cause=e)
