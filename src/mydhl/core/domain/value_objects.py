"""
Value Objects - Immutable request building blocks.

Each value object validates its input on construction and renders itself
to the nested mapping the MyDHL API expects (camelCase field names).
"""

from dataclasses import dataclass
from typing import Any, Union

from ..exceptions import InvalidArgumentError, InvalidAddressError


Number = Union[int, float]


def bool_to_string(value: bool) -> str:
    """Render a boolean the way the API expects it ("true"/"false")."""
    return "true" if value else "false"


def _require(data: Any, key: str, owner: str) -> Any:
    """Fetch a mandatory key from a mapping used by from_dict()."""
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"{owner} data must be a mapping, got {type(data).__name__}")
    if key not in data:
        raise InvalidArgumentError(f"{owner} is missing required key '{key}'")
    return data[key]


def _check_strings(owner: Any, *names: str, error: type = InvalidArgumentError) -> None:
    """Raise if any of the named attributes is not a str."""
    for name in names:
        value = getattr(owner, name)
        if not isinstance(value, str):
            raise error(
                f"{type(owner).__name__}.{name} must be a string, got {type(value).__name__}"
            )


def _check_numbers(owner: Any, *names: str) -> None:
    """Raise if any of the named attributes is not an int or float."""
    for name in names:
        value = getattr(owner, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidArgumentError(
                f"{type(owner).__name__}.{name} must be a number, got {type(value).__name__}"
            )


# =============================================================================
# Addresses
# =============================================================================

@dataclass(frozen=True)
class RateAddress:
    """
    Minimal address used for rating: country, postal code and city.

    The country code is upper-cased before validation.

    Raises:
        InvalidAddressError: If any field is malformed
    """

    country_code: str
    postal_code: str
    city_name: str

    def __post_init__(self) -> None:
        if not isinstance(self.country_code, str):
            raise InvalidAddressError(
                f"Country Code must be a string. Entered: {self.country_code!r}"
            )
        object.__setattr__(self, "country_code", self.country_code.upper())
        self._validate()

    def _validate(self) -> None:
        _check_strings(self, "postal_code", "city_name", error=InvalidAddressError)

        if len(self.country_code) != 2:
            raise InvalidAddressError(
                f"Country Code must be 2 characters long. Entered: {self.country_code}"
            )

        if len(self.postal_code) < 3:
            raise InvalidAddressError(
                f"Postal Code must be at least 3 characters long. Entered: {self.postal_code}"
            )

        if len(self.city_name) == 0:
            raise InvalidAddressError(
                f"City name must not be empty. Entered: {self.city_name}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "countryCode": self.country_code,
            "postalCode": self.postal_code,
            "cityName": self.city_name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RateAddress":
        return cls(
            country_code=_require(data, "countryCode", cls.__name__),
            postal_code=_require(data, "postalCode", cls.__name__),
            city_name=_require(data, "cityName", cls.__name__),
        )


@dataclass(frozen=True)
class Address(RateAddress):
    """Full postal address for shipper, receiver and pickup details."""

    address_line1: str = ""
    address_line2: str = ""
    address_line3: str = ""
    county_name: str = ""
    province_code: str = ""

    def _validate(self) -> None:
        super()._validate()
        _check_strings(
            self,
            "address_line1",
            "address_line2",
            "address_line3",
            "county_name",
            "province_code",
            error=InvalidAddressError,
        )

        if not self.address_line1:
            raise InvalidAddressError(
                f"Address line 1 must not be empty. Entered: {self.address_line1!r}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Render the postalAddress block; empty optional lines are omitted."""
        data: dict[str, Any] = {
            "postalCode": self.postal_code,
            "cityName": self.city_name,
            "countryCode": self.country_code,
            "addressLine1": self.address_line1,
        }

        optional = {
            "addressLine2": self.address_line2,
            "addressLine3": self.address_line3,
            "countyName": self.county_name,
            "provinceCode": self.province_code,
        }
        data.update({key: value for key, value in optional.items() if value})

        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Address":
        return cls(
            country_code=_require(data, "countryCode", cls.__name__),
            postal_code=_require(data, "postalCode", cls.__name__),
            city_name=_require(data, "cityName", cls.__name__),
            address_line1=_require(data, "addressLine1", cls.__name__),
            address_line2=data.get("addressLine2", ""),
            address_line3=data.get("addressLine3", ""),
            county_name=data.get("countyName", ""),
            province_code=data.get("provinceCode", ""),
        )


# =============================================================================
# Contacts, Accounts, Packages
# =============================================================================

@dataclass(frozen=True)
class Contact:
    """Contact information attached to an address."""

    phone: str
    company_name: str
    full_name: str
    email: str = ""
    mobile_phone: str = ""

    def __post_init__(self) -> None:
        _check_strings(self, "phone", "company_name", "full_name", "email", "mobile_phone")

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "phone": self.phone,
            "companyName": self.company_name,
            "fullName": self.full_name,
        }
        if self.email:
            data["email"] = self.email
        if self.mobile_phone:
            data["mobilePhone"] = self.mobile_phone
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        return cls(
            phone=_require(data, "phone", cls.__name__),
            company_name=_require(data, "companyName", cls.__name__),
            full_name=_require(data, "fullName", cls.__name__),
            email=data.get("email", ""),
            mobile_phone=data.get("mobilePhone", ""),
        )


@dataclass(frozen=True)
class Account:
    """Billing account; type_code is e.g. "shipper", "payer" or "duties-taxes"."""

    type_code: str
    number: str

    def __post_init__(self) -> None:
        _check_strings(self, "type_code", "number")

    def to_dict(self) -> dict[str, Any]:
        return {
            "typeCode": self.type_code,
            "number": self.number,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Account":
        return cls(
            type_code=_require(data, "typeCode", cls.__name__),
            number=_require(data, "number", cls.__name__),
        )


@dataclass(frozen=True)
class Package:
    """A single piece: weight plus outer dimensions."""

    weight: Number
    length: Number
    width: Number
    height: Number

    def __post_init__(self) -> None:
        _check_numbers(self, "weight", "length", "width", "height")

    def to_dict(self) -> dict[str, Any]:
        return {
            "weight": self.weight,
            "dimensions": {
                "length": self.length,
                "width": self.width,
                "height": self.height,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Package":
        dimensions = data.get("dimensions", data) if isinstance(data, dict) else data
        return cls(
            weight=_require(data, "weight", cls.__name__),
            length=_require(dimensions, "length", cls.__name__),
            width=_require(dimensions, "width", cls.__name__),
            height=_require(dimensions, "height", cls.__name__),
        )
