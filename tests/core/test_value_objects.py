"""Tests for domain value objects."""

import dataclasses

import pytest

from mydhl.core.domain import (
    Account,
    Address,
    Contact,
    Package,
    RateAddress,
    bool_to_string,
)
from mydhl.core.exceptions import InvalidAddressError, InvalidArgumentError


class TestRateAddress:
    """Tests for RateAddress validation."""
    
    def test_uppercases_country_code(self):
        address = RateAddress("de", "10115", "Berlin")
        assert address.country_code == "DE"
    
    def test_rejects_one_character_country_code(self):
        with pytest.raises(InvalidAddressError, match="Country Code"):
            RateAddress("D", "10115", "Berlin")
    
    def test_rejects_three_character_country_code(self):
        with pytest.raises(InvalidAddressError):
            RateAddress("DEU", "10115", "Berlin")
    
    def test_rejects_short_postal_code(self):
        with pytest.raises(InvalidAddressError, match="Postal Code"):
            RateAddress("DE", "10", "Berlin")
    
    def test_accepts_three_character_postal_code(self):
        assert RateAddress("DE", "101", "Berlin").postal_code == "101"
    
    def test_rejects_empty_city(self):
        with pytest.raises(InvalidAddressError, match="City name"):
            RateAddress("DE", "10115", "")
    
    def test_rejects_non_string_country(self):
        with pytest.raises(InvalidAddressError):
            RateAddress(49, "10115", "Berlin")
    
    def test_address_error_is_invalid_argument(self):
        with pytest.raises(InvalidArgumentError):
            RateAddress("D", "10115", "Berlin")
    
    def test_is_immutable(self):
        address = RateAddress("DE", "10115", "Berlin")
        with pytest.raises(dataclasses.FrozenInstanceError):
            address.city_name = "Hamburg"
    
    def test_to_dict(self):
        assert RateAddress("de", "10115", "Berlin").to_dict() == {
            "countryCode": "DE",
            "postalCode": "10115",
            "cityName": "Berlin",
        }


class TestAddress:
    """Tests for the full postal Address."""
    
    def test_inherits_rate_address_validation(self):
        with pytest.raises(InvalidAddressError):
            Address("D", "10115", "Berlin", address_line1="Street 1")
    
    def test_uppercases_country_code(self):
        address = Address("gb", "EC1A 1BB", "London", address_line1="1 High St")
        assert address.country_code == "GB"
    
    def test_requires_first_address_line(self):
        with pytest.raises(InvalidAddressError, match="Address line 1"):
            Address("DE", "10115", "Berlin")
    
    def test_to_dict_omits_empty_optional_lines(self):
        address = Address("DE", "10115", "Berlin", address_line1="Invalidenstr. 1")
        
        assert address.to_dict() == {
            "postalCode": "10115",
            "cityName": "Berlin",
            "countryCode": "DE",
            "addressLine1": "Invalidenstr. 1",
        }
    
    def test_to_dict_includes_optional_fields(self):
        address = Address(
            "US", "10001", "New York",
            address_line1="350 5th Ave",
            address_line2="Suite 100",
            province_code="NY",
        )
        
        data = address.to_dict()
        
        assert data["addressLine2"] == "Suite 100"
        assert data["provinceCode"] == "NY"
        assert "addressLine3" not in data
        assert "countyName" not in data
    
    def test_from_dict(self):
        address = Address.from_dict({
            "countryCode": "de",
            "postalCode": "10115",
            "cityName": "Berlin",
            "addressLine1": "Invalidenstr. 1",
            "addressLine2": "Hinterhaus",
        })
        
        assert address.country_code == "DE"
        assert address.address_line2 == "Hinterhaus"
    
    def test_from_dict_missing_key(self):
        with pytest.raises(InvalidArgumentError, match="cityName"):
            Address.from_dict({
                "countryCode": "DE",
                "postalCode": "10115",
                "addressLine1": "Invalidenstr. 1",
            })
    
    def test_rejects_non_string_optional_line(self):
        with pytest.raises(InvalidAddressError, match="address_line2"):
            Address("DE", "10115", "Berlin", "Invalidenstr. 1", address_line2=None)
    
    def test_rejects_non_string_postal_code(self):
        with pytest.raises(InvalidAddressError, match="postal_code"):
            Address("DE", 10115, "Berlin", "Invalidenstr. 1")


class TestContact:
    """Tests for Contact serialization."""
    
    def test_to_dict_without_optional_fields(self):
        contact = Contact("+4930123", "Acme GmbH", "Jane Doe")
        
        assert contact.to_dict() == {
            "phone": "+4930123",
            "companyName": "Acme GmbH",
            "fullName": "Jane Doe",
        }
    
    def test_to_dict_with_email_and_mobile(self):
        contact = Contact("+4930123", "Acme", "Jane", email="jane@acme.de", mobile_phone="+49170")
        data = contact.to_dict()
        
        assert data["email"] == "jane@acme.de"
        assert data["mobilePhone"] == "+49170"
    
    def test_from_dict(self):
        contact = Contact.from_dict({
            "phone": "+4930123",
            "companyName": "Acme",
            "fullName": "Jane",
            "email": "jane@acme.de",
        })
        assert contact.email == "jane@acme.de"
        assert contact.mobile_phone == ""
    
    def test_rejects_non_string_fields(self):
        with pytest.raises(InvalidArgumentError, match="Contact.phone"):
            Contact(phone=None, company_name=123, full_name=["Jane"])
    
    def test_from_dict_rejects_null_email(self):
        with pytest.raises(InvalidArgumentError, match="Contact.email"):
            Contact.from_dict({
                "phone": "+4930123",
                "companyName": "Acme",
                "fullName": "Jane",
                "email": None,
            })


class TestAccountAndPackage:
    """Tests for Account and Package."""
    
    def test_account_to_dict(self):
        assert Account("shipper", "123456789").to_dict() == {
            "typeCode": "shipper",
            "number": "123456789",
        }
    
    def test_package_to_dict(self):
        assert Package(weight=2.5, length=30, width=20, height=10).to_dict() == {
            "weight": 2.5,
            "dimensions": {"length": 30, "width": 20, "height": 10},
        }
    
    def test_package_from_nested_dict(self):
        package = Package.from_dict({
            "weight": 1,
            "dimensions": {"length": 2, "width": 3, "height": 4},
        })
        assert package == Package(1, 2, 3, 4)
    
    def test_package_from_flat_dict(self):
        package = Package.from_dict({"weight": 1, "length": 2, "width": 3, "height": 4})
        assert package == Package(1, 2, 3, 4)
    
    def test_account_from_dict_rejects_non_mapping(self):
        with pytest.raises(InvalidArgumentError):
            Account.from_dict(["shipper", "123"])
    
    def test_account_rejects_non_string_fields(self):
        with pytest.raises(InvalidArgumentError, match="Account.type_code"):
            Account(123, "1")
        with pytest.raises(InvalidArgumentError, match="Account.number"):
            Account("shipper", 123456789)
    
    @pytest.mark.parametrize("args", [
        ("heavy", 1, 1, 1),
        (1, None, 1, 1),
        (True, 1, 1, 1),
        (1, 1, [1], 1),
    ])
    def test_package_rejects_non_numeric_values(self, args):
        with pytest.raises(InvalidArgumentError, match="must be a number"):
            Package(*args)
    
    def test_package_from_dict_rejects_string_weight(self):
        with pytest.raises(InvalidArgumentError, match="Package.weight"):
            Package.from_dict({"weight": "2kg", "length": 2, "width": 3, "height": 4})


@pytest.mark.parametrize(("value", "expected"), [(True, "true"), (False, "false")])
def test_bool_to_string(value, expected):
    assert bool_to_string(value) == expected
