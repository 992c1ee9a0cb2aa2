"""Shared fixtures for mydhl tests."""

from datetime import datetime, timezone

import pytest

from mydhl.core.domain import Account, Address, Contact, Package


@pytest.fixture
def shipper_address():
    return Address(
        country_code="de",
        postal_code="10115",
        city_name="Berlin",
        address_line1="Invalidenstr. 1",
    )


@pytest.fixture
def shipper_contact():
    return Contact(
        phone="+49301234567",
        company_name="Acme GmbH",
        full_name="Jane Doe",
    )


@pytest.fixture
def receiver_address():
    return Address(
        country_code="GB",
        postal_code="EC1A 1BB",
        city_name="London",
        address_line1="1 High Street",
        address_line2="Floor 2",
    )


@pytest.fixture
def receiver_contact():
    return Contact(
        phone="+442071234567",
        company_name="Widgets Ltd",
        full_name="John Roe",
        email="john@example.com",
    )


@pytest.fixture
def accounts():
    return [Account(type_code="shipper", number="123456789")]


@pytest.fixture
def packages():
    return [Package(weight=1.5, length=20, width=15, height=10)]


@pytest.fixture
def planned_date():
    return datetime(2024, 5, 2, 14, 30, tzinfo=timezone.utc)


@pytest.fixture
def shipment_response():
    """A trimmed POST /shipments response body."""
    return {
        "url": "https://express.api.dhl.com/mydhlapi/shipments",
        "shipmentTrackingNumber": "1234567890",
        "cancelPickupUrl": "https://express.api.dhl.com/mydhlapi/shipments/1234567890/cancel-pickup",
        "trackingUrl": "https://express.api.dhl.com/mydhlapi/shipments/1234567890/tracking",
        "dispatchConfirmationNumber": "PRG200227000256",
        "packages": [
            {"referenceNumber": 1, "trackingNumber": "JD914600003889482921"},
        ],
        "documents": [
            {"imageFormat": "PDF", "content": "JVBERi0xLjQK", "typeCode": "label"},
        ],
        "shipmentDetails": [
            {"serviceHandlingFeatureCodes": ["PLT"], "volumetricWeight": 0.6},
        ],
        "shipmentCharges": [
            {"currencyType": "BILLC", "priceCurrency": "EUR", "price": 42.1},
        ],
        "warnings": ["Product code was adjusted"],
    }
