"""Tests for ShipmentResponseParser."""

import json

import pytest

from mydhl.adapters.parsers import ShipmentResponseParser
from mydhl.core.exceptions import ResponseParseError
from mydhl.core.ports import ShipmentParserPort


class TestShipmentResponseParser:
    """Tests for mapping a response body to a Shipment."""
    
    @pytest.fixture
    def parser(self):
        return ShipmentResponseParser()
    
    def test_maps_all_fields(self, parser, shipment_response):
        shipment = parser.parse(shipment_response)
        
        assert shipment.shipment_tracking_number == "1234567890"
        assert shipment.cancel_pickup_url == shipment_response["cancelPickupUrl"]
        assert shipment.tracking_url == shipment_response["trackingUrl"]
        assert shipment.dispatch_confirmation_number == "PRG200227000256"
        assert shipment.packages == shipment_response["packages"]
        assert shipment.documents == shipment_response["documents"]
        assert shipment.shipment_details == shipment_response["shipmentDetails"]
        assert shipment.shipment_charges == shipment_response["shipmentCharges"]
        assert shipment.warnings == ["Product code was adjusted"]
    
    def test_label_is_first_document_content(self, parser, shipment_response):
        shipment = parser.parse(shipment_response)
        
        assert shipment.label_pdf == "JVBERi0xLjQK"
        assert "labelPdf" not in shipment.to_dict()
    
    def test_minimal_response_uses_defaults(self, parser):
        shipment = parser.parse({"shipmentTrackingNumber": "987"})
        
        assert shipment.shipment_tracking_number == "987"
        assert shipment.cancel_pickup_url == ""
        assert shipment.dispatch_confirmation_number == ""
        assert shipment.label_pdf == ""
        assert shipment.documents == []
        assert shipment.warnings == []
    
    def test_numeric_tracking_number_becomes_string(self, parser):
        assert parser.parse({"shipmentTrackingNumber": 123}).shipment_tracking_number == "123"
    
    def test_missing_tracking_number(self, parser):
        with pytest.raises(ResponseParseError, match="shipmentTrackingNumber"):
            parser.parse({"trackingUrl": "https://example.test"})
    
    def test_non_mapping_response(self, parser):
        with pytest.raises(ResponseParseError):
            parser.parse([])
    
    def test_list_field_with_wrong_type(self, parser):
        with pytest.raises(ResponseParseError, match="warnings"):
            parser.parse({"shipmentTrackingNumber": "1", "warnings": "oops"})
    
    def test_null_strings_become_empty(self, parser):
        shipment = parser.parse({
            "shipmentTrackingNumber": "1",
            "cancelPickupUrl": None,
            "trackingUrl": None,
            "dispatchConfirmationNumber": None,
            "documents": [{"content": None}],
        })
        
        assert shipment.cancel_pickup_url == ""
        assert shipment.tracking_url == ""
        assert shipment.dispatch_confirmation_number == ""
        assert shipment.label_pdf == ""
        assert json.loads(str(shipment))["trackingUrl"] == ""
    
    def test_later_response_changes_do_not_leak(self, parser, shipment_response):
        shipment = parser.parse(shipment_response)
        
        shipment_response["warnings"].append("added later")
        shipment_response["documents"][0]["content"] = "changed"
        
        assert shipment.warnings == ["Product code was adjusted"]
        assert shipment.documents[0]["content"] == "JVBERi0xLjQK"
    
    def test_implements_parser_port(self, parser):
        assert isinstance(parser, ShipmentParserPort)
