"""
Response Parser Port - Contract for mapping carrier responses to results.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..domain.shipment import Shipment


class ShipmentParserPort(ABC):
    """Abstract interface for turning a decoded response body into a Shipment."""
    
    @abstractmethod
    def parse(self, response: dict[str, Any]) -> Shipment:
        """
        Build a Shipment from a decoded response body.
        
        Raises:
            ResponseParseError: If the response lacks required data
        """
        ...
