"""
Carrier API Port - Contract for the HTTP collaborator.

The shipment builder only needs to post a JSON payload to an endpoint and
get the decoded JSON body back. Transport concerns (auth, timeouts,
sessions) stay behind this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..exceptions import MyDHLError


# =============================================================================
# Exceptions
# =============================================================================

class CarrierApiError(MyDHLError):
    """Error returned by, or while talking to, the carrier API."""
    
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        details: Optional[Any] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.endpoint = endpoint
        self.details = details


class AuthenticationError(CarrierApiError):
    """Credentials were rejected (HTTP 401)."""


class NotFoundError(CarrierApiError):
    """Endpoint or resource not found (HTTP 404)."""


# =============================================================================
# Port Interface
# =============================================================================

class CarrierApiPort(ABC):
    """
    Abstract interface for the carrier's HTTP API.
    
    Implementations return the decoded JSON body as a dict and raise
    CarrierApiError (or a subclass) on failure.
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Get the carrier API name."""
        ...
    
    @abstractmethod
    def get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Send a GET request.
        
        Args:
            endpoint: Path relative to the API base URL
            params: Optional query parameters
            
        Returns:
            Decoded JSON body
        """
        ...
    
    @abstractmethod
    def post(self, endpoint: str, json: dict[str, Any]) -> dict[str, Any]:
        """
        Send a POST request with a JSON body.
        
        Args:
            endpoint: Path relative to the API base URL (e.g. 'shipments')
            json: Request payload
            
        Returns:
            Decoded JSON body
        """
        ...
