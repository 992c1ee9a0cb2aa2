"""
MyDHL API Client - Low-level HTTP client for the MyDHL REST API.

This handles the raw HTTP communication with DHL Express.
ShipmentService uses it through the CarrierApiPort interface.
"""

import logging
from typing import Any, Optional

import requests

from ...core.ports.carrier_api import (
    CarrierApiPort,
    CarrierApiError,
    AuthenticationError,
    NotFoundError,
)
from ...core.ports.config_provider import ApiConfig


class MyDHLApiClient(CarrierApiPort):
    """
    Low-level MyDHL REST API client.

    Handles basic authentication, request/response, and error mapping.
    """

    PRODUCTION_URL = "https://express.api.dhl.com/mydhlapi"
    TEST_URL = "https://express.api.dhl.com/mydhlapi/test"

    def __init__(
        self,
        username: str,
        password: str,
        test_mode: bool = True,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the MyDHL client.

        Args:
            username: API key issued by DHL
            password: API secret issued by DHL
            test_mode: If True, use the sandbox endpoint
            base_url: Explicit base URL (overrides test_mode)
            timeout: Per-request timeout in seconds
            session: Optional pre-built requests session
        """
        default_url = self.TEST_URL if test_mode else self.PRODUCTION_URL
        self.base_url = (base_url or default_url).rstrip("/")
        self.test_mode = test_mode
        self.timeout = timeout
        self.logger = logging.getLogger("MyDHLApiClient")

        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        self._session = session or requests.Session()
        self._session.auth = (username, password)
        self._session.headers.update(self.headers)

    @classmethod
    def from_config(cls, config: ApiConfig) -> "MyDHLApiClient":
        """Build a client from an ApiConfig."""
        return cls(
            username=config.username,
            password=config.password,
            test_mode=config.test_mode,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    @property
    def name(self) -> str:
        return "MyDHL"

    # -------------------------------------------------------------------------
    # Core Request Methods
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> dict[str, Any]:
        """
        Make an authenticated request to the MyDHL API.

        Args:
            method: HTTP method (GET, POST)
            endpoint: API endpoint (e.g., 'shipments')
            **kwargs: Additional arguments for requests

        Returns:
            JSON response as dict

        Raises:
            CarrierApiError: On API errors
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault("timeout", self.timeout)
        self.logger.debug(f"{method} {url}")

        try:
            response = self._session.request(method, url, **kwargs)
        except requests.exceptions.ConnectionError as e:
            raise CarrierApiError(f"Connection failed: {e}", endpoint=endpoint, cause=e)
        except requests.exceptions.Timeout as e:
            raise CarrierApiError(f"Request timed out: {e}", endpoint=endpoint, cause=e)

        return self._handle_response(response, endpoint)

    def get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """GET request."""
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, json: dict[str, Any]) -> dict[str, Any]:
        """POST request with a JSON body."""
        return self.request("POST", endpoint, json=json)

    # -------------------------------------------------------------------------
    # Response Handling
    # -------------------------------------------------------------------------

    def _handle_response(
        self,
        response: requests.Response,
        endpoint: str
    ) -> dict[str, Any]:
        """Handle API response and errors."""
        if response.ok:
            if not response.text:
                return {}
            try:
                return response.json()
            except ValueError as e:
                raise CarrierApiError(
                    f"Invalid JSON in response from {endpoint}",
                    status_code=response.status_code,
                    endpoint=endpoint,
                    cause=e,
                )

        status = response.status_code
        details = self._problem_details(response)
        self.logger.error(f"API error {status} on {endpoint}: {details}")

        if status == 401:
            raise AuthenticationError(
                "Authentication failed. Check MYDHL_USERNAME and MYDHL_PASSWORD.",
                status_code=status,
                endpoint=endpoint,
                details=details,
            )

        if status == 404:
            raise NotFoundError(
                f"Not found: {endpoint}",
                status_code=status,
                endpoint=endpoint,
                details=details,
            )

        raise CarrierApiError(
            f"API error {status}: {self._describe(details, response)}",
            status_code=status,
            endpoint=endpoint,
            details=details,
        )

    @staticmethod
    def _problem_details(response: requests.Response) -> Any:
        """Decode the error body; DHL sends problem+json documents."""
        try:
            return response.json()
        except ValueError:
            return response.text[:500] if response.text else ""

    @staticmethod
    def _describe(details: Any, response: requests.Response) -> str:
        if not isinstance(details, dict):
            return str(details) or response.reason or ""

        message = details.get("detail") or details.get("title") or details.get("message") or ""
        additional = details.get("additionalDetails") or []
        if additional:
            message = f"{message} ({'; '.join(str(item) for item in additional)})"
        return message
