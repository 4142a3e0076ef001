"""
HTTP client for the Didox API.

Thin wrapper around a requests.Session that adds the partner and user
authentication headers, encodes JSON bodies and turns transport and
API failures into SDK exceptions.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from didox_sdk.shared import ACCESS_TOKEN_HEADER, DEFAULT_TIMEOUT_SECONDS, PARTNER_TOKEN_HEADER
from didox_sdk.shared.errors import DidoxApiError, DidoxNetworkError

logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    """Parsed API response."""

    data: Any
    status: int
    headers: Dict[str, str] = field(default_factory=dict)


class HttpClient:
    """
    Synchronous JSON client bound to one API base URL.

    Example:
        >>> client = HttpClient("https://stage.goodsign.biz", partner_token="token")
        >>> response = client.get("/v1/documents/abc")
        >>> response.data
    """

    def __init__(
        self,
        base_url: str,
        partner_token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: API base URL without trailing slash
            partner_token: Partner token sent with every request
            timeout: Request timeout in seconds
            session: Optional pre-configured session (a new one is created otherwise)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self._partner_token: Optional[str] = None
        self._access_token: Optional[str] = None

        if partner_token:
            self.set_partner_token(partner_token)

    def set_partner_token(self, token: str) -> None:
        """Set the partner token (Authorization and Partner-Authorization headers)."""
        self._partner_token = token

    def set_access_token(self, token: str) -> None:
        """Set the user access token sent as the user-key header."""
        self._access_token = token

    def clear_access_token(self) -> None:
        """Stop sending the user-key header."""
        self._access_token = None

    @property
    def has_access_token(self) -> bool:
        return self._access_token is not None

    def _default_headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._partner_token:
            headers["Authorization"] = f"Bearer {self._partner_token}"
            headers[PARTNER_TOKEN_HEADER] = self._partner_token
        if self._access_token:
            headers[ACCESS_TOKEN_HEADER] = self._access_token
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> HttpResponse:
        """
        Send a request and parse the JSON response.

        Args:
            method: HTTP method
            endpoint: Path relative to the base URL (e.g. "/v1/documents/002/create")
            body: JSON-serializable request body (omitted when None)
            headers: Extra headers; they override the defaults
            timeout: Per-request timeout in seconds
            params: Query string parameters (None values are dropped)

        Returns:
            HttpResponse with parsed data (None for an empty body)

        Raises:
            DidoxApiError: If the response is not 2xx or not valid JSON
            DidoxNetworkError: If the request times out or cannot be sent
        """
        url = f"{self.base_url}{endpoint}"
        request_headers = self._default_headers()
        request_headers.update(headers or {})
        request_timeout = timeout if timeout is not None else self.timeout
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                headers=request_headers,
                json=body,
                params=params,
                timeout=request_timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.warning(f"{method} {url} timed out after {request_timeout}s")
            raise DidoxNetworkError(f"Request timeout after {request_timeout}s", cause=e)
        except requests.exceptions.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise DidoxNetworkError("Network request failed", cause=e)

        data = self._parse_body(response)

        if not response.ok:
            logger.warning(f"{method} {url} returned HTTP {response.status_code}")
            raise DidoxApiError(
                f"HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
                response=data,
            )

        return HttpResponse(
            data=data,
            status=response.status_code,
            headers=dict(response.headers),
        )

    @staticmethod
    def _parse_body(response: requests.Response) -> Any:
        if not response.text:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DidoxApiError(
                "Invalid JSON response from Didox API",
                status_code=response.status_code,
                cause=e,
            )

    def get(self, endpoint: str, **kwargs: Any) -> HttpResponse:
        """Send a GET request."""
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, body: Optional[Any] = None, **kwargs: Any) -> HttpResponse:
        """Send a POST request with an optional JSON body."""
        return self.request("POST", endpoint, body=body, **kwargs)

    def put(self, endpoint: str, body: Optional[Any] = None, **kwargs: Any) -> HttpResponse:
        """Send a PUT request with an optional JSON body."""
        return self.request("PUT", endpoint, body=body, **kwargs)

    def delete(self, endpoint: str, **kwargs: Any) -> HttpResponse:
        """Send a DELETE request."""
        return self.request("DELETE", endpoint, **kwargs)

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()
