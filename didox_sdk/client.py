"""
Main entry point of the SDK.

DidoxClient wires the configuration, the HTTP transport and the API
modules together.
"""

import logging
from typing import Optional

import requests

from didox_sdk.api import AccountApi, AuthApi, DocumentsApi, ProfileApi, UtilitiesApi
from didox_sdk.http import HttpClient
from didox_sdk.infrastructure import DidoxConfig

logger = logging.getLogger(__name__)


class DidoxClient:
    """
    Didox API client.

    Example:
        >>> client = DidoxClient(DidoxConfig(partner_token="token"))
        >>> login = client.auth.login_legal_entity("123456789", "password123")
        >>> client.set_access_token(login["token"])
        >>> payload = client.documents.builders.act()...build()
        >>> client.documents.create_draft("005", payload)
    """

    def __init__(self, config: DidoxConfig, session: Optional[requests.Session] = None):
        """
        Initialize client.

        Args:
            config: Validated SDK configuration
            session: Optional requests session (for custom adapters or testing)
        """
        self.config = config
        self.http = HttpClient(
            base_url=config.base_url,
            partner_token=config.partner_token,
            timeout=config.timeout,
            session=session,
        )
        self.auth = AuthApi(self.http)
        self.account = AccountApi(self.http)
        self.profile = ProfileApi(self.http)
        self.utilities = UtilitiesApi(self.http)
        self.documents = DocumentsApi(self.http)

        logger.info(f"Didox client initialized ({config.environment}: {config.base_url})")

    @classmethod
    def from_env(
        cls, dotenv_path: Optional[str] = None, session: Optional[requests.Session] = None
    ) -> "DidoxClient":
        """Create a client configured from DIDOX_* environment variables."""
        return cls(DidoxConfig.from_env(dotenv_path), session=session)

    def set_access_token(self, token: str) -> None:
        """Authenticate subsequent requests with a user token from a login call."""
        self.http.set_access_token(token)

    def clear_access_token(self) -> None:
        """Drop the user token."""
        self.http.clear_access_token()

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self.http.close()
