"""
Account endpoints of the logged-in user.

Both calls need a user access token (see DidoxClient.set_access_token).
"""

import logging
from typing import Any, Dict, Optional

from didox_sdk.http import HttpClient
from didox_sdk.shared.errors import DidoxApiError, DidoxAuthError
from didox_sdk.shared.validators import (
    validate_email,
    validate_flag,
    validate_mobile,
    validate_password,
)

logger = logging.getLogger(__name__)

UNAUTHORIZED_STATUSES = (401, 403)


class AccountApi:
    """Read and update the contact details of the current account."""

    def __init__(self, http_client: HttpClient):
        self._http = http_client

    def get_profile(self) -> Dict[str, Any]:
        """
        Get the current account profile.

        Returns:
            Response with "mobile", "email", "notifications" and "messengers"

        Raises:
            DidoxAuthError: If the access token is missing or rejected
            DidoxApiError: For any other API error
        """
        try:
            response = self._http.get("/v1/account")
        except DidoxApiError as e:
            if e.status_code in UNAUTHORIZED_STATUSES:
                raise DidoxAuthError(
                    f"Authentication failed: {e.message}", status_code=e.status_code, cause=e
                )
            raise

        return response.data

    def update_profile(
        self,
        mobile: str,
        email: str,
        notifications: int,
        password: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Update the current account profile.

        Args:
            mobile: Mobile number, 998XXXXXXXXX
            email: Contact e-mail
            notifications: 1 to enable notifications, 0 to disable
            password: New password (at least 8 characters); unchanged if None

        Returns:
            Updated profile

        Raises:
            ValidationError: If an argument is malformed
            DidoxAuthError: If the access token is missing or rejected
            DidoxApiError: For any other API error
        """
        validate_mobile(mobile)
        validate_email(email)
        validate_flag(notifications, "notifications")
        if password is not None:
            validate_password(password)

        body: Dict[str, Any] = {
            "mobile": mobile,
            "email": email,
            "notifications": notifications,
        }
        if password:
            body["password"] = password

        try:
            response = self._http.post("/v1/profile/update", body)
        except DidoxApiError as e:
            if e.status_code in UNAUTHORIZED_STATUSES:
                raise DidoxAuthError(
                    f"Authentication failed: {e.message}", status_code=e.status_code, cause=e
                )
            raise

        logger.info("Account profile updated")
        return response.data
