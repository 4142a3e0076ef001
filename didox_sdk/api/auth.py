"""
Authentication endpoints.

Two login flows are supported: a legal entity logging in with its
TIN and password, and an individual (already logged in) switching to
a company they are related to.
"""

import logging
from typing import Any, Dict

from didox_sdk.http import HttpClient
from didox_sdk.shared import ACCESS_TOKEN_HEADER, DEFAULT_LOCALE
from didox_sdk.shared.errors import DidoxApiError, DidoxAuthError
from didox_sdk.shared.validators import (
    validate_locale,
    validate_password,
    validate_tax_id,
    validate_user_token,
)

logger = logging.getLogger(__name__)

# The API answers rejected credentials with 422 Unprocessable Entity
AUTH_FAILED_STATUS = 422


class AuthApi:
    """Login operations. Returned tokens are not stored automatically."""

    def __init__(self, http_client: HttpClient):
        self._http = http_client

    def login_legal_entity(
        self, tax_id: str, password: str, locale: str = DEFAULT_LOCALE
    ) -> Dict[str, Any]:
        """
        Log in as a legal entity.

        Args:
            tax_id: Company TIN (9 digits)
            password: Account password (at least 8 characters)
            locale: Response language, "ru" or "uz"

        Returns:
            Response with "token" and "related_companies"

        Raises:
            ValidationError: If an argument is malformed
            DidoxAuthError: If the credentials are rejected
            DidoxApiError: For any other API error
        """
        validate_tax_id(tax_id)
        validate_password(password)
        validate_locale(locale)

        endpoint = f"/v1/auth/{tax_id}/password/{locale}"
        try:
            response = self._http.post(endpoint, {"password": password})
        except DidoxApiError as e:
            if e.status_code == AUTH_FAILED_STATUS:
                raise DidoxAuthError(
                    f"Authentication failed: {e.message}", status_code=e.status_code, cause=e
                )
            raise

        logger.info(f"Logged in as legal entity {tax_id}")
        return response.data

    def login_company_as_individual(
        self, company_tax_id: str, user_token: str, locale: str = DEFAULT_LOCALE
    ) -> Dict[str, Any]:
        """
        Switch an individual's session to a related company.

        Args:
            company_tax_id: Company TIN (9 digits)
            user_token: Token obtained by the individual's login
            locale: Response language, "ru" or "uz"

        Returns:
            Response with "token" and "permissions"

        Raises:
            ValidationError: If an argument is malformed
            DidoxAuthError: If the token is rejected
            DidoxApiError: For any other API error
        """
        validate_tax_id(company_tax_id, field_name="company_tax_id")
        validate_user_token(user_token)
        validate_locale(locale)

        endpoint = f"/v1/auth/company/{company_tax_id}/login/{locale}"
        try:
            response = self._http.post(endpoint, headers={ACCESS_TOKEN_HEADER: user_token})
        except DidoxApiError as e:
            if e.status_code == AUTH_FAILED_STATUS:
                raise DidoxAuthError(
                    f"Company login failed: {e.message}", status_code=e.status_code, cause=e
                )
            raise

        logger.info(f"Logged in to company {company_tax_id}")
        return response.data
