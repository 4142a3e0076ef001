"""
Company profile endpoints.

ProfileApi covers the company card itself and exposes the smaller
profile-scoped APIs as attributes: ``vat``, ``warehouses``,
``product_classes`` and ``users``.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from didox_sdk.api.product_classes import ProductClassesApi
from didox_sdk.http import HttpClient
from didox_sdk.shared import DEFAULT_LOCALE
from didox_sdk.shared.errors import DidoxApiError, DidoxAuthError, ValidationError
from didox_sdk.shared.validators import (
    validate_date,
    validate_dotted_date,
    validate_flag,
    validate_locale,
    validate_pinfl,
    validate_required_string,
    validate_tax_id,
    validate_tax_id_or_pinfl,
)

logger = logging.getLogger(__name__)

UNAUTHORIZED_STATUS = 401
NOT_UPDATED_STATUS = 422

# Wire keys of the profile update body that carry identifiers
_TIN_FIELDS = ("tin", "companyTaxId", "directorTin")
_PINFL_FIELDS = ("pinfl", "directorPinfl", "itemReleasedPinfl")
_FLAG_FIELDS = ("notifications", "offerSigned")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_profile_update(fields: Mapping[str, Any]) -> None:
    """
    Validate the optional fields of a profile update body.

    Only keys that are present are checked. PINFL fields and vatRate
    may be None to clear them.

    Raises:
        ValidationError: If a present field has the wrong shape
    """
    if not isinstance(fields, Mapping) or not fields:
        raise ValidationError(
            message="Profile update must be a non-empty mapping",
            field_name="fields",
        )

    for name in _FLAG_FIELDS:
        if name in fields:
            validate_flag(fields[name], name)
    for name in _TIN_FIELDS:
        if name in fields:
            validate_tax_id(fields[name], field_name=name)
    for name in _PINFL_FIELDS:
        if fields.get(name) is not None:
            validate_pinfl(fields[name], field_name=name)

    if "regionId" in fields and not _is_number(fields["regionId"]):
        raise ValidationError(message="regionId must be a number", field_name="regionId")
    if "vat" in fields and not _is_number(fields["vat"]):
        raise ValidationError(message="vat must be a number", field_name="vat")
    if fields.get("vatRate") is not None and not _is_number(fields["vatRate"]):
        raise ValidationError(message="vatRate must be a number or None", field_name="vatRate")
    if "excise" in fields and not isinstance(fields["excise"], bool):
        raise ValidationError(message="excise must be a boolean", field_name="excise")


class ProfileApi:
    """Company profile of the current access token."""

    def __init__(self, http_client: HttpClient):
        self._http = http_client
        self.vat = VatApi(http_client)
        self.warehouses = WarehousesApi(http_client)
        self.product_classes = ProductClassesApi(http_client)
        self.users = UsersApi(http_client)

    def _get_authorized(self, endpoint: str) -> Any:
        try:
            response = self._http.get(endpoint)
        except DidoxApiError as e:
            if e.status_code == UNAUTHORIZED_STATUS:
                raise DidoxAuthError(
                    "Unauthorized: Invalid user key", status_code=e.status_code, cause=e
                )
            raise
        return response.data

    def get_profile(self) -> Dict[str, Any]:
        """
        Get the company profile.

        Raises:
            DidoxAuthError: If the user key is rejected (401)
            DidoxApiError: For any other API error
        """
        return self._get_authorized("/v1/profile")

    def update_profile(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Update company profile fields.

        Args:
            fields: Wire-format (camelCase) fields to change, e.g.
                {"director": "Ivanov I.", "regionId": 26, "vatRate": 12}

        Returns:
            Updated profile

        Raises:
            ValidationError: If a field has the wrong shape
            DidoxApiError: If the API refuses the update (422 is reported
                as "User not updated")
        """
        validate_profile_update(fields)

        try:
            response = self._http.post("/v1/profile/update", dict(fields))
        except DidoxApiError as e:
            if e.status_code == NOT_UPDATED_STATUS:
                raise DidoxApiError(
                    "User not updated", status_code=e.status_code, response=e.response, cause=e
                )
            raise

        logger.info(f"Company profile updated ({', '.join(sorted(fields))})")
        return response.data

    def get_operators(self) -> Dict[str, Any]:
        """
        Get the EDI operators the company is connected to.

        Raises:
            DidoxAuthError: If the user key is rejected (401)
            DidoxApiError: For any other API error
        """
        return self._get_authorized("/v1/profile/operators")


class VatApi:
    """VAT registration and taxpayer type lookups."""

    def __init__(self, http_client: HttpClient):
        self._http = http_client

    def get_vat_reg_status(
        self, tax_id_or_pinfl: str, document_date: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Get the VAT registration status of a taxpayer.

        Args:
            tax_id_or_pinfl: TIN (9 digits) or PINFL (14 digits)
            document_date: Status date, YYYY-MM-DD (today if None)
        """
        validate_tax_id_or_pinfl(tax_id_or_pinfl)
        if document_date is not None:
            validate_date(document_date, field_name="document_date")

        response = self._http.get(
            f"/v1/profile/vatRegStatus/{tax_id_or_pinfl}",
            params={"document_date": document_date},
        )
        return response.data

    def get_taxpayer_type(
        self, tax_id: str, locale: str = DEFAULT_LOCALE, date: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Get the taxpayer type of a company.

        Args:
            tax_id: Company TIN (9 digits)
            locale: Response language, "ru" or "uz"
            date: Date of interest, DD.MM.YYYY (today if None)
        """
        validate_tax_id(tax_id)
        validate_locale(locale)
        if date is not None:
            validate_dotted_date(date)

        response = self._http.get(
            f"/v1/profile/taxpayerType/{tax_id}/{locale}", params={"date": date}
        )
        return response.data


class WarehousesApi:
    def __init__(self, http_client: HttpClient):
        self._http = http_client

    def get_warehouses(self, tax_id_or_pinfl: str) -> List[Dict[str, Any]]:
        """List the warehouses registered for a TIN or PINFL."""
        validate_tax_id_or_pinfl(tax_id_or_pinfl)
        return self._http.get(f"/v1/profile/warehouses/{tax_id_or_pinfl}").data


class UsersApi:
    """Company user management."""

    def __init__(self, http_client: HttpClient):
        self._http = http_client

    def update_permissions(
        self, gnk_permissions: str, internal_permissions: str, is_director: int
    ) -> Dict[str, Any]:
        """
        Update the permissions of the current company user.

        Args:
            gnk_permissions: Tax-authority permission string
            internal_permissions: Didox permission string
            is_director: 1 if the user is the company director, else 0
        """
        validate_required_string(gnk_permissions, "gnk_permissions")
        validate_required_string(internal_permissions, "internal_permissions")
        validate_flag(is_director, "is_director")

        response = self._http.put(
            "/v1/profile/company/users",
            {
                "gnkpermissions": gnk_permissions,
                "internalpermissions": internal_permissions,
                "is_director": is_director,
            },
        )
        logger.info("Company user permissions updated")
        return response.data
