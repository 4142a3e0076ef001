"""
Product class (catalog code) endpoints of the company profile.

Invoices, acts and waybills reference products by catalog code; a code
has to be added to the company profile before it can be used.
"""

import logging
from typing import Any, Dict, List, Optional

from didox_sdk.http import HttpClient
from didox_sdk.shared import DEFAULT_LOCALE
from didox_sdk.shared.errors import ValidationError
from didox_sdk.shared.validators import (
    validate_class_code,
    validate_locale,
    validate_required_string,
    validate_tax_id,
)

logger = logging.getLogger(__name__)

PRODUCT_CLASSES_ENDPOINT = "/v1/profile/productClasses"
PRODUCT_CLASS_CODES_ENDPOINT = "/v1/profile/productClassCodes"


class ProductClassesApi:
    """Search, add, remove and check product class codes."""

    def __init__(self, http_client: HttpClient):
        self._http = http_client

    def get_codes(self) -> Dict[str, Any]:
        """Get the product class codes attached to the company."""
        return self._http.get(PRODUCT_CLASS_CODES_ENDPOINT).data

    def search(
        self,
        search: Optional[str] = None,
        page: Optional[int] = None,
        locale: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Search product class codes.

        Args:
            search: Free-text query (name or code fragment)
            page: Page number, starting at 1
            locale: Result language, "ru" or "uz"

        Returns:
            Paginated search result
        """
        if locale is not None:
            validate_locale(locale)
        if page is not None and (isinstance(page, bool) or not isinstance(page, int) or page < 1):
            raise ValidationError(
                message="page must be a positive integer",
                field_name="page",
                invalid_value=page,
            )

        response = self._http.get(
            PRODUCT_CLASS_CODES_ENDPOINT,
            params={"page": page, "search": search or None, "lang": locale},
        )
        return response.data

    def add(self, class_code: str) -> Dict[str, Any]:
        """Attach a product class code to the company profile."""
        validate_class_code(class_code)

        response = self._http.post(PRODUCT_CLASSES_ENDPOINT, {"classCode": class_code})
        logger.info(f"Product class {class_code} added")
        return response.data

    def remove(self, class_code: str) -> Dict[str, Any]:
        """Detach a product class code from the company profile."""
        validate_class_code(class_code)

        response = self._http.delete(f"{PRODUCT_CLASSES_ENDPOINT}/{class_code}")
        logger.info(f"Product class {class_code} removed")
        return response.data

    def check(
        self, tax_id: str, code: str, locale: str = DEFAULT_LOCALE
    ) -> List[Dict[str, Any]]:
        """
        Check whether a company may use a catalog code.

        Args:
            tax_id: Company TIN (9 digits)
            code: Catalog code to check
            locale: Response language, "ru" or "uz"
        """
        validate_tax_id(tax_id)
        validate_required_string(code, "code")
        validate_locale(locale)

        response = self._http.get(
            f"/v1/profile/{tax_id}/productClasses/check/{code}/{locale}"
        )
        return response.data
