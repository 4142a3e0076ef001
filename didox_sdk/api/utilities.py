"""Reference lookups that are not tied to a document."""

import logging
from typing import Any, Dict, List

from didox_sdk.http import HttpClient
from didox_sdk.shared.errors import DidoxApiError, DidoxAuthError
from didox_sdk.shared.validators import validate_tax_id

logger = logging.getLogger(__name__)


class UtilitiesApi:
    def __init__(self, http_client: HttpClient):
        self._http = http_client

    def get_branches_by_tin(self, tax_id: str) -> List[Dict[str, Any]]:
        """
        List the registered branches of a company.

        Args:
            tax_id: Company TIN (9 digits)

        Returns:
            Branch records; the branch code and name go into the
            BranchCode/BranchName fields of document parties

        Raises:
            ValidationError: If the TIN is malformed
            DidoxAuthError: If the user key is rejected (401)
            DidoxApiError: For any other API error
        """
        validate_tax_id(tax_id, field_name="tin")

        try:
            response = self._http.get("/v1/profile/branches", params={"tin": tax_id})
        except DidoxApiError as e:
            if e.status_code == 401:
                raise DidoxAuthError(
                    "Unauthorized: Invalid user key", status_code=e.status_code, cause=e
                )
            raise

        logger.debug(f"Found {len(response.data or [])} branch(es) for {tax_id}")
        return response.data
