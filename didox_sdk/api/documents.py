"""
Document endpoints.

Creates drafts from builder payloads and reads documents back. The
builder registry is exposed as ``DocumentsApi.builders`` so a client
can build and submit without extra imports:

    >>> payload = client.documents.builders.act().act("ACT-1", "2025-02-07")...build()
    >>> client.documents.create_draft("005", payload)
"""

import logging
from typing import Any, Dict, Union

from didox_sdk.builders import BaseDocumentBuilder, builders
from didox_sdk.domain.entities import DocumentType
from didox_sdk.http import HttpClient
from didox_sdk.shared.validators import validate_create_draft_params, validate_document_id

logger = logging.getLogger(__name__)


class DocumentsApi:
    """Document operations. Implements the DocumentSubmitter protocol."""

    builders = builders

    def __init__(self, http_client: HttpClient):
        self._http = http_client

    def create_draft(
        self, document_type: Union[DocumentType, str], payload: Dict[str, Any]
    ) -> Any:
        """
        Create a document draft.

        Args:
            document_type: DocumentType or its code (e.g. "002")
            payload: Wire payload, usually produced by a builder

        Returns:
            Raw API response data

        Raises:
            ValidationError: If the code or payload is malformed
            DidoxApiError: If the platform rejects the payload
            DidoxNetworkError: If the request fails
        """
        if isinstance(document_type, DocumentType):
            document_type = document_type.value
        validate_create_draft_params(document_type, payload)

        response = self._http.post(f"/v1/documents/{document_type}/create", payload)
        logger.info(f"Created {document_type} draft")
        return response.data

    def submit(self, builder: BaseDocumentBuilder) -> Any:
        """
        Build a payload and create a draft for the builder's document type.

        Args:
            builder: Any document builder

        Returns:
            Raw API response data

        Raises:
            DocumentBuildError: If the builder's draft is incomplete
            DidoxApiError: If the platform rejects the payload
            DidoxNetworkError: If the request fails
        """
        payload = builder.build()
        return self.create_draft(builder.document_type, payload)

    def get_by_id(self, document_id: str) -> Any:
        """
        Fetch a document by id.

        Raises:
            ValidationError: If the id is blank
            DidoxApiError: If the document does not exist or access is denied
        """
        validate_document_id(document_id)
        return self._http.get(f"/v1/documents/{document_id}").data

    def get_privileges(self, document_id: str) -> Any:
        """Fetch the actions the current user may perform on a document."""
        validate_document_id(document_id)
        return self._http.get(f"/v1/documents/{document_id}/privileges").data
