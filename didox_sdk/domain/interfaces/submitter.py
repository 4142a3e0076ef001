"""
Document Submitter interface (Protocol).

Defines the contract of the collaborator that sends built payloads
to the platform.
"""

from typing import Any, Dict, Protocol, Union, runtime_checkable

from didox_sdk.domain.entities import DocumentType


@runtime_checkable
class DocumentSubmitter(Protocol):
    """
    Document Submitter protocol (interface).

    Implementations: DocumentsApi
    """

    def create_draft(
        self, document_type: Union[DocumentType, str], payload: Dict[str, Any]
    ) -> Any:
        """
        Create a document draft on the platform.

        Args:
            document_type: Document type code (e.g. "002")
            payload: Wire payload produced by a builder

        Returns:
            Parsed API response

        Raises:
            ValidationError: If arguments are malformed
            DidoxApiError: If the platform rejects the payload
            DidoxNetworkError: If the request fails
        """
        ...
