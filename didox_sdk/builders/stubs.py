"""
Builders for document types without a typed draft yet.

These only carry the raw store: the payload is whatever was passed as
``initial`` or through raw(). They exist so every supported type code
has a builder with a document_type that DocumentsApi.submit() can use.
"""

from typing import Any, Mapping, Optional

from didox_sdk.builders.base import BaseDocumentBuilder
from didox_sdk.domain.entities import DocumentType


class HybridInvoiceBuilder(BaseDocumentBuilder):
    """Hybrid invoice builder (docType: '023')."""

    document_type = DocumentType.HYBRID_FACTURA


class InvoicePharmBuilder(BaseDocumentBuilder):
    """Pharmacy invoice builder (docType: '008')."""

    document_type = DocumentType.FACTURA_PHARM


class ContractBuilder(BaseDocumentBuilder):
    """Contract builder (docType: '007')."""

    document_type = DocumentType.CONTRACT_NK


class VerificationActBuilder(BaseDocumentBuilder):
    """Verification act builder (docType: '052')."""

    document_type = DocumentType.VERIFICATION_ACT


class AcceptanceTransferBuilder(BaseDocumentBuilder):
    """Acceptance-transfer act builder (docType: '054')."""

    document_type = DocumentType.ACCEPTANCE_TRANSFER


def hybrid_invoice(initial: Optional[Mapping[str, Any]] = None) -> HybridInvoiceBuilder:
    """Create a hybrid invoice builder (docType '023')."""
    return HybridInvoiceBuilder(initial)


def invoice_pharm(initial: Optional[Mapping[str, Any]] = None) -> InvoicePharmBuilder:
    """Create a pharmaceutical invoice builder (docType '008')."""
    return InvoicePharmBuilder(initial)


def contract(initial: Optional[Mapping[str, Any]] = None) -> ContractBuilder:
    """Create a contract builder (docType '007')."""
    return ContractBuilder(initial)


def verification_act(initial: Optional[Mapping[str, Any]] = None) -> VerificationActBuilder:
    """Create a verification act builder (docType '052')."""
    return VerificationActBuilder(initial)


def acceptance_transfer(initial: Optional[Mapping[str, Any]] = None) -> AcceptanceTransferBuilder:
    """Create an acceptance-transfer act builder (docType '054')."""
    return AcceptanceTransferBuilder(initial)
