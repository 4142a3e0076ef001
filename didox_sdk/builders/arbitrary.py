"""
Arbitrary (free-form PDF, 000) and multi-party (010) document builders.

Both documents wrap structured metadata under "data" and ship the PDF
itself as a base64 data URL under "document".
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from didox_sdk.builders.base import BaseDocumentBuilder
from didox_sdk.domain.entities import (
    AddressedPartyDraft,
    ArbitraryDocumentDraft,
    ClientDraft,
    DocumentHeaderDraft,
    DocumentRefDraft,
    DocumentType,
    MultiPartyDocumentDraft,
    to_draft,
    to_drafts,
)
from didox_sdk.shared.config.constants import PDF_DATA_URL_PREFIX

logger = logging.getLogger(__name__)


def _document_block(header: DocumentHeaderDraft) -> Dict[str, Any]:
    block = {"DocumentNo": header.no, "DocumentDate": header.date}
    if header.name:
        block["DocumentName"] = header.name
    return block


def _contract_block(contract: DocumentRefDraft) -> Dict[str, Any]:
    return {"ContractNo": contract.no, "ContractDate": contract.date}


def _pdf_data_url(pdf_base64: str) -> str:
    return f"{PDF_DATA_URL_PREFIX}{pdf_base64}"


class ArbitraryDocumentBuilder(BaseDocumentBuilder):
    """
    Arbitrary document builder (docType: '000').

    Example:
        >>> payload = (
        ...     builders.arbitrary()
        ...     .document("DOC-1", "2025-02-07", name="Service agreement")
        ...     .subtype(0)
        ...     .seller(tin="123456789", name="Seller LLC", address="Tashkent")
        ...     .buyer(tin="987654321", name="Buyer LLC", address="Samarkand")
        ...     .pdf(pdf_base64)
        ...     .build()
        ... )
    """

    document_type = DocumentType.FREE_FORM
    deep_merge_raw = True

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        super().__init__(initial)
        self._draft = ArbitraryDocumentDraft()

    def document(
        self, no: str, date: str, name: Optional[str] = None
    ) -> "ArbitraryDocumentBuilder":
        """Set document number, date and optional display name."""
        self._draft.document = DocumentHeaderDraft(no=no, date=date, name=name)
        return self

    def subtype(self, subtype: int) -> "ArbitraryDocumentBuilder":
        """Set document subtype code (0 is a valid subtype)."""
        self._draft.subtype = subtype
        return self

    def contract(self, no: str, date: str) -> "ArbitraryDocumentBuilder":
        """Set the optional contract reference."""
        self._draft.contract = DocumentRefDraft(no=no, date=date)
        return self

    def seller(self, data: Any = None, **fields: Any) -> "ArbitraryDocumentBuilder":
        """Set seller (tin, name, address, optional branch)."""
        self._draft.seller = to_draft(AddressedPartyDraft, data, **fields)
        return self

    def buyer(self, data: Any = None, **fields: Any) -> "ArbitraryDocumentBuilder":
        """Set buyer (tin, name, address, optional branch)."""
        self._draft.buyer = to_draft(AddressedPartyDraft, data, **fields)
        return self

    def pdf(self, pdf_base64: str) -> "ArbitraryDocumentBuilder":
        """Attach the PDF content, base64-encoded without data URL prefix."""
        self._draft.pdf_base64 = pdf_base64
        return self

    def get_draft(self) -> ArbitraryDocumentDraft:
        """Return a copy of the accumulated draft (for debugging/testing)."""
        return to_draft(ArbitraryDocumentDraft, self._draft)

    def build(self) -> Dict[str, Any]:
        """
        Validate the draft and transform it to the API payload.

        Raises:
            MissingRequiredSectionError: If a required field is missing; the
                section names the field path (e.g. "seller.tin")
        """
        draft = self._draft
        document = draft.document
        self._require(document and document.no, "document.no", "Document number is required")
        self._require(document.date, "document.date", "Document date is required")
        # 0 is a valid subtype
        self._require(draft.subtype is not None, "subtype", "Document subtype is required")
        self._require(draft.seller and draft.seller.tin, "seller.tin", "Seller TIN is required")
        self._require(draft.buyer and draft.buyer.tin, "buyer.tin", "Buyer TIN is required")
        self._require(draft.pdf_base64, "pdfBase64", "PDF content is required")

        data: Dict[str, Any] = {
            "Document": _document_block(document),
            "Subtype": draft.subtype,
        }
        if draft.contract:
            data["ContractDoc"] = _contract_block(draft.contract)
        data["SellerTin"] = draft.seller.tin
        data["Seller"] = self._party(draft.seller)
        data["BuyerTin"] = draft.buyer.tin
        data["Buyer"] = self._party(draft.buyer)

        payload = {"data": data, "document": _pdf_data_url(draft.pdf_base64)}

        logger.debug(f"Built arbitrary document {document.no} (subtype {draft.subtype})")
        return self._merge_raw(payload)

    @staticmethod
    def _party(party: AddressedPartyDraft) -> Dict[str, Any]:
        return {
            "Name": party.name,
            "BranchCode": party.branch_code or "",
            "BranchName": party.branch_name or "",
            "Address": party.address,
        }


class MultiPartyDocumentBuilder(BaseDocumentBuilder):
    """
    Multi-party arbitrary document builder (docType: '010').

    One owner, one or more clients. Every client must carry a TIN,
    name and address.

    Example:
        >>> payload = (
        ...     builders.multi_party()
        ...     .document("MP-1", "2025-02-07")
        ...     .owner(tin="123456789", name="Owner LLC", address="Tashkent")
        ...     .add_client(tin="987654321", name="Client LLC", address="Bukhara")
        ...     .pdf(pdf_base64)
        ...     .build()
        ... )
    """

    document_type = DocumentType.MULTI_FREE_FORM
    deep_merge_raw = True

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        super().__init__(initial)
        self._draft = MultiPartyDocumentDraft()

    def document(
        self, no: str, date: str, name: Optional[str] = None
    ) -> "MultiPartyDocumentBuilder":
        """Set document number, date and optional display name."""
        self._draft.document = DocumentHeaderDraft(no=no, date=date, name=name)
        return self

    def contract(self, no: str, date: str) -> "MultiPartyDocumentBuilder":
        """Set the optional contract reference."""
        self._draft.contract = DocumentRefDraft(no=no, date=date)
        return self

    def owner(self, data: Any = None, **fields: Any) -> "MultiPartyDocumentBuilder":
        """Set document owner (tin, name, address, optional branch)."""
        self._draft.owner = to_draft(AddressedPartyDraft, data, **fields)
        return self

    def add_client(self, client: Any = None, **fields: Any) -> "MultiPartyDocumentBuilder":
        """Append one client."""
        self._draft.clients.append(to_draft(ClientDraft, client, **fields))
        return self

    def add_clients(self, clients: Iterable[Any]) -> "MultiPartyDocumentBuilder":
        """Append several clients, keeping their order."""
        self._draft.clients.extend(to_drafts(ClientDraft, clients))
        return self

    def pdf(self, pdf_base64: str) -> "MultiPartyDocumentBuilder":
        """Attach the PDF content, base64-encoded without data URL prefix."""
        self._draft.pdf_base64 = pdf_base64
        return self

    def get_draft(self) -> MultiPartyDocumentDraft:
        """Return a copy of the accumulated draft (for debugging/testing)."""
        return to_draft(MultiPartyDocumentDraft, self._draft)

    def build(self) -> Dict[str, Any]:
        """
        Validate the draft and transform it to the API payload.

        Raises:
            MissingRequiredSectionError: If a document/owner field or the PDF is missing
            EmptyRequiredListError: If no client was added
            MissingRequiredListItemFieldError: If a client lacks tin, name or address
        """
        draft = self._draft
        document = draft.document
        owner = draft.owner
        self._require(document and document.no, "document.no", "Document number is required")
        self._require(document.date, "document.date", "Document date is required")
        self._require(owner and owner.tin, "owner.tin", "Owner TIN is required")
        self._require(owner.name, "owner.name", "Owner name is required")
        self._require(owner.address, "owner.address", "Owner address is required")
        self._require_items(draft.clients, "clients", "At least one client is required")
        for index, client in enumerate(draft.clients):
            self._require_item_field(client.tin, "clients", index, "tin", "Client TIN is required")
            self._require_item_field(
                client.name, "clients", index, "name", "Client name is required"
            )
            self._require_item_field(
                client.address, "clients", index, "address", "Client address is required"
            )
        self._require(draft.pdf_base64, "pdfBase64", "PDF content is required")

        data: Dict[str, Any] = {"Document": _document_block(document)}
        if draft.contract:
            data["ContractDoc"] = _contract_block(draft.contract)
        data["Owner"] = {
            "Tin": owner.tin,
            "Name": owner.name,
            "BranchCode": owner.branch_code or "",
            "BranchName": owner.branch_name or "",
            "Address": owner.address,
        }
        data["Clients"] = [
            {"Tin": client.tin, "Name": client.name, "Address": client.address}
            for client in draft.clients
        ]

        payload = {"data": data, "document": _pdf_data_url(draft.pdf_base64)}

        logger.debug(
            f"Built multi-party document {document.no} with {len(draft.clients)} client(s)"
        )
        return self._merge_raw(payload)


def arbitrary(initial: Optional[Mapping[str, Any]] = None) -> ArbitraryDocumentBuilder:
    """Create an arbitrary document builder (docType '000')."""
    return ArbitraryDocumentBuilder(initial)


def multi_party(initial: Optional[Mapping[str, Any]] = None) -> MultiPartyDocumentBuilder:
    """Create a multi-party document builder (docType '010')."""
    return MultiPartyDocumentBuilder(initial)
