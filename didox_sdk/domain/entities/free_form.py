"""Arbitrary (000) and multi-party arbitrary (010) PDF document drafts."""

from dataclasses import dataclass, field
from typing import List, Optional

from .common import DocumentRefDraft


@dataclass
class DocumentHeaderDraft:
    """Document number, date and optional display name."""

    no: Optional[str] = None
    date: Optional[str] = None
    name: Optional[str] = None


@dataclass
class AddressedPartyDraft:
    """Party with postal address and optional branch."""

    tin: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    branch_code: Optional[str] = None
    branch_name: Optional[str] = None


@dataclass
class ClientDraft:
    """Multi-party client. All three fields are checked at build time."""

    tin: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None


@dataclass
class ArbitraryDocumentDraft:
    """In-progress arbitrary document, owned by an ArbitraryDocumentBuilder."""

    document: Optional[DocumentHeaderDraft] = None
    subtype: Optional[int] = None
    contract: Optional[DocumentRefDraft] = None
    seller: Optional[AddressedPartyDraft] = None
    buyer: Optional[AddressedPartyDraft] = None
    pdf_base64: Optional[str] = None


@dataclass
class MultiPartyDocumentDraft:
    """In-progress multi-party document, owned by a MultiPartyDocumentBuilder."""

    document: Optional[DocumentHeaderDraft] = None
    contract: Optional[DocumentRefDraft] = None
    owner: Optional[AddressedPartyDraft] = None
    clients: List[ClientDraft] = field(default_factory=list)
    pdf_base64: Optional[str] = None
