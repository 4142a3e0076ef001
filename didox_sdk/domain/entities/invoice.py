"""Invoice (002) and act (005) drafts."""

from dataclasses import dataclass, field
from typing import List, Optional

from .common import DocumentRefDraft, PartyDraft


@dataclass
class InvoicePartyDraft:
    """Invoice seller or buyer with banking details."""

    tin: Optional[str] = None
    name: Optional[str] = None
    vat_reg_code: Optional[str] = None
    account: Optional[str] = None
    bank_id: Optional[str] = None
    address: Optional[str] = None


@dataclass
class InvoiceProductDraft:
    """One invoice line. Quantity and price are plain numbers."""

    name: Optional[str] = None
    catalog_code: Optional[str] = None
    package_code: Optional[str] = None
    package_name: Optional[str] = None
    quantity: Optional[float] = None
    price: Optional[float] = None
    origin: Optional[int] = None
    vat_rate: Optional[float] = None
    catalog_name: Optional[str] = None


@dataclass
class InvoiceFlags:
    """Document-level invoice flags."""

    has_vat: bool = False
    has_excise: bool = False
    has_lgota: bool = False
    has_committent: bool = False


@dataclass
class InvoiceDraft:
    """In-progress invoice, owned by an InvoiceBuilder."""

    factura: Optional[DocumentRefDraft] = None
    contract: Optional[DocumentRefDraft] = None
    seller: Optional[InvoicePartyDraft] = None
    buyer: Optional[InvoicePartyDraft] = None
    products: List[InvoiceProductDraft] = field(default_factory=list)
    flags: Optional[InvoiceFlags] = None


@dataclass
class ActHeaderDraft:
    """Act number, date and optional free text."""

    no: Optional[str] = None
    date: Optional[str] = None
    text: Optional[str] = None


@dataclass
class ActProductDraft:
    """
    One act line (work or service).

    ``without_vat`` overrides the document-level VAT flag for this line.
    """

    name: Optional[str] = None
    catalog_code: Optional[str] = None
    catalog_name: Optional[str] = None
    package_code: Optional[str] = None
    package_name: Optional[str] = None
    count: Optional[float] = None
    price: Optional[float] = None
    vat_rate: Optional[float] = None
    without_vat: Optional[bool] = None
    lgota_name: Optional[str] = None
    lgota_type: Optional[int] = None


@dataclass
class ActFlags:
    """Document-level act flags."""

    has_vat: bool = False
    has_excise: bool = False


@dataclass
class ActDraft:
    """In-progress act, owned by an ActBuilder."""

    act: Optional[ActHeaderDraft] = None
    contract: Optional[DocumentRefDraft] = None
    seller: Optional[PartyDraft] = None
    buyer: Optional[PartyDraft] = None
    products: List[ActProductDraft] = field(default_factory=list)
    flags: Optional[ActFlags] = None
