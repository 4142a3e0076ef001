"""
Document builders for didox-sdk.

Each document type has a factory accepting an optional partial wire
payload and returning a builder with chainable setters and build().
The ``builders`` object groups all factories under one name:

    >>> from didox_sdk import builders
    >>> payload = builders.act().act("ACT-1", "2025-02-07").seller(...).build()
"""

from .act import ActBuilder, act
from .arbitrary import (
    ArbitraryDocumentBuilder,
    MultiPartyDocumentBuilder,
    arbitrary,
    multi_party,
)
from .base import BaseDocumentBuilder, deep_merge, shallow_merge
from .empowerment import EmpowermentBuilder, empowerment
from .founders_protocol import FoundersProtocolBuilder, founders_protocol
from .invoice import InvoiceBuilder, invoice
from .letter_nk import LetterNKBuilder, letter_nk
from .stubs import (
    AcceptanceTransferBuilder,
    ContractBuilder,
    HybridInvoiceBuilder,
    InvoicePharmBuilder,
    VerificationActBuilder,
    acceptance_transfer,
    contract,
    hybrid_invoice,
    invoice_pharm,
    verification_act,
)
from .ttn import ProductGroupBuilder, TtnBuilder, ttn


class BuilderRegistry:
    """One factory per document type; every call returns a fresh builder."""

    invoice = staticmethod(invoice)
    invoice_pharm = staticmethod(invoice_pharm)
    hybrid_invoice = staticmethod(hybrid_invoice)
    ttn = staticmethod(ttn)
    act = staticmethod(act)
    contract = staticmethod(contract)
    empowerment = staticmethod(empowerment)
    arbitrary = staticmethod(arbitrary)
    verification_act = staticmethod(verification_act)
    acceptance_transfer = staticmethod(acceptance_transfer)
    founders_protocol = staticmethod(founders_protocol)
    letter_nk = staticmethod(letter_nk)
    multi_party = staticmethod(multi_party)


builders = BuilderRegistry()

__all__ = [
    "builders",
    "BuilderRegistry",
    # Base
    "BaseDocumentBuilder",
    "shallow_merge",
    "deep_merge",
    # Typed builders
    "InvoiceBuilder",
    "ActBuilder",
    "TtnBuilder",
    "ProductGroupBuilder",
    "EmpowermentBuilder",
    "ArbitraryDocumentBuilder",
    "MultiPartyDocumentBuilder",
    "LetterNKBuilder",
    "FoundersProtocolBuilder",
    # Raw-only builders
    "HybridInvoiceBuilder",
    "InvoicePharmBuilder",
    "ContractBuilder",
    "VerificationActBuilder",
    "AcceptanceTransferBuilder",
]
