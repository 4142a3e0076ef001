"""Domain entities for didox-sdk."""

from .common import (
    DocumentRefDraft,
    PartyDraft,
    PersonDraft,
    draft_to_dict,
    nested_draft,
    to_draft,
    to_drafts,
)
from .document import DocumentStatus, DocumentType, OwnerType
from .empowerment import (
    AgentDraft,
    AgentPassportDraft,
    CompanyDraft,
    EmpowermentDraft,
    EmpowermentHeaderDraft,
    EmpowermentProductDraft,
)
from .founders_protocol import (
    FoundersProtocolDraft,
    ProtocolCompanyDraft,
    ProtocolHeaderDraft,
    ProtocolParticipantDraft,
    ProtocolPartDraft,
)
from .free_form import (
    AddressedPartyDraft,
    ArbitraryDocumentDraft,
    ClientDraft,
    DocumentHeaderDraft,
    MultiPartyDocumentDraft,
)
from .invoice import (
    ActDraft,
    ActFlags,
    ActHeaderDraft,
    ActProductDraft,
    InvoiceDraft,
    InvoiceFlags,
    InvoicePartyDraft,
    InvoiceProductDraft,
)
from .letter import (
    LetterAttachmentDraft,
    LetterHeadDraft,
    LetterHeaderDraft,
    LetterNKDraft,
    LetterPartyDraft,
)
from .waybill import (
    GroupEmpowermentDraft,
    PointDraft,
    ProductGroupDraft,
    TransportDraft,
    TtnDraft,
    TtnFlags,
    TtnProductDraft,
    TtnTotalsDraft,
    VehicleDraft,
    WaybillHeaderDraft,
)

__all__ = [
    # Enumerations
    "DocumentType",
    "DocumentStatus",
    "OwnerType",
    # Shared sections
    "DocumentRefDraft",
    "PartyDraft",
    "PersonDraft",
    "to_draft",
    "to_drafts",
    "nested_draft",
    "draft_to_dict",
    # Invoice / act
    "InvoiceDraft",
    "InvoicePartyDraft",
    "InvoiceProductDraft",
    "InvoiceFlags",
    "ActDraft",
    "ActHeaderDraft",
    "ActProductDraft",
    "ActFlags",
    # Transport waybill
    "TtnDraft",
    "WaybillHeaderDraft",
    "TransportDraft",
    "VehicleDraft",
    "PointDraft",
    "GroupEmpowermentDraft",
    "ProductGroupDraft",
    "TtnProductDraft",
    "TtnTotalsDraft",
    "TtnFlags",
    # Empowerment
    "EmpowermentDraft",
    "EmpowermentHeaderDraft",
    "AgentDraft",
    "AgentPassportDraft",
    "CompanyDraft",
    "EmpowermentProductDraft",
    # Arbitrary / multi-party
    "ArbitraryDocumentDraft",
    "MultiPartyDocumentDraft",
    "DocumentHeaderDraft",
    "AddressedPartyDraft",
    "ClientDraft",
    # Letter NK
    "LetterNKDraft",
    "LetterHeaderDraft",
    "LetterHeadDraft",
    "LetterPartyDraft",
    "LetterAttachmentDraft",
    # Founders' protocol
    "FoundersProtocolDraft",
    "ProtocolHeaderDraft",
    "ProtocolCompanyDraft",
    "ProtocolParticipantDraft",
    "ProtocolPartDraft",
]
