"""Founders' meeting protocol (075) drafts."""

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass
class ProtocolHeaderDraft:
    """Protocol title, number, place and date."""

    name: Optional[str] = None
    no: Optional[str] = None
    place: Optional[str] = None
    date: Optional[str] = None


@dataclass
class ProtocolCompanyDraft:
    """Company whose founders meet."""

    tin: Optional[str] = None
    name: Optional[str] = None
    fiz_tin: Optional[str] = None
    fio: Optional[str] = None
    address: Optional[str] = None
    bank_id: Optional[str] = None
    oked: Optional[int] = None
    account: Optional[str] = None
    work_phone: Optional[str] = None
    mobile: Optional[str] = None


@dataclass
class ProtocolParticipantDraft:
    """
    Meeting participant.

    share may be a number or a string; it is always sent as a string.
    """

    tin: Optional[str] = None
    name: Optional[str] = None
    share: Optional[Union[float, str]] = None
    company_tin: Optional[str] = None
    company_name: Optional[str] = None
    citizenship: Optional[str] = None
    chairman: bool = False
    secretary: bool = False


@dataclass
class ProtocolPartDraft:
    """Agenda item."""

    title: Optional[str] = None
    body: Optional[str] = None


@dataclass
class FoundersProtocolDraft:
    """In-progress protocol, owned by a FoundersProtocolBuilder."""

    document: Optional[ProtocolHeaderDraft] = None
    company: Optional[ProtocolCompanyDraft] = None
    participants: List[ProtocolParticipantDraft] = field(default_factory=list)
    parts: List[ProtocolPartDraft] = field(default_factory=list)
