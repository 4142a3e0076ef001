"""Letter to the tax committee (Letter NK, 013) drafts."""

from dataclasses import dataclass, field
from typing import List, Optional

from .common import nested_draft


@dataclass
class LetterHeaderDraft:
    """Letter number and date."""

    number: Optional[str] = None
    date: Optional[str] = None


@dataclass
class LetterHeadDraft:
    """
    Letterhead block of a sender or recipient.

    Missing values are sent as "" except website, which is sent as null.
    """

    branch_code: Optional[str] = None
    branch_name: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    logo_base64: Optional[str] = None
    phones: Optional[List[str]] = None


@dataclass
class LetterPartyDraft:
    """Letter sender or recipient."""

    name: Optional[str] = None
    tin: Optional[str] = None
    head: Optional[LetterHeadDraft] = None

    def __post_init__(self) -> None:
        self.head = nested_draft(LetterHeadDraft, self.head)


@dataclass
class LetterAttachmentDraft:
    """File attached to the letter, content already base64-encoded."""

    filename: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = None
    base64: Optional[str] = None
    description: Optional[str] = None


@dataclass
class LetterNKDraft:
    """In-progress letter, owned by a LetterNKBuilder."""

    letter: Optional[LetterHeaderDraft] = None
    sender: Optional[LetterPartyDraft] = None
    recipient: Optional[LetterPartyDraft] = None
    html: Optional[str] = None
    attachments: List[LetterAttachmentDraft] = field(default_factory=list)
