"""
Letter to the tax committee (Letter NK, 013) builder.

The letter body is HTML supplied by the caller and sent as is: it is
neither escaped nor sanitized.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from didox_sdk.builders.base import BaseDocumentBuilder
from didox_sdk.domain.entities import (
    DocumentType,
    LetterAttachmentDraft,
    LetterHeadDraft,
    LetterHeaderDraft,
    LetterNKDraft,
    LetterPartyDraft,
    to_draft,
    to_drafts,
)

logger = logging.getLogger(__name__)


class LetterNKBuilder(BaseDocumentBuilder):
    """
    Letter NK builder (docType: '013').

    Example:
        >>> payload = (
        ...     builders.letter_nk()
        ...     .letter("L-1", "2025-02-07")
        ...     .sender(name="Sender LLC", tin="123456789",
        ...             head={"email": "office@sender.uz", "phones": ["+998901234567"]})
        ...     .recipient(name="Tax Committee", tin="200000000")
        ...     .html("<p>Dear colleagues,</p>")
        ...     .build()
        ... )
    """

    document_type = DocumentType.TAX_LETTER
    deep_merge_raw = True

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        super().__init__(initial)
        self._draft = LetterNKDraft()

    def letter(self, number: str, date: str) -> "LetterNKBuilder":
        """Set letter number and date."""
        self._draft.letter = LetterHeaderDraft(number=number, date=date)
        return self

    def sender(self, data: Any = None, **fields: Any) -> "LetterNKBuilder":
        """Set sender (name, tin, optional head)."""
        self._draft.sender = to_draft(LetterPartyDraft, data, **fields)
        return self

    def recipient(self, data: Any = None, **fields: Any) -> "LetterNKBuilder":
        """Set recipient (name, tin, optional head)."""
        self._draft.recipient = to_draft(LetterPartyDraft, data, **fields)
        return self

    def html(self, content: str) -> "LetterNKBuilder":
        """Set the HTML body. Content is sent verbatim."""
        self._draft.html = content
        return self

    def add_attachment(self, attachment: Any = None, **fields: Any) -> "LetterNKBuilder":
        """Append one attachment."""
        self._draft.attachments.append(to_draft(LetterAttachmentDraft, attachment, **fields))
        return self

    def add_attachments(self, attachments: Iterable[Any]) -> "LetterNKBuilder":
        """Append several attachments, keeping their order."""
        self._draft.attachments.extend(to_drafts(LetterAttachmentDraft, attachments))
        return self

    def get_draft(self) -> LetterNKDraft:
        """Return a copy of the accumulated draft (for debugging/testing)."""
        return to_draft(LetterNKDraft, self._draft)

    def build(self) -> Dict[str, Any]:
        """
        Validate the draft and transform it to the API letter payload.

        Raises:
            MissingRequiredSectionError: If letter header, sender, recipient
                or HTML body is missing
        """
        draft = self._draft
        self._require(draft.letter, "letter", "Letter information is required")
        self._require(draft.sender, "sender", "Sender information is required")
        self._require(draft.recipient, "recipient", "Recipient information is required")
        self._require(draft.html, "html", "Letter HTML content is required")

        payload: Dict[str, Any] = {
            "Letter": {"Number": draft.letter.number, "Date": draft.letter.date},
            "Sender": self._party(draft.sender),
            "Recipient": self._party(draft.recipient),
            "Html": draft.html,
            "Attachments": [
                {
                    "Filename": attachment.filename,
                    "MimeType": attachment.mime_type,
                    "Size": attachment.size,
                    "ContentBase64": attachment.base64,
                    "Description": attachment.description or "",
                }
                for attachment in draft.attachments
            ],
        }

        logger.debug(
            f"Built letter {draft.letter.number} with {len(draft.attachments)} attachment(s)"
        )
        return self._merge_raw(payload)

    @staticmethod
    def _party(party: LetterPartyDraft) -> Dict[str, Any]:
        head = party.head or LetterHeadDraft()
        return {
            "Name": party.name,
            "Tin": party.tin,
            "Head": {
                "BranchCode": head.branch_code or "",
                "BranchName": head.branch_name or "",
                "Email": head.email or "",
                "Website": head.website,
                "LogoBase64": head.logo_base64 or "",
                "Phones": list(head.phones or []),
            },
        }


def letter_nk(initial: Optional[Mapping[str, Any]] = None) -> LetterNKBuilder:
    """Create a Letter NK builder (docType '013')."""
    return LetterNKBuilder(initial)
