"""
Founders' meeting protocol (075) builder.

This document type uses lower-case wire keys. Participant shares are
always sent as strings, agenda parts are numbered in insertion order.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from didox_sdk.builders.base import BaseDocumentBuilder
from didox_sdk.domain.entities import (
    DocumentType,
    FoundersProtocolDraft,
    ProtocolCompanyDraft,
    ProtocolHeaderDraft,
    ProtocolParticipantDraft,
    ProtocolPartDraft,
    to_draft,
    to_drafts,
)
from didox_sdk.shared.numbers import format_number

logger = logging.getLogger(__name__)


class FoundersProtocolBuilder(BaseDocumentBuilder):
    """
    Founders' protocol builder (docType: '075').

    Example:
        >>> payload = (
        ...     builders.founders_protocol()
        ...     .document("Protocol No. 1", "1", "Tashkent", "2025-02-07")
        ...     .company(company)
        ...     .add_participant(tin="123456789", name="Founder A", share=60, chairman=True)
        ...     .add_participant(tin="987654321", name="Founder B", share="40", secretary=True)
        ...     .add_part("Agenda", "Approve the annual report")
        ...     .build()
        ... )
    """

    document_type = DocumentType.FOUNDERS_PROTOCOL
    deep_merge_raw = True

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        super().__init__(initial)
        self._draft = FoundersProtocolDraft()

    def document(self, name: str, no: str, place: str, date: str) -> "FoundersProtocolBuilder":
        """
        Set protocol header.

        Args:
            name: Protocol title
            no: Protocol number
            place: Meeting place
            date: Protocol date (YYYY-MM-DD)
        """
        self._draft.document = ProtocolHeaderDraft(name=name, no=no, place=place, date=date)
        return self

    def company(self, data: Any = None, **fields: Any) -> "FoundersProtocolBuilder":
        """Set the company whose founders meet."""
        self._draft.company = to_draft(ProtocolCompanyDraft, data, **fields)
        return self

    def add_participant(self, participant: Any = None, **fields: Any) -> "FoundersProtocolBuilder":
        """Append one participant."""
        self._draft.participants.append(to_draft(ProtocolParticipantDraft, participant, **fields))
        return self

    def add_participants(self, participants: Iterable[Any]) -> "FoundersProtocolBuilder":
        """Append several participants, keeping their order."""
        self._draft.participants.extend(to_drafts(ProtocolParticipantDraft, participants))
        return self

    def add_part(self, title: str, body: str) -> "FoundersProtocolBuilder":
        """Append one agenda part."""
        self._draft.parts.append(ProtocolPartDraft(title=title, body=body))
        return self

    def add_parts(self, parts: Iterable[Any]) -> "FoundersProtocolBuilder":
        """Append several agenda parts (drafts or mappings with title and body)."""
        self._draft.parts.extend(to_drafts(ProtocolPartDraft, parts))
        return self

    def get_draft(self) -> FoundersProtocolDraft:
        """Return a copy of the accumulated draft (for debugging/testing)."""
        return to_draft(FoundersProtocolDraft, self._draft)

    def build(self) -> Dict[str, Any]:
        """
        Validate the draft and transform it to the API protocol payload.

        Raises:
            MissingRequiredSectionError: If header or company is missing
            EmptyRequiredListError: If there are no participants or no parts
            MissingRequiredListItemFieldError: If a participant has no share
        """
        draft = self._draft
        self._require(draft.document, "document", "Protocol document information is required")
        self._require(draft.company, "company", "Company information is required")
        self._require_items(
            draft.participants, "participants", "At least one participant is required"
        )
        self._require_items(draft.parts, "parts", "At least one protocol part is required")
        self._require_item_values(draft.participants, "participants", ("share",))

        document = draft.document
        company = draft.company

        payload: Dict[str, Any] = {
            "documentdoc": {
                "documentname": document.name,
                "documentno": document.no,
                "documentplace": document.place,
                "documentdate": document.date,
            },
            "company": {
                "tin": company.tin,
                "name": company.name,
                "fiztin": company.fiz_tin,
                "fio": company.fio,
                "bankid": company.bank_id or "",
                "oked": company.oked or 0,
                "account": company.account or "",
                "address": company.address,
                "workphone": company.work_phone or "",
                "mobile": company.mobile or "",
            },
            "participants": [self._participant(p) for p in draft.participants],
            "parts": [
                {"ordno": index, "title": part.title, "body": part.body}
                for index, part in enumerate(draft.parts, start=1)
            ],
        }

        logger.debug(
            f"Built founders protocol {document.no} with "
            f"{len(draft.participants)} participant(s) and {len(draft.parts)} part(s)"
        )
        return self._merge_raw(payload)

    @staticmethod
    def _participant(participant: ProtocolParticipantDraft) -> Dict[str, Any]:
        return {
            "tin": participant.tin,
            "name": participant.name,
            "companyTaxId": participant.company_tin or "",
            "companyname": participant.company_name or "",
            "share": format_number(participant.share),
            "citizenship": participant.citizenship or "",
            "ischairman": bool(participant.chairman),
            "issecretary": bool(participant.secretary),
        }


def founders_protocol(initial: Optional[Mapping[str, Any]] = None) -> FoundersProtocolBuilder:
    """Create a founders' protocol builder (docType '075')."""
    return FoundersProtocolBuilder(initial)
