"""
Document type enumerations - Core domain vocabulary.

Type codes are the identifiers the Didox API uses in submission
URLs (``/v1/documents/{code}/create``).
"""

from enum import Enum


class DocumentType(str, Enum):
    """
    Document type code enumeration.

    Values are the exact codes expected by the API.
    """

    FREE_FORM = "000"
    FACTURA = "002"
    ACT = "005"
    EMPOWERMENT = "006"
    CONTRACT_NK = "007"
    FACTURA_PHARM = "008"
    MULTI_FREE_FORM = "010"
    TAX_LETTER = "013"
    HYBRID_FACTURA = "023"
    WAYBILL = "041"
    VERIFICATION_ACT = "052"
    ACCEPTANCE_TRANSFER = "054"
    FOUNDERS_PROTOCOL = "075"

    @classmethod
    def from_code(cls, code: "str | DocumentType") -> "DocumentType":
        """
        Convert a type code to DocumentType.

        Args:
            code: Type code such as "002" (or a DocumentType)

        Returns:
            DocumentType enum value

        Raises:
            ValueError: If the code is unknown
        """
        if isinstance(code, cls):
            return code
        return cls(str(code).strip())


class DocumentStatus(int, Enum):
    """Document status codes reported by the API."""

    DRAFT = 0
    SENT = 1
    SIGNED = 2
    REJECTED = 3
    CANCELLED = 4
    ERROR = 5
    PARTIALLY_SIGNED = 6
    WAITING_SIGNATURE = 7
    PROCESSING = 8
    EXPIRED = 9


class OwnerType(int, Enum):
    """Direction of a document relative to the authenticated company."""

    INCOMING = 0
    OUTGOING = 1
