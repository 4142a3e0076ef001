"""
Document Builder interface (Protocol).

Defines the contract shared by every document builder.
"""

from typing import Any, Dict, Mapping, Protocol, runtime_checkable

from didox_sdk.domain.entities import DocumentType


@runtime_checkable
class DocumentBuilder(Protocol):
    """
    Document Builder protocol (interface).

    Every builder accumulates a draft through chainable setters and
    produces the exact wire payload for one document type.

    Implementations: InvoiceBuilder, ActBuilder, TtnBuilder, EmpowermentBuilder, etc.
    """

    document_type: DocumentType

    def raw(self, data: Mapping[str, Any]) -> "DocumentBuilder":
        """
        Merge unchecked data into the generated payload (escape hatch).

        Args:
            data: Partial wire payload; never validated

        Returns:
            The builder itself, for chaining
        """
        ...

    def build(self) -> Dict[str, Any]:
        """
        Validate the draft and produce a fresh wire payload.

        Returns:
            New payload dict; mutating it never affects the builder

        Raises:
            DocumentBuildError: If a required section or list is missing
        """
        ...
