"""
Factory for creating document builders.

Resolves builders by name ("invoice", "ttn", ...) or by document type
code ("002", "041", ...). Useful when the document type is only known
at runtime, e.g. from a configuration file or an incoming request.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Union

from didox_sdk.builders import BaseDocumentBuilder, builders
from didox_sdk.domain.entities import DocumentType
from didox_sdk.shared.errors import ConfigurationError

logger = logging.getLogger(__name__)

BuilderFactoryFn = Callable[[Optional[Mapping[str, Any]]], BaseDocumentBuilder]


class BuilderFactory:
    """
    Factory for creating document builder instances.

    Every call returns a new builder, so instances are never shared
    between callers.
    """

    # Supported builder names
    INVOICE = "invoice"
    INVOICE_PHARM = "invoice_pharm"
    HYBRID_INVOICE = "hybrid_invoice"
    TTN = "ttn"
    ACT = "act"
    CONTRACT = "contract"
    EMPOWERMENT = "empowerment"
    ARBITRARY = "arbitrary"
    VERIFICATION_ACT = "verification_act"
    ACCEPTANCE_TRANSFER = "acceptance_transfer"
    FOUNDERS_PROTOCOL = "founders_protocol"
    LETTER_NK = "letter_nk"
    MULTI_PARTY = "multi_party"

    # Builder factory mapping
    _BUILDERS: Dict[str, BuilderFactoryFn] = {
        INVOICE: builders.invoice,
        INVOICE_PHARM: builders.invoice_pharm,
        HYBRID_INVOICE: builders.hybrid_invoice,
        TTN: builders.ttn,
        ACT: builders.act,
        CONTRACT: builders.contract,
        EMPOWERMENT: builders.empowerment,
        ARBITRARY: builders.arbitrary,
        VERIFICATION_ACT: builders.verification_act,
        ACCEPTANCE_TRANSFER: builders.acceptance_transfer,
        FOUNDERS_PROTOCOL: builders.founders_protocol,
        LETTER_NK: builders.letter_nk,
        MULTI_PARTY: builders.multi_party,
    }

    # Document type code -> builder name
    _TYPE_CODES: Dict[DocumentType, str] = {
        DocumentType.FACTURA: INVOICE,
        DocumentType.FACTURA_PHARM: INVOICE_PHARM,
        DocumentType.HYBRID_FACTURA: HYBRID_INVOICE,
        DocumentType.WAYBILL: TTN,
        DocumentType.ACT: ACT,
        DocumentType.CONTRACT_NK: CONTRACT,
        DocumentType.EMPOWERMENT: EMPOWERMENT,
        DocumentType.FREE_FORM: ARBITRARY,
        DocumentType.VERIFICATION_ACT: VERIFICATION_ACT,
        DocumentType.ACCEPTANCE_TRANSFER: ACCEPTANCE_TRANSFER,
        DocumentType.FOUNDERS_PROTOCOL: FOUNDERS_PROTOCOL,
        DocumentType.TAX_LETTER: LETTER_NK,
        DocumentType.MULTI_FREE_FORM: MULTI_PARTY,
    }

    @classmethod
    def create(
        cls, builder_name: str, initial: Optional[Mapping[str, Any]] = None
    ) -> BaseDocumentBuilder:
        """
        Create a builder by name.

        Args:
            builder_name: Builder name (invoice, act, ttn, empowerment, ...)
            initial: Optional partial wire payload seeding the raw store

        Returns:
            New builder instance

        Raises:
            ConfigurationError: If builder_name is unsupported

        Example:
            >>> builder = BuilderFactory.create("act")
            >>> payload = builder.act("ACT-1", "2025-02-07").seller(...).build()
        """
        builder_name_lower = builder_name.lower().strip()

        if builder_name_lower not in cls._BUILDERS:
            raise ConfigurationError(
                message=f"Unsupported document builder: {builder_name}",
                config_key="builder_name",
                config_value=builder_name,
                expected_type=f"One of: {', '.join(cls._BUILDERS.keys())}",
            )

        builder = cls._BUILDERS[builder_name_lower](initial)
        logger.info(
            f"✓ Created {builder_name_lower} builder (docType {builder.document_type.value})"
        )
        return builder

    @classmethod
    def create_for_type(
        cls,
        document_type: Union[DocumentType, str],
        initial: Optional[Mapping[str, Any]] = None,
    ) -> BaseDocumentBuilder:
        """
        Create a builder for a document type code.

        Args:
            document_type: DocumentType or its code (e.g. "041")
            initial: Optional partial wire payload seeding the raw store

        Returns:
            New builder instance

        Raises:
            ConfigurationError: If the code is unknown
        """
        try:
            doc_type = DocumentType.from_code(document_type)
        except ValueError as e:
            raise ConfigurationError(
                message=f"Unsupported document type code: {document_type}",
                config_key="document_type",
                config_value=document_type,
                expected_type=f"One of: {', '.join(t.value for t in cls._TYPE_CODES)}",
                cause=e,
            )

        return cls.create(cls._TYPE_CODES[doc_type], initial)

    @classmethod
    def get_supported_builders(cls) -> list[str]:
        """
        Get list of supported builder names.

        Returns:
            List of builder names
        """
        return list(cls._BUILDERS.keys())

    @classmethod
    def is_builder_supported(cls, builder_name: str) -> bool:
        """
        Check if builder is supported.

        Args:
            builder_name: Builder name to check

        Returns:
            True if supported, False otherwise
        """
        return builder_name.lower().strip() in cls._BUILDERS
