"""
Domain layer for didox-sdk.

This layer contains:
- Entities: Document type vocabulary and developer-facing drafts
- Interfaces: Contracts for builders and submitters (Protocols)

The domain layer has no third-party dependencies.
"""

from .entities import (
    DocumentStatus,
    DocumentType,
    OwnerType,
    draft_to_dict,
    to_draft,
)
from .interfaces import DocumentBuilder, DocumentSubmitter

__all__ = [
    # Entities
    "DocumentType",
    "DocumentStatus",
    "OwnerType",
    "to_draft",
    "draft_to_dict",
    # Interfaces
    "DocumentBuilder",
    "DocumentSubmitter",
]
