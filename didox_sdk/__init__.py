"""
Didox SDK - A Python client for the Didox e-document platform.
"""

from .api import AccountApi, AuthApi, DocumentsApi, ProfileApi, UtilitiesApi
from .builders import (
    ActBuilder,
    ArbitraryDocumentBuilder,
    BaseDocumentBuilder,
    EmpowermentBuilder,
    FoundersProtocolBuilder,
    InvoiceBuilder,
    LetterNKBuilder,
    MultiPartyDocumentBuilder,
    ProductGroupBuilder,
    TtnBuilder,
    builders,
)
from .client import DidoxClient
from .domain import DocumentBuilder, DocumentStatus, DocumentSubmitter, DocumentType, OwnerType
from .http import HttpClient, HttpResponse
from .infrastructure import BuilderFactory, DidoxConfig
from .shared.errors import (
    ConfigurationError,
    DidoxApiError,
    DidoxAuthError,
    DidoxError,
    DidoxNetworkError,
    DocumentBuildError,
    EmptyRequiredListError,
    MissingRequiredListItemFieldError,
    MissingRequiredSectionError,
    ValidationError,
)

__version__ = "0.1.0"
__all__ = [
    # Main client
    "DidoxClient",
    "DidoxConfig",
    # API modules
    "AuthApi",
    "AccountApi",
    "ProfileApi",
    "UtilitiesApi",
    "DocumentsApi",
    "HttpClient",
    "HttpResponse",
    # Builders
    "builders",
    "BuilderFactory",
    "BaseDocumentBuilder",
    "InvoiceBuilder",
    "ActBuilder",
    "TtnBuilder",
    "ProductGroupBuilder",
    "EmpowermentBuilder",
    "ArbitraryDocumentBuilder",
    "MultiPartyDocumentBuilder",
    "LetterNKBuilder",
    "FoundersProtocolBuilder",
    # Domain
    "DocumentType",
    "DocumentStatus",
    "OwnerType",
    "DocumentBuilder",
    "DocumentSubmitter",
    # Errors
    "DidoxError",
    "ValidationError",
    "DocumentBuildError",
    "MissingRequiredSectionError",
    "EmptyRequiredListError",
    "MissingRequiredListItemFieldError",
    "ConfigurationError",
    "DidoxApiError",
    "DidoxAuthError",
    "DidoxNetworkError",
]
