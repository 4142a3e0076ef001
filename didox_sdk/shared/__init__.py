"""
Shared utilities for didox-sdk.

Cross-cutting concerns that are used across multiple layers.
"""

from .config import (
    ACCESS_TOKEN_HEADER,
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOCALE,
    DEFAULT_TIMEOUT_SECONDS,
    DEVELOPMENT_BASE_URL,
    MONEY_DECIMAL_PLACES,
    PARTNER_TOKEN_HEADER,
    PASSWORD_MIN_LENGTH,
    PDF_DATA_URL_PREFIX,
    PERCENT_BASE,
    PRODUCTION_BASE_URL,
    SUPPORTED_ENVIRONMENTS,
    SUPPORTED_LOCALES,
)
from .errors import (
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

__all__ = [
    # Exceptions
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
    # Constants
    "PRODUCTION_BASE_URL",
    "DEVELOPMENT_BASE_URL",
    "SUPPORTED_ENVIRONMENTS",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_TIMEOUT_SECONDS",
    "ACCESS_TOKEN_HEADER",
    "PARTNER_TOKEN_HEADER",
    "SUPPORTED_LOCALES",
    "DEFAULT_LOCALE",
    "PASSWORD_MIN_LENGTH",
    "PDF_DATA_URL_PREFIX",
    "MONEY_DECIMAL_PLACES",
    "PERCENT_BASE",
]
