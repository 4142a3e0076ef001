"""Custom exceptions for didox-sdk."""

from .exceptions import (
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
