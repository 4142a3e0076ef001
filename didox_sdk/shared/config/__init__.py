"""Configuration constants for didox-sdk."""

from .constants import (
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

__all__ = [
    "ACCESS_TOKEN_HEADER",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_LOCALE",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEVELOPMENT_BASE_URL",
    "MONEY_DECIMAL_PLACES",
    "PARTNER_TOKEN_HEADER",
    "PASSWORD_MIN_LENGTH",
    "PDF_DATA_URL_PREFIX",
    "PERCENT_BASE",
    "PRODUCTION_BASE_URL",
    "SUPPORTED_ENVIRONMENTS",
    "SUPPORTED_LOCALES",
]
