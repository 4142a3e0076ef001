"""
Constants for didox-sdk.

This module contains the fixed values the SDK depends on: environment
URLs, timeouts, wire-format prefixes and numeric formatting settings.

All hardcoded values are defined here with clear, descriptive names
and documentation.
"""

# ============================================================================
# ENVIRONMENT CONSTANTS
# ============================================================================

PRODUCTION_BASE_URL: str = "https://api-partners.didox.uz"
"""
Base URL of the production partner API.

Used in: infrastructure/config.py (DidoxConfig.base_url)
"""

DEVELOPMENT_BASE_URL: str = "https://stage.goodsign.biz"
"""
Base URL of the staging (development) partner API.

Used in: infrastructure/config.py (DidoxConfig.base_url)
"""

SUPPORTED_ENVIRONMENTS: list[str] = ["development", "production"]
"""
Environment names accepted by DidoxConfig.
"""

DEFAULT_ENVIRONMENT: str = "development"
"""
Environment used by DidoxConfig.from_env() when DIDOX_ENVIRONMENT is unset.
"""

# ============================================================================
# HTTP CONSTANTS
# ============================================================================

DEFAULT_TIMEOUT_SECONDS: float = 10.0
"""
Default request timeout in seconds.

Used in: http/client.py, infrastructure/config.py
"""

ACCESS_TOKEN_HEADER: str = "user-key"
"""
Header carrying the user access token obtained from login.
"""

PARTNER_TOKEN_HEADER: str = "Partner-Authorization"
"""
Header carrying the partner token issued by Didox.
"""

# ============================================================================
# AUTHENTICATION CONSTANTS
# ============================================================================

SUPPORTED_LOCALES: list[str] = ["ru", "uz"]
"""
Locales accepted by the login endpoints.
"""

DEFAULT_LOCALE: str = "ru"
"""
Locale used when the caller does not pass one.
"""

PASSWORD_MIN_LENGTH: int = 8
"""
Minimum password length accepted by the login endpoint.
"""

# ============================================================================
# DOCUMENT WIRE FORMAT
# ============================================================================

PDF_DATA_URL_PREFIX: str = "data:application/pdf;base64,"
"""
Prefix prepended to base64 PDF content for arbitrary and multi-party documents.

Used in: builders/arbitrary.py
"""

MONEY_DECIMAL_PLACES: int = 2
"""
Number of decimal places for fixed-point monetary strings (sums, VAT, distance).
"""

PERCENT_BASE: int = 100
"""
Divisor for percentage-based derivations (VAT rate, per-line delivery share).
"""
