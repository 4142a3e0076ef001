"""
Scalar input validators.

Each validator raises ValidationError naming the offending field
and returns None when the value is acceptable.
"""

import re
from typing import Any

from didox_sdk.shared.config.constants import PASSWORD_MIN_LENGTH, SUPPORTED_LOCALES
from didox_sdk.shared.errors import ValidationError

_TIN_PATTERN = re.compile(r"^\d{9}$")
_PINFL_PATTERN = re.compile(r"^\d{14}$")
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DOTTED_DATE_PATTERN = re.compile(r"^\d{2}\.\d{2}\.\d{4}$")
_MOBILE_PATTERN = re.compile(r"^998\d{9}$")
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_DIGITS_PATTERN = re.compile(r"^\d+$")


def validate_required_string(value: Any, field_name: str) -> None:
    """Validate that a value is a non-empty string."""
    if not value or not isinstance(value, str):
        raise ValidationError(
            message=f"{field_name} is required and must be a non-empty string",
            field_name=field_name,
            validation_rule="non_empty_string",
        )


def validate_positive_number(value: Any, field_name: str) -> None:
    """Validate that a value is a positive int or float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ValidationError(
            message=f"{field_name} must be a positive number",
            field_name=field_name,
            invalid_value=value,
            validation_rule="positive_number",
        )


def validate_tax_id(tax_id: Any, field_name: str = "tax_id") -> None:
    """
    Validate a taxpayer identification number (TIN).

    Args:
        tax_id: Value to check, must be exactly 9 digits
        field_name: Name reported in the error

    Raises:
        ValidationError: If the value is missing or malformed
    """
    validate_required_string(tax_id, field_name)
    if not _TIN_PATTERN.match(tax_id):
        raise ValidationError(
            message=f"{field_name} must be exactly 9 digits",
            field_name=field_name,
            invalid_value=tax_id,
            validation_rule="tin",
        )


def validate_pinfl(pinfl: Any, field_name: str = "pinfl") -> None:
    """Validate a personal identification number (PINFL, 14 digits)."""
    validate_required_string(pinfl, field_name)
    if not _PINFL_PATTERN.match(pinfl):
        raise ValidationError(
            message=f"{field_name} must be exactly 14 digits",
            field_name=field_name,
            invalid_value=pinfl,
            validation_rule="pinfl",
        )


def validate_date(value: Any, field_name: str = "date") -> None:
    """Validate a YYYY-MM-DD date string."""
    validate_required_string(value, field_name)
    if not _DATE_PATTERN.match(value):
        raise ValidationError(
            message=f"{field_name} must be in YYYY-MM-DD format",
            field_name=field_name,
            invalid_value=value,
            validation_rule="date",
        )


def validate_password(password: Any) -> None:
    """Validate a login password (at least 8 characters)."""
    if not password or not isinstance(password, str):
        raise ValidationError(
            message="password is required and must be a string",
            field_name="password",
        )
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            message=f"password must be at least {PASSWORD_MIN_LENGTH} characters long",
            field_name="password",
            validation_rule="min_length",
        )


def validate_locale(locale: Any) -> None:
    """Validate a login locale."""
    if locale not in SUPPORTED_LOCALES:
        raise ValidationError(
            message=f"locale must be one of: {', '.join(SUPPORTED_LOCALES)}",
            field_name="locale",
            invalid_value=locale,
            validation_rule="enum",
        )


def validate_user_token(token: Any) -> None:
    """Validate a user access token."""
    validate_required_string(token, "user_token")


def validate_document_id(document_id: Any) -> None:
    """Validate a document identifier."""
    validate_required_string(document_id, "document_id")
    if not document_id.strip():
        raise ValidationError(
            message="document_id cannot be blank",
            field_name="document_id",
        )


def validate_create_draft_params(document_type: Any, payload: Any) -> None:
    """
    Validate arguments of a draft submission.

    Args:
        document_type: Document type code (e.g. "002")
        payload: Wire payload produced by a builder

    Raises:
        ValidationError: If the code is empty or the payload is not a mapping
    """
    if not document_type or not isinstance(document_type, str):
        raise ValidationError(
            message="Document type is required and must be a string",
            field_name="document_type",
        )
    if not document_type.strip():
        raise ValidationError(
            message="Document type cannot be empty",
            field_name="document_type",
        )
    if payload is None:
        raise ValidationError(message="Payload is required", field_name="payload")
    if not isinstance(payload, dict):
        raise ValidationError(
            message="Payload must be an object",
            field_name="payload",
            invalid_value=type(payload).__name__,
        )
    if not payload:
        raise ValidationError(message="Payload cannot be empty", field_name="payload")


def validate_tax_id_or_pinfl(value: Any, field_name: str = "tax_id_or_pinfl") -> None:
    """Validate a TIN (9 digits) or a PINFL (14 digits)."""
    validate_required_string(value, field_name)
    if not (_TIN_PATTERN.match(value) or _PINFL_PATTERN.match(value)):
        raise ValidationError(
            message=f"{field_name} must be a 9-digit TIN or a 14-digit PINFL",
            field_name=field_name,
            invalid_value=value,
            validation_rule="tin_or_pinfl",
        )


def validate_dotted_date(value: Any, field_name: str = "date") -> None:
    """Validate a DD.MM.YYYY date string."""
    validate_required_string(value, field_name)
    if not _DOTTED_DATE_PATTERN.match(value):
        raise ValidationError(
            message=f"{field_name} must be in DD.MM.YYYY format",
            field_name=field_name,
            invalid_value=value,
            validation_rule="dotted_date",
        )


def validate_mobile(mobile: Any) -> None:
    """Validate a mobile number in 998XXXXXXXXX form."""
    validate_required_string(mobile, "mobile")
    if not _MOBILE_PATTERN.match(mobile):
        raise ValidationError(
            message="mobile must be in format 998XXXXXXXXX (12 digits starting with 998)",
            field_name="mobile",
            invalid_value=mobile,
            validation_rule="mobile",
        )


def validate_email(email: Any) -> None:
    """Validate an e-mail address."""
    validate_required_string(email, "email")
    if not _EMAIL_PATTERN.match(email):
        raise ValidationError(
            message="email must be a valid email address",
            field_name="email",
            invalid_value=email,
            validation_rule="email",
        )


def validate_flag(value: Any, field_name: str) -> None:
    """Validate a 0/1 integer flag."""
    if isinstance(value, bool) or value not in (0, 1):
        raise ValidationError(
            message=f"{field_name} must be either 0 or 1",
            field_name=field_name,
            invalid_value=value,
            validation_rule="flag",
        )


def validate_class_code(class_code: Any, field_name: str = "class_code") -> None:
    """Validate a product class (catalog) code: digits only."""
    validate_required_string(class_code, field_name)
    if not _DIGITS_PATTERN.match(class_code):
        raise ValidationError(
            message=f"{field_name} must contain only digits",
            field_name=field_name,
            invalid_value=class_code,
            validation_rule="digits",
        )
