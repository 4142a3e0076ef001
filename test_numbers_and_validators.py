"""
Tests for numeric wire formatting and scalar input validators.
"""

from decimal import Decimal

import pytest

from didox_sdk.domain.entities import DocumentType
from didox_sdk.shared.errors import ValidationError
from didox_sdk.shared.numbers import format_number, round_half_up, round_money, to_fixed
from didox_sdk.shared.validators import (
    validate_create_draft_params,
    validate_class_code,
    validate_date,
    validate_document_id,
    validate_dotted_date,
    validate_email,
    validate_flag,
    validate_locale,
    validate_mobile,
    validate_password,
    validate_pinfl,
    validate_positive_number,
    validate_tax_id,
    validate_tax_id_or_pinfl,
)

# ============================================================================
# Numbers
# ============================================================================


@pytest.mark.parametrize(
    "value, expected",
    [
        (1200000, "1200000.00"),
        (0, "0.00"),
        (12.5, "12.50"),
        (0.125, "0.13"),
        # 1.005 is stored as 1.00499999...; the exact binary value rounds down
        (1.005, "1.00"),
        (Decimal("2.675"), "2.68"),
        (-3.5, "-3.50"),
    ],
)
def test_to_fixed(value, expected: str) -> None:
    assert to_fixed(value) == expected


def test_to_fixed_custom_digits() -> None:
    assert to_fixed(3.14159, 3) == "3.142"
    assert to_fixed(7, 0) == "7"


def test_round_money() -> None:
    assert round_money(0.125) == 0.13
    assert round_money(12.5) == 12.5
    assert round_money(Decimal("0.005")) == 0.01


@pytest.mark.parametrize(
    "value, expected",
    [
        (10, "10"),
        (10.0, "10"),
        (2.5, "2.5"),
        (0.1, "0.1"),
        (-4.0, "-4"),
        (Decimal("3.0"), "3"),
        ("49%", "49%"),
        ("", ""),
        (True, "true"),
        (False, "false"),
    ],
)
def test_format_number(value, expected: str) -> None:
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, 3),
        (0.5, 1),
        (2.4999, 2),
        (-2.5, -2),
        (-2.6, -3),
        (7, 7),
    ],
)
def test_round_half_up(value, expected: int) -> None:
    assert round_half_up(value) == expected


# ============================================================================
# Validators
# ============================================================================


def test_validate_tax_id() -> None:
    validate_tax_id("123456789")

    for bad in ["12345678", "1234567890", "12345678a", "", None, 123456789]:
        with pytest.raises(ValidationError):
            validate_tax_id(bad)


def test_validate_tax_id_reports_field_name() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_tax_id("1", field_name="company_tax_id")

    assert exc_info.value.field_name == "company_tax_id"


def test_validate_pinfl() -> None:
    validate_pinfl("12345678901234")

    with pytest.raises(ValidationError):
        validate_pinfl("123456789")


def test_validate_date() -> None:
    validate_date("2025-02-07")

    for bad in ["07.02.2025", "2025-2-7", ""]:
        with pytest.raises(ValidationError):
            validate_date(bad)


def test_validate_password() -> None:
    validate_password("password123")

    with pytest.raises(ValidationError) as exc_info:
        validate_password("short")
    assert "8" in exc_info.value.message

    with pytest.raises(ValidationError):
        validate_password(None)


def test_validate_locale() -> None:
    validate_locale("ru")
    validate_locale("uz")

    with pytest.raises(ValidationError):
        validate_locale("en")


def test_validate_positive_number() -> None:
    validate_positive_number(1, "timeout")
    validate_positive_number(0.5, "timeout")

    for bad in [0, -1, True, "5", None]:
        with pytest.raises(ValidationError):
            validate_positive_number(bad, "timeout")


def test_validate_document_id() -> None:
    validate_document_id("abc-123")

    for bad in ["", "   ", None]:
        with pytest.raises(ValidationError):
            validate_document_id(bad)


def test_validate_create_draft_params() -> None:
    validate_create_draft_params("002", {"FacturaDoc": {}})

    with pytest.raises(ValidationError) as exc_info:
        validate_create_draft_params("", {"FacturaDoc": {}})
    assert exc_info.value.field_name == "document_type"

    with pytest.raises(ValidationError):
        validate_create_draft_params("   ", {"FacturaDoc": {}})

    for bad_payload in [None, [], "payload", {}]:
        with pytest.raises(ValidationError) as exc_info:
            validate_create_draft_params("002", bad_payload)
        assert exc_info.value.field_name == "payload"


def test_validate_contact_fields() -> None:
    validate_mobile("998901234567")
    validate_email("user@example.com")

    for bad in ["901234567", "9989012345678", "+998901234567"]:
        with pytest.raises(ValidationError):
            validate_mobile(bad)
    for bad in ["user", "user@example", "a b@c.uz"]:
        with pytest.raises(ValidationError):
            validate_email(bad)


def test_validate_identifier_shapes() -> None:
    validate_tax_id_or_pinfl("123456789")
    validate_tax_id_or_pinfl("12345678901234")
    validate_dotted_date("07.02.2025")
    validate_class_code("02523001001000000")

    with pytest.raises(ValidationError):
        validate_tax_id_or_pinfl("1234567890")
    with pytest.raises(ValidationError):
        validate_dotted_date("2025-02-07")
    with pytest.raises(ValidationError):
        validate_class_code("0252-3001")


def test_validate_flag() -> None:
    validate_flag(0, "notifications")
    validate_flag(1, "notifications")

    for bad in [2, -1, True, "1", None]:
        with pytest.raises(ValidationError) as exc_info:
            validate_flag(bad, "notifications")
        assert exc_info.value.field_name == "notifications"


# ============================================================================
# Document type codes
# ============================================================================


def test_document_type_from_code() -> None:
    assert DocumentType.from_code("002") is DocumentType.FACTURA
    assert DocumentType.from_code(" 041 ") is DocumentType.WAYBILL
    assert DocumentType.from_code(DocumentType.ACT) is DocumentType.ACT

    with pytest.raises(ValueError):
        DocumentType.from_code("999")
