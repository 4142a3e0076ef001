"""
Tests for InvoiceBuilder - invoice (002) payload generation.

Covers:
1. Wire shape and native numeric fields
2. Per-line VAT computation (enabled / disabled)
3. Build-time validation
4. Shallow raw merge and initial payload
"""

import pytest

from didox_sdk import builders
from didox_sdk.domain.entities import InvoicePartyDraft, InvoiceProductDraft
from didox_sdk.shared.errors import (
    EmptyRequiredListError,
    MissingRequiredListItemFieldError,
    MissingRequiredSectionError,
)

SELLER = {
    "tin": "123456789",
    "name": "Seller LLC",
    "vat_reg_code": "326020012345",
    "account": "20208000900100001001",
    "bank_id": "00014",
    "address": "Tashkent, Amir Temur 1",
}

BUYER = InvoicePartyDraft(
    tin="987654321",
    name="Buyer LLC",
    vat_reg_code="326020054321",
    account="20208000900100002002",
    bank_id="00873",
    address="Samarkand, Registan 5",
)


def make_product(**overrides) -> dict:
    product = {
        "name": "Cement M400",
        "catalog_code": "02523001001000000",
        "package_code": "1",
        "package_name": "bag",
        "quantity": 3,
        "price": 100.5,
        "origin": 1,
        "vat_rate": 12,
    }
    product.update(overrides)
    return product


def complete_builder(has_vat: bool = True):
    return (
        builders.invoice()
        .factura("INV-001", "2025-02-07")
        .seller(SELLER)
        .buyer(BUYER)
        .add_product(make_product())
        .flags(has_vat=has_vat)
    )


def test_invoice_wire_shape() -> None:
    """Top-level blocks and party projection follow the API layout."""
    payload = complete_builder().build()

    assert payload["Version"] == 1
    assert payload["FacturaType"] == 0
    assert payload["FacturaDoc"] == {"FacturaNo": "INV-001", "FacturaDate": "2025-02-07"}
    assert payload["SellerTin"] == "123456789"
    assert payload["Seller"] == {
        "Name": "Seller LLC",
        "VatRegCode": "326020012345",
        "Account": "20208000900100001001",
        "BankId": "00014",
        "Address": "Tashkent, Amir Temur 1",
    }
    assert payload["BuyerTin"] == "987654321"
    assert payload["Buyer"]["Name"] == "Buyer LLC"
    assert payload["ProductList"]["Tin"] == "123456789"
    assert payload["ProductList"]["HasVat"] is True
    assert payload["ProductList"]["HasExcise"] is False
    assert payload["ProductList"]["HasLgota"] is False
    assert payload["ProductList"]["HasCommittent"] is False
    assert "ContractDoc" not in payload


def test_invoice_product_amounts_with_vat() -> None:
    """VAT is computed from the line rate and amounts stay numbers."""
    product = complete_builder().build()["ProductList"]["Products"][0]

    assert product["OrdNo"] == 1
    assert product["Count"] == 3
    assert product["DeliverySum"] == pytest.approx(301.5)
    assert product["VatRate"] == 12
    assert product["VatSum"] == pytest.approx(36.18)
    assert product["DeliverySumWithVat"] == pytest.approx(337.68)
    assert product["Summa"] == product["DeliverySumWithVat"]
    assert product["WithoutVat"] is False
    assert product["Origin"] == 1


def test_invoice_vat_sum_is_rounded_to_two_decimals() -> None:
    """VatSum equals the two-decimal rounding of count * price * rate / 100."""
    payload = (
        complete_builder()
        .add_product(make_product(quantity=3, price=33.33, vat_rate=15))
        .build()
    )

    product = payload["ProductList"]["Products"][1]
    assert product["VatSum"] == 15.0


def test_invoice_without_vat() -> None:
    """With has_vat disabled every line has zero VAT and WithoutVat set."""
    payload = complete_builder(has_vat=False).build()

    product = payload["ProductList"]["Products"][0]
    assert product["VatSum"] == 0
    assert product["DeliverySumWithVat"] == product["DeliverySum"]
    assert product["WithoutVat"] is True


def test_invoice_zero_vat_rate_has_no_vat() -> None:
    payload = complete_builder().add_product(make_product(vat_rate=None)).build()

    product = payload["ProductList"]["Products"][1]
    assert product["VatRate"] == 0
    assert product["VatSum"] == 0


def test_invoice_ordinals_follow_insertion_order() -> None:
    """OrdNo is the 1-based position, whatever the caller passed."""
    payload = (
        complete_builder()
        .add_products(
            [
                make_product(name="Second"),
                InvoiceProductDraft(**make_product(name="Third")),
            ]
        )
        .build()
    )

    products = payload["ProductList"]["Products"]
    assert [p["OrdNo"] for p in products] == [1, 2, 3]
    assert [p["Name"] for p in products] == ["Cement M400", "Second", "Third"]


def test_invoice_contract_only_when_set() -> None:
    payload = complete_builder().contract("C-12", "2025-01-10").build()

    assert payload["ContractDoc"] == {"ContractNo": "C-12", "ContractDate": "2025-01-10"}


@pytest.mark.parametrize(
    "drop, section",
    [
        ("factura", "factura"),
        ("seller", "seller"),
        ("buyer", "buyer"),
    ],
)
def test_invoice_missing_section(drop: str, section: str) -> None:
    """Each mandatory block is reported by name."""
    builder = builders.invoice()
    if drop != "factura":
        builder.factura("INV-001", "2025-02-07")
    if drop != "seller":
        builder.seller(SELLER)
    if drop != "buyer":
        builder.buyer(BUYER)
    builder.add_product(make_product())

    with pytest.raises(MissingRequiredSectionError) as exc_info:
        builder.build()

    assert exc_info.value.section == section
    assert exc_info.value.document_type == "002"


def test_invoice_requires_products() -> None:
    builder = builders.invoice().factura("INV-001", "2025-02-07").seller(SELLER).buyer(BUYER)

    with pytest.raises(EmptyRequiredListError) as exc_info:
        builder.build()

    assert exc_info.value.list_name == "products"


def test_invoice_raw_replaces_top_level_keys() -> None:
    """Invoice raw data replaces whole top-level blocks."""
    payload = complete_builder().raw({"Seller": {"Name": "Override"}, "FacturaType": 1}).build()

    assert payload["Seller"] == {"Name": "Override"}
    assert payload["FacturaType"] == 1
    assert payload["Buyer"]["Name"] == "Buyer LLC"


def test_invoice_initial_payload_is_merged() -> None:
    payload = (
        builders.invoice({"FacturaId": "abc"})
        .factura("INV-001", "2025-02-07")
        .seller(SELLER)
        .buyer(BUYER)
        .add_product(make_product())
        .build()
    )

    assert payload["FacturaId"] == "abc"
    assert payload["FacturaDoc"]["FacturaNo"] == "INV-001"


def test_invoice_get_draft_returns_copy() -> None:
    builder = complete_builder()

    draft = builder.get_draft()
    draft.products.clear()

    assert len(builder.get_draft().products) == 1


@pytest.mark.parametrize("missing", ["quantity", "price"])
def test_invoice_product_without_amount_key(missing: str) -> None:
    product = make_product()
    del product[missing]
    builder = complete_builder().add_product(product)

    with pytest.raises(MissingRequiredListItemFieldError) as exc_info:
        builder.build()

    error = exc_info.value
    assert error.field_name == f"products[1].{missing}"
    assert error.document_type == "002"


def test_invoice_partial_seller_is_accepted_by_setter() -> None:
    builder = builders.invoice().seller(tin="123456789")

    assert builder.get_draft().seller.vat_reg_code is None


def test_invoice_zero_price_is_valid() -> None:
    payload = (
        builders.invoice()
        .factura("INV-001", "2025-02-07")
        .seller(SELLER)
        .buyer(BUYER)
        .add_product(make_product(price=0))
        .build()
    )

    assert payload["ProductList"]["Products"][0]["DeliverySum"] == 0
