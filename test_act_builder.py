"""
Tests for ActBuilder - act of completed work (005) payload generation.

Amounts are serialized as strings: two-decimal strings for sums and
plain number strings for counts and rates.
"""

import pytest

from didox_sdk import builders
from didox_sdk.shared.errors import (
    EmptyRequiredListError,
    MissingRequiredListItemFieldError,
    MissingRequiredSectionError,
)


def make_service(**overrides) -> dict:
    service = {
        "name": "Consulting",
        "catalog_code": "10999001001000000",
        "catalog_name": "Services",
        "package_code": "1",
        "package_name": "hour",
        "count": 10,
        "price": 1000,
        "vat_rate": 12,
    }
    service.update(overrides)
    return service


def complete_builder(has_vat: bool = True, **service_overrides):
    return (
        builders.act()
        .act("ACT-1", "2025-02-07")
        .seller(tin="123456789", name="Seller LLC")
        .buyer(tin="987654321", name="Buyer LLC")
        .add_product(make_service(**service_overrides))
        .flags(has_vat=has_vat)
    )


def test_act_concrete_scenario() -> None:
    """10 x 1000 at 12% VAT gives 10000.00 / 1200.00 / 11200.00."""
    product = complete_builder().build()["ProductList"]["Products"][0]

    assert product["TotalSumWithoutVat"] == "10000.00"
    assert product["VatSum"] == "1200.00"
    assert product["TotalSum"] == "11200.00"
    assert product["WithoutVat"] is False


def test_act_product_string_fields() -> None:
    product = complete_builder().build()["ProductList"]["Products"][0]

    assert product["OrdNo"] == 1
    assert product["Count"] == "10"
    assert product["Summa"] == "11200"
    assert product["VatRate"] == "12"
    assert product["MeasureId"] is None
    assert product["LgotaName"] is None
    assert product["LgotaType"] is None
    assert product["CatalogName"] == "Services"


def test_act_fractional_count() -> None:
    product = complete_builder(count=2.5, price=10).build()["ProductList"]["Products"][0]

    assert product["Count"] == "2.5"
    assert product["TotalSumWithoutVat"] == "25.00"
    assert product["VatSum"] == "3.00"


def test_act_without_vat() -> None:
    product = complete_builder(has_vat=False).build()["ProductList"]["Products"][0]

    assert product["VatSum"] == "0.00"
    assert product["TotalSum"] == "10000.00"
    assert product["WithoutVat"] is True


def test_act_line_can_override_without_vat() -> None:
    """A per-line without_vat wins over the document flag."""
    product = complete_builder(without_vat=True).build()["ProductList"]["Products"][0]

    assert product["WithoutVat"] is True
    assert product["VatSum"] == "1200.00"


def test_act_flat_party_fields() -> None:
    payload = complete_builder().build()

    assert payload["ActDoc"] == {"ActNo": "ACT-1", "ActDate": "2025-02-07"}
    assert payload["SellerTin"] == "123456789"
    assert payload["SellerName"] == "Seller LLC"
    assert payload["SellerBranchCode"] == ""
    assert payload["SellerBranchName"] == ""
    assert payload["BuyerTin"] == "987654321"
    assert payload["BuyerName"] == "Buyer LLC"
    assert payload["ProductList"]["Tin"] == "123456789"
    assert payload["ProductList"]["HasExcise"] is False
    assert "ContractDoc" not in payload


def test_act_text_and_contract_when_set() -> None:
    payload = (
        complete_builder()
        .act("ACT-1", "2025-02-07", "Works completed")
        .contract("C-1", "2025-01-01")
        .build()
    )

    assert payload["ActDoc"]["ActText"] == "Works completed"
    assert payload["ContractDoc"] == {"ContractNo": "C-1", "ContractDate": "2025-01-01"}


def test_act_missing_seller() -> None:
    builder = builders.act().act("ACT-1", "2025-02-07").buyer(tin="987654321", name="Buyer")

    with pytest.raises(MissingRequiredSectionError) as exc_info:
        builder.build()

    assert exc_info.value.section == "seller"
    assert exc_info.value.field_name == "seller"


def test_act_requires_products() -> None:
    builder = (
        builders.act()
        .act("ACT-1", "2025-02-07")
        .seller(tin="123456789", name="Seller LLC")
        .buyer(tin="987654321", name="Buyer LLC")
    )

    with pytest.raises(EmptyRequiredListError) as exc_info:
        builder.build()

    assert exc_info.value.list_name == "products"
    assert exc_info.value.document_type == "005"


def test_act_raw_is_shallow() -> None:
    payload = complete_builder().raw({"ActDoc": {"ActNo": "X"}}).build()

    assert payload["ActDoc"] == {"ActNo": "X"}
    assert payload["SellerName"] == "Seller LLC"


@pytest.mark.parametrize("missing", ["count", "price"])
def test_act_service_without_amount_key(missing: str) -> None:
    service = make_service()
    del service[missing]
    builder = complete_builder().add_product(service)

    with pytest.raises(MissingRequiredListItemFieldError) as exc_info:
        builder.build()

    assert exc_info.value.field_name == f"products[1].{missing}"
    assert exc_info.value.document_type == "005"


def test_act_buyer_with_only_tin() -> None:
    """Optional party fields may be left out entirely."""
    payload = complete_builder().buyer(tin="987654321").build()

    assert payload["BuyerTin"] == "987654321"
