"""
Tests for EmpowermentBuilder - power of attorney (006).

The agent block sends missing values as null while company blocks send
them as empty strings; both conventions are checked field by field.
"""

import pytest

from didox_sdk import builders
from didox_sdk.domain.entities import AgentPassportDraft, CompanyDraft
from didox_sdk.shared.errors import (
    EmptyRequiredListError,
    MissingRequiredListItemFieldError,
    MissingRequiredSectionError,
)

SELLER = CompanyDraft(
    tin="123456789",
    name="Seller LLC",
    account="20208000900100001001",
    bank_id="00014",
    address="Tashkent",
    director="Director A",
)

BUYER = {
    "tin": "987654321",
    "name": "Buyer LLC",
    "account": "20208000900100002002",
    "bank_id": "00873",
    "address": "Samarkand",
}

PRODUCT = {
    "name": "Cement M400",
    "catalog_code": "02523001001000000",
    "measure_id": "1",
    "count": 5,
}


def complete_builder(**agent_overrides):
    agent = {"fio": "Ivanov Ivan", "pinfl": "12345678901234"}
    agent.update(agent_overrides)
    return (
        builders.empowerment()
        .empowerment("EMP-1", "2025-02-07", "2025-02-17")
        .agent(agent)
        .seller(SELLER)
        .buyer(BUYER)
        .add_product(PRODUCT)
    )


def test_empowerment_requires_products() -> None:
    """An empowerment without products fails naming the products list."""
    builder = (
        builders.empowerment()
        .empowerment("EMP-1", "2025-02-07", "2025-02-17")
        .agent(fio="Ivanov Ivan", pinfl="12345678901234")
        .seller(SELLER)
        .buyer(BUYER)
    )

    with pytest.raises(EmptyRequiredListError) as exc_info:
        builder.build()

    assert exc_info.value.list_name == "products"
    assert exc_info.value.field_name == "products"
    assert exc_info.value.document_type == "006"


@pytest.mark.parametrize("missing", ["empowerment", "agent", "seller", "buyer"])
def test_empowerment_missing_section(missing: str) -> None:
    builder = builders.empowerment()
    if missing != "empowerment":
        builder.empowerment("EMP-1", "2025-02-07", "2025-02-17")
    if missing != "agent":
        builder.agent(fio="Ivanov Ivan", pinfl="12345678901234")
    if missing != "seller":
        builder.seller(SELLER)
    if missing != "buyer":
        builder.buyer(BUYER)
    builder.add_product(PRODUCT)

    with pytest.raises(MissingRequiredSectionError) as exc_info:
        builder.build()

    assert exc_info.value.section == missing


def test_empowerment_header_and_empty_contract() -> None:
    payload = complete_builder().build()

    assert payload["EmpowermentDoc"] == {
        "EmpowermentNo": "EMP-1",
        "EmpowermentDateOfIssue": "2025-02-07",
        "EmpowermentDateOfExpire": "2025-02-17",
    }
    assert payload["ContractDoc"] == {"ContractNo": "", "ContractDate": ""}


def test_empowerment_contract_when_set() -> None:
    payload = complete_builder().contract("C-1", "2025-01-01").build()

    assert payload["ContractDoc"] == {"ContractNo": "C-1", "ContractDate": "2025-01-01"}


def test_empowerment_agent_defaults_to_null() -> None:
    """Agent job title and passport fields are null when not given."""
    agent = complete_builder().build()["Agent"]

    assert agent["JobTitle"] is None
    assert agent["Fio"] == "Ivanov Ivan"
    assert agent["AgentTin"] == "12345678901234"
    assert agent["Passport"]["Number"] is None
    assert agent["Passport"]["IssuedBy"] is None
    assert agent["Passport"]["DateOfIssue"] is None


def test_empowerment_agent_partial_passport() -> None:
    agent = complete_builder(
        job_title="", passport={"number": "AA1234567"}
    ).build()["Agent"]

    assert agent["JobTitle"] is None
    assert agent["Passport"] == {"Number": "AA1234567", "IssuedBy": None, "DateOfIssue": None}


def test_empowerment_agent_full_passport() -> None:
    passport = AgentPassportDraft(
        number="AA1234567", issued_by="Tashkent ROVD", issue_date="2020-01-01"
    )
    agent = complete_builder(job_title="Driver", passport=passport).build()["Agent"]

    assert agent["JobTitle"] == "Driver"
    assert agent["Passport"] == {
        "Number": "AA1234567",
        "IssuedBy": "Tashkent ROVD",
        "DateOfIssue": "2020-01-01",
    }


def test_empowerment_company_defaults_to_empty_string() -> None:
    """Missing optional company values are sent as empty strings."""
    payload = complete_builder().build()

    assert payload["SellerTin"] == "123456789"
    assert payload["Seller"] == {
        "Name": "Seller LLC",
        "Address": "Tashkent",
        "BankAccount": "20208000900100001001",
        "BankId": "00014",
        "Director": "Director A",
        "Accountant": "",
        "BranchCode": "",
        "BranchName": "",
    }
    assert payload["BuyerTin"] == "987654321"
    for key in ("Director", "Accountant", "BranchCode", "BranchName"):
        assert payload["Buyer"][key] == ""


def test_empowerment_product_list_has_no_prices() -> None:
    """HasVat / HasExcise are always false and Tin is the seller's."""
    product_list = (
        complete_builder()
        .add_product({**PRODUCT, "count": 2.5, "catalog_name": "Cement"})
        .build()["ProductList"]
    )

    assert product_list["Tin"] == "123456789"
    assert product_list["HasVat"] is False
    assert product_list["HasExcise"] is False
    assert product_list["Products"] == [
        {
            "OrdNo": 1,
            "CatalogCode": "02523001001000000",
            "CatalogName": "",
            "Name": "Cement M400",
            "MeasureId": "1",
            "Count": "5",
        },
        {
            "OrdNo": 2,
            "CatalogCode": "02523001001000000",
            "CatalogName": "Cement",
            "Name": "Cement M400",
            "MeasureId": "1",
            "Count": "2.5",
        },
    ]


def test_empowerment_raw_is_deep_merged() -> None:
    """Nested raw keys override single leaves and keep their siblings."""
    payload = (
        complete_builder()
        .raw({"Seller": {"Director": "X"}, "Agent": {"Passport": {"Number": "BB7654321"}}})
        .build()
    )

    assert payload["Seller"]["Director"] == "X"
    assert payload["Seller"]["Name"] == "Seller LLC"
    assert payload["Agent"]["Passport"]["Number"] == "BB7654321"
    assert payload["Agent"]["Fio"] == "Ivanov Ivan"


def test_empowerment_raw_lists_replace() -> None:
    payload = complete_builder().raw({"ProductList": {"Products": []}}).build()

    assert payload["ProductList"]["Products"] == []
    assert payload["ProductList"]["Tin"] == "123456789"


@pytest.mark.parametrize(
    "passport_field, wire_key",
    [
        ("number", "Number"),
        ("issued_by", "IssuedBy"),
        ("issue_date", "DateOfIssue"),
    ],
)
def test_empowerment_empty_passport_field_is_null(passport_field: str, wire_key: str) -> None:
    passport = {"number": "AA1234567", "issued_by": "Tashkent ROVD", "issue_date": "2020-01-01"}
    passport[passport_field] = ""

    agent = complete_builder(passport=passport).build()["Agent"]

    assert agent["Passport"][wire_key] is None
    filled = {key for key, value in agent["Passport"].items() if value is not None}
    assert filled == {"Number", "IssuedBy", "DateOfIssue"} - {wire_key}


def test_empowerment_product_without_count_key() -> None:
    product = {key: value for key, value in PRODUCT.items() if key != "count"}
    builder = complete_builder().add_product(product)

    with pytest.raises(MissingRequiredListItemFieldError) as exc_info:
        builder.build()

    assert exc_info.value.field_name == "products[1].count"
    assert exc_info.value.document_type == "006"


def test_empowerment_agent_without_pinfl_key_is_null() -> None:
    agent = complete_builder().agent(fio="Ivanov Ivan").build()["Agent"]

    assert agent["Fio"] == "Ivanov Ivan"
    assert agent["AgentTin"] is None
