"""
Empowerment (power of attorney, 006) builder.

An empowerment authorizes an agent to receive goods from the seller on
behalf of the buyer. It carries quantities only: no prices, VAT or
sums ever appear in the payload.

Missing agent values are sent as null, missing company values as "".
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from didox_sdk.builders.base import BaseDocumentBuilder
from didox_sdk.domain.entities import (
    AgentDraft,
    CompanyDraft,
    DocumentRefDraft,
    DocumentType,
    EmpowermentDraft,
    EmpowermentHeaderDraft,
    EmpowermentProductDraft,
    to_draft,
    to_drafts,
)
from didox_sdk.shared.numbers import format_number

logger = logging.getLogger(__name__)


class EmpowermentBuilder(BaseDocumentBuilder):
    """
    Empowerment document builder (docType: '006').

    Example:
        >>> payload = (
        ...     builders.empowerment()
        ...     .empowerment("EMP-1", "2025-02-07", "2025-02-17")
        ...     .agent(fio="Ivanov Ivan", pinfl="12345678901234")
        ...     .seller(seller_company)
        ...     .buyer(buyer_company)
        ...     .add_product(name="Cement", catalog_code="10999001001000000",
        ...                  measure_id="1", count=5)
        ...     .build()
        ... )
    """

    document_type = DocumentType.EMPOWERMENT
    deep_merge_raw = True

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        super().__init__(initial)
        self._draft = EmpowermentDraft()

    def empowerment(self, no: str, issue_date: str, expire_date: str) -> "EmpowermentBuilder":
        """
        Set empowerment number and validity period.

        Args:
            no: Empowerment number
            issue_date: Date of issue (YYYY-MM-DD)
            expire_date: Date of expiry (YYYY-MM-DD)
        """
        self._draft.empowerment = EmpowermentHeaderDraft(
            no=no, issue_date=issue_date, expire_date=expire_date
        )
        return self

    def contract(self, no: str, date: str) -> "EmpowermentBuilder":
        """Set the contract reference (sent as empty strings when unset)."""
        self._draft.contract = DocumentRefDraft(no=no, date=date)
        return self

    def agent(self, data: Any = None, **fields: Any) -> "EmpowermentBuilder":
        """Set agent (fio, pinfl, optional job_title and passport)."""
        self._draft.agent = to_draft(AgentDraft, data, **fields)
        return self

    def seller(self, data: Any = None, **fields: Any) -> "EmpowermentBuilder":
        """Set seller company."""
        self._draft.seller = to_draft(CompanyDraft, data, **fields)
        return self

    def buyer(self, data: Any = None, **fields: Any) -> "EmpowermentBuilder":
        """Set buyer company."""
        self._draft.buyer = to_draft(CompanyDraft, data, **fields)
        return self

    def add_product(self, product: Any = None, **fields: Any) -> "EmpowermentBuilder":
        """Append one product."""
        self._draft.products.append(to_draft(EmpowermentProductDraft, product, **fields))
        return self

    def add_products(self, products: Iterable[Any]) -> "EmpowermentBuilder":
        """Append several products, keeping their order."""
        self._draft.products.extend(to_drafts(EmpowermentProductDraft, products))
        return self

    def get_draft(self) -> EmpowermentDraft:
        """Return a copy of the accumulated draft (for debugging/testing)."""
        return to_draft(EmpowermentDraft, self._draft)

    def build(self) -> Dict[str, Any]:
        """
        Validate the draft and transform it to the API empowerment payload.

        Raises:
            MissingRequiredSectionError: If header, agent, seller or buyer is missing
            EmptyRequiredListError: If no product was added
            MissingRequiredListItemFieldError: If a product has no count
        """
        draft = self._draft
        self._require(draft.empowerment, "empowerment", "Empowerment information is required")
        self._require(draft.agent, "agent", "Agent information is required")
        self._require(draft.seller, "seller", "Seller information is required")
        self._require(draft.buyer, "buyer", "Buyer information is required")
        self._require_items(draft.products, "products", "At least one product is required")
        self._require_item_values(draft.products, "products", ("count",))

        agent = draft.agent
        passport = agent.passport
        contract = draft.contract

        payload: Dict[str, Any] = {
            "EmpowermentDoc": {
                "EmpowermentNo": draft.empowerment.no,
                "EmpowermentDateOfIssue": draft.empowerment.issue_date,
                "EmpowermentDateOfExpire": draft.empowerment.expire_date,
            },
            "ContractDoc": {
                "ContractNo": contract.no if contract else "",
                "ContractDate": contract.date if contract else "",
            },
            "Agent": {
                "JobTitle": agent.job_title or None,
                "Fio": agent.fio,
                "Passport": {
                    "Number": (passport.number if passport else None) or None,
                    "IssuedBy": (passport.issued_by if passport else None) or None,
                    "DateOfIssue": (passport.issue_date if passport else None) or None,
                },
                "AgentTin": agent.pinfl,
            },
            "SellerTin": draft.seller.tin,
            "Seller": self._company(draft.seller),
            "BuyerTin": draft.buyer.tin,
            "Buyer": self._company(draft.buyer),
            "ProductList": {
                "Tin": draft.seller.tin,
                "HasExcise": False,
                "HasVat": False,
                "Products": [
                    {
                        "OrdNo": index,
                        "CatalogCode": product.catalog_code,
                        "CatalogName": product.catalog_name or "",
                        "Name": product.name,
                        "MeasureId": product.measure_id,
                        "Count": format_number(product.count),
                    }
                    for index, product in enumerate(draft.products, start=1)
                ],
            },
        }

        logger.debug(
            f"Built empowerment {draft.empowerment.no} with {len(draft.products)} product(s)"
        )
        return self._merge_raw(payload)

    @staticmethod
    def _company(company: CompanyDraft) -> Dict[str, Any]:
        return {
            "Name": company.name,
            "Address": company.address,
            "BankAccount": company.account,
            "BankId": company.bank_id,
            "Director": company.director or "",
            "Accountant": company.accountant or "",
            "BranchCode": company.branch_code or "",
            "BranchName": company.branch_name or "",
        }


def empowerment(initial: Optional[Mapping[str, Any]] = None) -> EmpowermentBuilder:
    """Create an empowerment builder (docType '006')."""
    return EmpowermentBuilder(initial)
