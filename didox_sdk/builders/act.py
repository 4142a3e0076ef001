"""
Act of completed work (005) builder.

Same VAT math as the invoice, but amounts are serialized as strings:
two-decimal fixed strings for sums, plain number strings for counts
and rates. Each line may override the document-level VAT flag.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from didox_sdk.builders.base import BaseDocumentBuilder
from didox_sdk.domain.entities import (
    ActDraft,
    ActFlags,
    ActHeaderDraft,
    ActProductDraft,
    DocumentRefDraft,
    DocumentType,
    PartyDraft,
    to_draft,
    to_drafts,
)
from didox_sdk.shared.config.constants import PERCENT_BASE
from didox_sdk.shared.numbers import format_number, to_fixed

logger = logging.getLogger(__name__)


class ActBuilder(BaseDocumentBuilder):
    """
    Act document builder (docType: '005').

    Example:
        >>> payload = (
        ...     builders.act()
        ...     .act("ACT-1", "2025-02-07", "Works completed")
        ...     .seller(tin="123456789", name="Seller LLC")
        ...     .buyer(tin="987654321", name="Buyer LLC")
        ...     .add_product(name="Consulting", catalog_code="10999001001000000",
        ...                  catalog_name="Services", package_code="1", package_name="pcs",
        ...                  count=10, price=1000, vat_rate=12)
        ...     .flags(has_vat=True)
        ...     .build()
        ... )
    """

    document_type = DocumentType.ACT

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        super().__init__(initial)
        self._draft = ActDraft()

    def act(self, no: str, date: str, text: Optional[str] = None) -> "ActBuilder":
        """
        Set act number, date and optional text.

        Args:
            no: Act number
            date: Act date (YYYY-MM-DD)
            text: Optional free text sent as ActText
        """
        self._draft.act = ActHeaderDraft(no=no, date=date, text=text)
        return self

    def contract(self, no: str, date: str) -> "ActBuilder":
        """Set the optional contract reference."""
        self._draft.contract = DocumentRefDraft(no=no, date=date)
        return self

    def seller(self, data: Any = None, **fields: Any) -> "ActBuilder":
        """Set seller (PartyDraft, mapping or keywords)."""
        self._draft.seller = to_draft(PartyDraft, data, **fields)
        return self

    def buyer(self, data: Any = None, **fields: Any) -> "ActBuilder":
        """Set buyer (PartyDraft, mapping or keywords)."""
        self._draft.buyer = to_draft(PartyDraft, data, **fields)
        return self

    def add_product(self, product: Any = None, **fields: Any) -> "ActBuilder":
        """Append one work/service line."""
        self._draft.products.append(to_draft(ActProductDraft, product, **fields))
        return self

    def add_products(self, products: Iterable[Any]) -> "ActBuilder":
        """Append several lines, keeping their order."""
        self._draft.products.extend(to_drafts(ActProductDraft, products))
        return self

    def flags(self, data: Any = None, **fields: Any) -> "ActBuilder":
        """Set document flags (has_vat, has_excise)."""
        self._draft.flags = to_draft(ActFlags, data, **fields)
        return self

    def get_draft(self) -> ActDraft:
        """Return a copy of the accumulated draft (for debugging/testing)."""
        return to_draft(ActDraft, self._draft)

    def build(self) -> Dict[str, Any]:
        """
        Validate the draft and transform it to the API act payload.

        Raises:
            MissingRequiredSectionError: If act header, seller or buyer is missing
            EmptyRequiredListError: If no product was added
            MissingRequiredListItemFieldError: If a product has no count or price
        """
        draft = self._draft
        self._require(draft.act, "act", "Act document information is required")
        self._require(draft.seller, "seller", "Seller information is required")
        self._require(draft.buyer, "buyer", "Buyer information is required")
        self._require_items(
            draft.products, "products", "At least one product/service is required"
        )
        self._require_item_values(draft.products, "products", ("count", "price"))

        flags = draft.flags or ActFlags()

        act_doc: Dict[str, Any] = {"ActNo": draft.act.no, "ActDate": draft.act.date}
        if draft.act.text:
            act_doc["ActText"] = draft.act.text

        payload: Dict[str, Any] = {
            "ActDoc": act_doc,
            "SellerTin": draft.seller.tin,
            "ProductList": {
                "Tin": draft.seller.tin,
                "HasVat": flags.has_vat,
                "HasExcise": flags.has_excise,
                "Products": [
                    self._product(product, index, flags.has_vat)
                    for index, product in enumerate(draft.products, start=1)
                ],
            },
            "SellerName": draft.seller.name,
            "SellerBranchCode": draft.seller.branch_code or "",
            "SellerBranchName": draft.seller.branch_name or "",
            "BuyerTin": draft.buyer.tin,
            "BuyerName": draft.buyer.name,
            "BuyerBranchCode": draft.buyer.branch_code or "",
            "BuyerBranchName": draft.buyer.branch_name or "",
        }

        if draft.contract:
            payload["ContractDoc"] = {
                "ContractNo": draft.contract.no,
                "ContractDate": draft.contract.date,
            }

        logger.debug(f"Built act {draft.act.no} with {len(draft.products)} line(s)")
        return self._merge_raw(payload)

    @staticmethod
    def _product(product: ActProductDraft, ord_no: int, has_vat: bool) -> Dict[str, Any]:
        total_without_vat = product.count * product.price
        vat_rate = product.vat_rate or 0
        vat_sum = total_without_vat * vat_rate / PERCENT_BASE if has_vat and vat_rate > 0 else 0
        total_sum = total_without_vat + vat_sum
        without_vat = product.without_vat if product.without_vat is not None else not has_vat

        return {
            "OrdNo": ord_no,
            "CatalogCode": product.catalog_code,
            "CatalogName": product.catalog_name,
            "Name": product.name,
            "MeasureId": None,
            "PackageCode": product.package_code,
            "PackageName": product.package_name,
            "Count": format_number(product.count),
            "Summa": format_number(total_sum),
            "TotalSumWithoutVat": to_fixed(total_without_vat),
            "VatRate": format_number(vat_rate),
            "VatSum": to_fixed(vat_sum),
            "TotalSum": to_fixed(total_sum),
            "WithoutVat": without_vat,
            "LgotaName": product.lgota_name,
            "LgotaType": product.lgota_type,
        }


def act(initial: Optional[Mapping[str, Any]] = None) -> ActBuilder:
    """Create an act builder (docType '005')."""
    return ActBuilder(initial)
