"""
Invoice (factura, 002) builder.

Transforms an InvoiceDraft into the API invoice payload. Amounts stay
native numbers; VAT is computed per line from the line's rate and the
document-level has_vat flag.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from didox_sdk.builders.base import BaseDocumentBuilder
from didox_sdk.domain.entities import (
    DocumentRefDraft,
    DocumentType,
    InvoiceDraft,
    InvoiceFlags,
    InvoicePartyDraft,
    InvoiceProductDraft,
    to_draft,
    to_drafts,
)
from didox_sdk.shared.config.constants import PERCENT_BASE
from didox_sdk.shared.numbers import round_money

logger = logging.getLogger(__name__)


class InvoiceBuilder(BaseDocumentBuilder):
    """
    Invoice document builder (docType: '002').

    Example:
        >>> payload = (
        ...     builders.invoice()
        ...     .factura("INV-001", "2025-02-07")
        ...     .seller(tin="123456789", name="Seller LLC", vat_reg_code="VAT1",
        ...             account="20208000000000001", bank_id="00014", address="Tashkent")
        ...     .buyer(buyer_data)
        ...     .add_product(product)
        ...     .flags(has_vat=True)
        ...     .build()
        ... )
    """

    document_type = DocumentType.FACTURA

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        super().__init__(initial)
        self._draft = InvoiceDraft()

    def factura(self, no: str, date: str) -> "InvoiceBuilder":
        """
        Set invoice number and date.

        Args:
            no: Invoice number
            date: Invoice date (YYYY-MM-DD)
        """
        self._draft.factura = DocumentRefDraft(no=no, date=date)
        return self

    def contract(self, no: str, date: str) -> "InvoiceBuilder":
        """Set the optional contract reference."""
        self._draft.contract = DocumentRefDraft(no=no, date=date)
        return self

    def seller(self, data: Any = None, **fields: Any) -> "InvoiceBuilder":
        """Set seller organization (InvoicePartyDraft, mapping or keywords)."""
        self._draft.seller = to_draft(InvoicePartyDraft, data, **fields)
        return self

    def buyer(self, data: Any = None, **fields: Any) -> "InvoiceBuilder":
        """Set buyer organization (InvoicePartyDraft, mapping or keywords)."""
        self._draft.buyer = to_draft(InvoicePartyDraft, data, **fields)
        return self

    def add_product(self, product: Any = None, **fields: Any) -> "InvoiceBuilder":
        """Append one product line."""
        self._draft.products.append(to_draft(InvoiceProductDraft, product, **fields))
        return self

    def add_products(self, products: Iterable[Any]) -> "InvoiceBuilder":
        """Append several product lines, keeping their order."""
        self._draft.products.extend(to_drafts(InvoiceProductDraft, products))
        return self

    def flags(self, data: Any = None, **fields: Any) -> "InvoiceBuilder":
        """Set document flags (has_vat, has_excise, has_lgota, has_committent)."""
        self._draft.flags = to_draft(InvoiceFlags, data, **fields)
        return self

    def get_draft(self) -> InvoiceDraft:
        """Return a copy of the accumulated draft (for debugging/testing)."""
        return to_draft(InvoiceDraft, self._draft)

    def build(self) -> Dict[str, Any]:
        """
        Validate the draft and transform it to the API invoice payload.

        Returns:
            Invoice payload ready for create_draft("002", ...)

        Raises:
            MissingRequiredSectionError: If factura, seller or buyer is missing
            EmptyRequiredListError: If no product was added
            MissingRequiredListItemFieldError: If a product has no quantity or price
        """
        draft = self._draft
        self._require(draft.factura, "factura", "Invoice factura information is required")
        self._require(draft.seller, "seller", "Seller information is required")
        self._require(draft.buyer, "buyer", "Buyer information is required")
        self._require_items(draft.products, "products", "At least one product is required")
        self._require_item_values(draft.products, "products", ("quantity", "price"))

        flags = draft.flags or InvoiceFlags()

        payload: Dict[str, Any] = {
            "Version": 1,
            "FacturaType": 0,
            "FacturaDoc": {
                "FacturaNo": draft.factura.no,
                "FacturaDate": draft.factura.date,
            },
            "SellerTin": draft.seller.tin,
            "Seller": self._party(draft.seller),
            "BuyerTin": draft.buyer.tin,
            "Buyer": self._party(draft.buyer),
            "ProductList": {
                "Tin": draft.seller.tin,
                "HasVat": flags.has_vat,
                "HasExcise": flags.has_excise,
                "HasLgota": flags.has_lgota,
                "HasCommittent": flags.has_committent,
                "Products": [
                    self._product(product, index, flags.has_vat)
                    for index, product in enumerate(draft.products, start=1)
                ],
            },
        }

        if draft.contract:
            payload["ContractDoc"] = {
                "ContractNo": draft.contract.no,
                "ContractDate": draft.contract.date,
            }

        logger.debug(f"Built invoice {draft.factura.no} with {len(draft.products)} product(s)")
        return self._merge_raw(payload)

    @staticmethod
    def _party(party: InvoicePartyDraft) -> Dict[str, Any]:
        return {
            "Name": party.name,
            "VatRegCode": party.vat_reg_code,
            "Account": party.account,
            "BankId": party.bank_id,
            "Address": party.address,
        }

    @staticmethod
    def _product(product: InvoiceProductDraft, ord_no: int, has_vat: bool) -> Dict[str, Any]:
        delivery_sum = product.quantity * product.price
        vat_rate = product.vat_rate or 0
        vat_sum = (
            round_money(delivery_sum * vat_rate / PERCENT_BASE)
            if has_vat and vat_rate > 0
            else 0
        )
        delivery_sum_with_vat = delivery_sum + vat_sum

        return {
            "OrdNo": ord_no,
            "Name": product.name,
            "CatalogCode": product.catalog_code,
            "PackageCode": product.package_code,
            "PackageName": product.package_name,
            "Count": product.quantity,
            "Summa": delivery_sum_with_vat,
            "DeliverySum": delivery_sum,
            "VatRate": vat_rate,
            "VatSum": vat_sum,
            "DeliverySumWithVat": delivery_sum_with_vat,
            "WithoutVat": not has_vat,
            "Origin": product.origin,
        }


def invoice(initial: Optional[Mapping[str, Any]] = None) -> InvoiceBuilder:
    """Create an invoice builder (docType '002')."""
    return InvoiceBuilder(initial)
