"""
Transport waybill (TTN, 041) builder.

The waybill is the most nested document: three mandatory parties and
three optional ones, a transport block, and product groups built
through ProductGroupBuilder. Delivery cost is derived from the totals:

- per product: Amount = count * price,
  DeliverySum = round_half_up(Amount / 100 * price_per_km)
- document: TotalDeliveryCost = distance_km * price_per_km

Raw overrides are merged shallowly: a top-level key given to raw()
replaces the generated value wholesale.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from didox_sdk.builders.base import BaseDocumentBuilder
from didox_sdk.domain.entities import (
    DocumentRefDraft,
    DocumentType,
    GroupEmpowermentDraft,
    PartyDraft,
    PersonDraft,
    PointDraft,
    ProductGroupDraft,
    TransportDraft,
    TtnDraft,
    TtnFlags,
    TtnProductDraft,
    TtnTotalsDraft,
    WaybillHeaderDraft,
    to_draft,
    to_drafts,
)
from didox_sdk.shared.config.constants import PERCENT_BASE
from didox_sdk.shared.errors import (
    EmptyRequiredListError,
    MissingRequiredListItemFieldError,
    MissingRequiredSectionError,
)
from didox_sdk.shared.numbers import format_number, round_half_up, to_fixed

logger = logging.getLogger(__name__)


class ProductGroupBuilder:
    """
    Builder for one loading/unloading product group.

    Used through TtnBuilder.add_product_group(), which hands a fresh
    instance to a callback and builds it immediately.
    """

    def __init__(self) -> None:
        self._loading_point: Optional[PointDraft] = None
        self._loading_trustee: Optional[PersonDraft] = None
        self._unloading_point: Optional[PointDraft] = None
        self._unloading_trustee: Optional[PersonDraft] = None
        self._empowerment: Optional[GroupEmpowermentDraft] = None
        self._products: list = []

    def loading_point(self, data: Any = None, **fields: Any) -> "ProductGroupBuilder":
        """Set loading point (address, tin, name)."""
        self._loading_point = to_draft(PointDraft, data, **fields)
        return self

    def loading_trustee(self, data: Any = None, **fields: Any) -> "ProductGroupBuilder":
        """Set trustee at loading (pinfl, full_name)."""
        self._loading_trustee = to_draft(PersonDraft, data, **fields)
        return self

    def unloading_point(self, data: Any = None, **fields: Any) -> "ProductGroupBuilder":
        """Set unloading point (address, tin, name)."""
        self._unloading_point = to_draft(PointDraft, data, **fields)
        return self

    def unloading_trustee(self, data: Any = None, **fields: Any) -> "ProductGroupBuilder":
        """Set trustee at unloading (pinfl, full_name)."""
        self._unloading_trustee = to_draft(PersonDraft, data, **fields)
        return self

    def empowerment(
        self, no: str, date: str, series: Optional[str] = None
    ) -> "ProductGroupBuilder":
        """Reference the power of attorney covering this group."""
        self._empowerment = GroupEmpowermentDraft(no=no, date=date, series=series)
        return self

    def add_product(self, product: Any = None, **fields: Any) -> "ProductGroupBuilder":
        """Append one product."""
        self._products.append(to_draft(TtnProductDraft, product, **fields))
        return self

    def add_products(self, products: Iterable[Any]) -> "ProductGroupBuilder":
        """Append several products, keeping their order."""
        self._products.extend(to_drafts(TtnProductDraft, products))
        return self

    def build(self) -> ProductGroupDraft:
        """
        Validate and return the finished group.

        Raises:
            MissingRequiredSectionError: If a point or one of its fields is missing
            EmptyRequiredListError: If the group has no products
            MissingRequiredListItemFieldError: If a product has no count or price
        """
        code = DocumentType.WAYBILL.value
        if not self._loading_point:
            raise MissingRequiredSectionError(
                "Loading point is required for product group",
                section="loading_point",
                document_type=code,
            )
        if not self._unloading_point:
            raise MissingRequiredSectionError(
                "Unloading point is required for product group",
                section="unloading_point",
                document_type=code,
            )
        for section, point in (
            ("loading_point", self._loading_point),
            ("unloading_point", self._unloading_point),
        ):
            for point_field in ("address", "tin", "name"):
                if not getattr(point, point_field):
                    raise MissingRequiredSectionError(
                        f"{section}.{point_field} is required for product group",
                        section=f"{section}.{point_field}",
                        document_type=code,
                    )
        if not self._products:
            raise EmptyRequiredListError(
                "At least one product is required for product group",
                list_name="products",
                document_type=code,
            )
        for index, product in enumerate(self._products):
            for item_field in ("count", "price"):
                if getattr(product, item_field) is None:
                    raise MissingRequiredListItemFieldError(
                        f"{item_field} is required for every product of the group",
                        list_name="products",
                        index=index,
                        item_field=item_field,
                        document_type=code,
                    )

        return to_draft(
            ProductGroupDraft,
            loading_point=self._loading_point,
            unloading_point=self._unloading_point,
            products=self._products,
            loading_trustee=self._loading_trustee,
            unloading_trustee=self._unloading_trustee,
            empowerment=self._empowerment,
        )


class TtnBuilder(BaseDocumentBuilder):
    """
    Transport waybill builder (docType: '041').

    Example:
        >>> payload = (
        ...     builders.ttn()
        ...     .waybill("TTN-1", "2025-02-07", delivery_type=2)
        ...     .consignor(tin="123456789", name="Sender LLC")
        ...     .consignee(tin="987654321", name="Receiver LLC")
        ...     .carrier(tin="111222333", name="Carrier LLC")
        ...     .transport(type=1, truck={"reg_no": "01A123BC", "model": "MAN"},
        ...                driver={"pinfl": "12345678901234", "full_name": "Driver"})
        ...     .add_product_group(lambda g: g
        ...         .loading_point(address="Tashkent", tin="123456789", name="Warehouse")
        ...         .unloading_point(address="Samarkand", tin="987654321", name="Shop")
        ...         .add_product(product))
        ...     .totals(distance_km=120, price_per_km=10000)
        ...     .responsible_person(pinfl="12345678901234", full_name="Manager")
        ...     .build()
        ... )
    """

    document_type = DocumentType.WAYBILL

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        super().__init__(initial)
        self._draft = TtnDraft()

    def waybill(
        self,
        no: str,
        date: str,
        delivery_type: int,
        local_type: Optional[int] = None,
    ) -> "TtnBuilder":
        """
        Set waybill header.

        Args:
            no: Waybill number
            date: Waybill date (YYYY-MM-DD)
            delivery_type: Delivery type code
            local_type: Waybill local type (0, 1 or 4); sent as 0 when omitted
        """
        self._draft.waybill = WaybillHeaderDraft(
            no=no, date=date, delivery_type=delivery_type, local_type=local_type
        )
        return self

    def contract(self, no: str, date: str) -> "TtnBuilder":
        """Set the optional contract reference."""
        self._draft.contract = DocumentRefDraft(no=no, date=date)
        return self

    def consignor(self, data: Any = None, **fields: Any) -> "TtnBuilder":
        """Set consignor (shipper)."""
        self._draft.consignor = to_draft(PartyDraft, data, **fields)
        return self

    def consignee(self, data: Any = None, **fields: Any) -> "TtnBuilder":
        """Set consignee (receiver)."""
        self._draft.consignee = to_draft(PartyDraft, data, **fields)
        return self

    def carrier(self, data: Any = None, **fields: Any) -> "TtnBuilder":
        """Set carrier."""
        self._draft.carrier = to_draft(PartyDraft, data, **fields)
        return self

    def freight_forwarder(self, data: Any = None, **fields: Any) -> "TtnBuilder":
        """Set optional freight forwarder."""
        self._draft.freight_forwarder = to_draft(PartyDraft, data, **fields)
        return self

    def client(self, data: Any = None, **fields: Any) -> "TtnBuilder":
        """Set optional client."""
        self._draft.client = to_draft(PartyDraft, data, **fields)
        return self

    def payer(self, data: Any = None, **fields: Any) -> "TtnBuilder":
        """Set optional payer."""
        self._draft.payer = to_draft(PartyDraft, data, **fields)
        return self

    def transport(self, data: Any = None, **fields: Any) -> "TtnBuilder":
        """Set transport block (type, truck, driver, optional trailer)."""
        self._draft.transport = to_draft(TransportDraft, data, **fields)
        return self

    def add_product_group(
        self, configure: Callable[[ProductGroupBuilder], Optional[ProductGroupBuilder]]
    ) -> "TtnBuilder":
        """
        Add a product group configured through a callback.

        The callback receives a fresh ProductGroupBuilder and may return
        it (or nothing). The group is built immediately, so group errors
        surface here rather than in build().

        Args:
            configure: Callback chaining setters on the group builder

        Raises:
            MissingRequiredSectionError: If the group lacks a loading/unloading point
            EmptyRequiredListError: If the group has no products
        """
        group_builder = ProductGroupBuilder()
        configured = configure(group_builder)
        if configured is None:
            configured = group_builder
        self._draft.product_groups.append(configured.build())
        return self

    def totals(
        self, distance_km: Optional[float] = None, price_per_km: Optional[float] = None
    ) -> "TtnBuilder":
        """Set distance (km) and delivery price per km."""
        self._draft.totals = TtnTotalsDraft(distance_km=distance_km, price_per_km=price_per_km)
        return self

    def responsible_person(self, data: Any = None, **fields: Any) -> "TtnBuilder":
        """Set responsible person (pinfl, full_name)."""
        self._draft.responsible_person = to_draft(PersonDraft, data, **fields)
        return self

    def flags(
        self,
        has_committent: Optional[bool] = None,
        single_sided_type: Optional[int] = None,
    ) -> "TtnBuilder":
        """Set optional flags; only flags given explicitly are sent."""
        self._draft.flags = TtnFlags(
            has_committent=has_committent, single_sided_type=single_sided_type
        )
        return self

    def get_draft(self) -> TtnDraft:
        """Return a copy of the accumulated draft (for debugging/testing)."""
        return to_draft(TtnDraft, self._draft)

    def build(self) -> Dict[str, Any]:
        """
        Validate the draft and transform it to the API waybill payload.

        Raises:
            MissingRequiredSectionError: If a mandatory block is missing
            EmptyRequiredListError: If no product group was added
        """
        draft = self._draft
        self._require(draft.waybill, "waybill", "Waybill information is required")
        self._require(draft.consignor, "consignor", "Consignor is required")
        self._require(draft.consignee, "consignee", "Consignee is required")
        self._require(draft.carrier, "carrier", "Carrier is required")
        self._require(draft.transport, "transport", "Transport information is required")
        self._require(draft.transport.truck, "transport.truck", "Transport truck is required")
        self._require(draft.transport.driver, "transport.driver", "Transport driver is required")
        self._require_items(
            draft.product_groups, "product_groups", "At least one product group is required"
        )
        self._require(draft.totals, "totals", "Totals information is required")
        self._require(
            draft.totals.distance_km is not None, "totals.distance_km", "Total distance is required"
        )
        self._require(
            draft.totals.price_per_km is not None,
            "totals.price_per_km",
            "Delivery price per km is required",
        )
        self._require(
            draft.responsible_person, "responsible_person", "Responsible person is required"
        )

        totals = draft.totals
        local_type = draft.waybill.local_type
        payload: Dict[str, Any] = {
            "WaybillLocalType": local_type if local_type is not None else 0,
            "DeliveryType": draft.waybill.delivery_type,
            "WaybillDoc": {
                "WaybillNo": draft.waybill.no,
                "WaybillDate": draft.waybill.date,
            },
        }

        if draft.contract:
            payload["ContractDoc"] = {
                "ContractNo": draft.contract.no,
                "ContractDate": draft.contract.date,
            }

        payload["Consignor"] = self._party("Consignor", draft.consignor)
        payload["Consignee"] = self._party("Consignee", draft.consignee)
        payload["Carrier"] = self._party("Carrier", draft.carrier)
        if draft.freight_forwarder:
            payload["FreightForwarder"] = self._party("FreightForwarder", draft.freight_forwarder)
        if draft.client:
            payload["Client"] = self._party("Client", draft.client)
        if draft.payer:
            payload["Payer"] = self._party("Payer", draft.payer)

        payload["TransportType"] = draft.transport.type
        payload["Roadway"] = self._roadway(draft.transport, draft.product_groups, totals)
        payload["ResponsiblePerson"] = self._person(draft.responsible_person)
        payload["TotalDistance"] = to_fixed(totals.distance_km)
        payload["DeliveryCost"] = format_number(totals.price_per_km)
        payload["TotalDeliveryCost"] = to_fixed(totals.distance_km * totals.price_per_km)

        if draft.flags and draft.flags.has_committent is not None:
            payload["HasCommittent"] = draft.flags.has_committent
        if draft.flags and draft.flags.single_sided_type is not None:
            payload["SingleSidedType"] = draft.flags.single_sided_type

        # TODO: derive isValid from the draft once the API documents its meaning
        payload["isValid"] = True

        logger.debug(
            f"Built waybill {draft.waybill.no} with {len(draft.product_groups)} product group(s)"
        )
        return self._merge_raw(payload)

    @staticmethod
    def _party(role: str, party: PartyDraft) -> Dict[str, Any]:
        return {
            f"{role}Tin": party.tin,
            f"{role}Name": party.name,
            f"{role}BranchCode": party.branch_code or "",
            f"{role}BranchName": party.branch_name or "",
        }

    @staticmethod
    def _person(person: PersonDraft) -> Dict[str, Any]:
        return {"Pinfl": person.pinfl, "FullName": person.full_name}

    @staticmethod
    def _point(point: PointDraft) -> Dict[str, Any]:
        return {"Address": point.address, "Tin": point.tin, "Name": point.name}

    def _roadway(
        self,
        transport: TransportDraft,
        groups: Iterable[ProductGroupDraft],
        totals: TtnTotalsDraft,
    ) -> Dict[str, Any]:
        roadway: Dict[str, Any] = {
            "Truck": {"RegNo": transport.truck.reg_no, "Model": transport.truck.model},
        }
        if transport.trailer:
            roadway["Trailer"] = {
                "RegNo": transport.trailer.reg_no,
                "Model": transport.trailer.model,
            }
        roadway["Driver"] = self._person(transport.driver)
        roadway["ProductGroups"] = [
            self._group(group, index, totals.price_per_km)
            for index, group in enumerate(groups, start=1)
        ]
        return roadway

    def _group(self, group: ProductGroupDraft, ord_no: int, price_per_km: float) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "OrdNo": ord_no,
            "LoadingPoint": self._point(group.loading_point),
        }
        if group.loading_trustee:
            result["LoadingTrustee"] = self._person(group.loading_trustee)
        result["UnloadingPoint"] = self._point(group.unloading_point)
        if group.unloading_trustee:
            result["UnloadingTrustee"] = self._person(group.unloading_trustee)
        if group.empowerment:
            empowerment = {
                "EmpowermentNo": group.empowerment.no,
                "EmpowermentDate": group.empowerment.date,
            }
            if group.empowerment.series:
                empowerment["EmpowermentSeries"] = group.empowerment.series
            result["Empowerment"] = empowerment

        result["ProductList"] = [
            self._product(product, index, price_per_km)
            for index, product in enumerate(group.products, start=1)
        ]
        return result

    @staticmethod
    def _product(product: TtnProductDraft, ord_no: int, price_per_km: float) -> Dict[str, Any]:
        amount = product.count * product.price
        delivery_sum = round_half_up(amount / PERCENT_BASE * price_per_km)

        return {
            "OrdNo": ord_no,
            "CatalogCode": product.catalog_code,
            "CatalogName": product.catalog_name,
            "Name": product.name,
            "PackageCode": product.package_code,
            "PackageName": product.package_name,
            "Count": format_number(product.count),
            "Amount": format_number(amount),
            "DeliverySum": format_number(delivery_sum),
        }


def ttn(initial: Optional[Mapping[str, Any]] = None) -> TtnBuilder:
    """Create a transport waybill builder (docType '041')."""
    return TtnBuilder(initial)
