"""
Transport waybill (TTN, 041) drafts.

A waybill carries several parties, a transport block and one or
more product groups, each group describing a loading/unloading
leg with its own products.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .common import DocumentRefDraft, PartyDraft, PersonDraft, nested_draft


@dataclass
class WaybillHeaderDraft:
    """
    Waybill number, date and delivery codes.

    local_type: 0 (default), 1 or 4
    delivery_type: delivery type code
    """

    no: Optional[str] = None
    date: Optional[str] = None
    delivery_type: Optional[int] = None
    local_type: Optional[int] = None


@dataclass
class VehicleDraft:
    """Truck or trailer."""

    reg_no: Optional[str] = None
    model: Optional[str] = None


@dataclass
class TransportDraft:
    """
    Transport block.

    type: 1 - road, 2 - rail
    """

    type: Optional[int] = None
    truck: Optional[VehicleDraft] = None
    driver: Optional[PersonDraft] = None
    trailer: Optional[VehicleDraft] = None

    def __post_init__(self) -> None:
        """Coerce nested sections given as mappings."""
        self.truck = nested_draft(VehicleDraft, self.truck)
        self.driver = nested_draft(PersonDraft, self.driver)
        self.trailer = nested_draft(VehicleDraft, self.trailer)


@dataclass
class PointDraft:
    """Loading or unloading point."""

    address: Optional[str] = None
    tin: Optional[str] = None
    name: Optional[str] = None


@dataclass
class GroupEmpowermentDraft:
    """Power of attorney referenced by a product group."""

    no: Optional[str] = None
    date: Optional[str] = None
    series: Optional[str] = None


@dataclass
class TtnProductDraft:
    """One transported product line."""

    name: Optional[str] = None
    catalog_code: Optional[str] = None
    catalog_name: Optional[str] = None
    package_code: Optional[str] = None
    package_name: Optional[str] = None
    count: Optional[float] = None
    price: Optional[float] = None
    vat_rate: Optional[float] = None


@dataclass
class ProductGroupDraft:
    """Finished product group produced by ProductGroupBuilder.build()."""

    loading_point: Optional[PointDraft] = None
    unloading_point: Optional[PointDraft] = None
    products: List[TtnProductDraft] = field(default_factory=list)
    loading_trustee: Optional[PersonDraft] = None
    unloading_trustee: Optional[PersonDraft] = None
    empowerment: Optional[GroupEmpowermentDraft] = None


@dataclass
class TtnTotalsDraft:
    """Distance and per-km delivery price."""

    distance_km: Optional[float] = None
    price_per_km: Optional[float] = None


@dataclass
class TtnFlags:
    """Optional waybill flags; None means "not sent"."""

    has_committent: Optional[bool] = None
    single_sided_type: Optional[int] = None


@dataclass
class TtnDraft:
    """In-progress waybill, owned by a TtnBuilder."""

    waybill: Optional[WaybillHeaderDraft] = None
    contract: Optional[DocumentRefDraft] = None
    consignor: Optional[PartyDraft] = None
    consignee: Optional[PartyDraft] = None
    carrier: Optional[PartyDraft] = None
    freight_forwarder: Optional[PartyDraft] = None
    client: Optional[PartyDraft] = None
    payer: Optional[PartyDraft] = None
    transport: Optional[TransportDraft] = None
    product_groups: List[ProductGroupDraft] = field(default_factory=list)
    totals: Optional[TtnTotalsDraft] = None
    responsible_person: Optional[PersonDraft] = None
    flags: Optional[TtnFlags] = None
