"""
Empowerment (power of attorney, 006) drafts.

Three parties: seller, buyer and the agent who receives goods on
the buyer's behalf. Products carry quantities only, never prices.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .common import DocumentRefDraft, nested_draft


@dataclass
class EmpowermentHeaderDraft:
    """Empowerment number with issue and expiry dates."""

    no: Optional[str] = None
    issue_date: Optional[str] = None
    expire_date: Optional[str] = None


@dataclass
class AgentPassportDraft:
    """Agent passport; missing values are sent as null."""

    number: Optional[str] = None
    issued_by: Optional[str] = None
    issue_date: Optional[str] = None


@dataclass
class AgentDraft:
    """Person acting under the power of attorney."""

    fio: Optional[str] = None
    pinfl: Optional[str] = None
    job_title: Optional[str] = None
    passport: Optional[AgentPassportDraft] = None

    def __post_init__(self) -> None:
        self.passport = nested_draft(AgentPassportDraft, self.passport)


@dataclass
class CompanyDraft:
    """Seller or buyer company; missing optional values are sent as ""."""

    tin: Optional[str] = None
    name: Optional[str] = None
    account: Optional[str] = None
    bank_id: Optional[str] = None
    address: Optional[str] = None
    director: Optional[str] = None
    accountant: Optional[str] = None
    branch_code: Optional[str] = None
    branch_name: Optional[str] = None


@dataclass
class EmpowermentProductDraft:
    """Product the agent is empowered to receive."""

    name: Optional[str] = None
    catalog_code: Optional[str] = None
    measure_id: Optional[str] = None
    count: Optional[float] = None
    catalog_name: Optional[str] = None


@dataclass
class EmpowermentDraft:
    """In-progress empowerment, owned by an EmpowermentBuilder."""

    empowerment: Optional[EmpowermentHeaderDraft] = None
    contract: Optional[DocumentRefDraft] = None
    agent: Optional[AgentDraft] = None
    seller: Optional[CompanyDraft] = None
    buyer: Optional[CompanyDraft] = None
    products: List[EmpowermentProductDraft] = field(default_factory=list)
