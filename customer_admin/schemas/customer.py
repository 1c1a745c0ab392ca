"""Customer (수용가) request/response schemas."""

from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator

from customer_admin.schemas.base import CamelModel
from customer_admin.schemas.files import AttachmentFile, CustomerFile


class BuildingType(str, Enum):
    FACTORY = "FACTORY"
    KNOWLEDGE_INDUSTRY_CENTER = "KNOWLEDGE_INDUSTRY_CENTER"
    BUILDING = "BUILDING"
    MIXED_USE_COMPLEX = "MIXED_USE_COMPLEX"
    APARTMENT_COMPLEX = "APARTMENT_COMPLEX"
    SCHOOL = "SCHOOL"
    HOTEL = "HOTEL"
    OTHER = "OTHER"


class ProgressStatus(str, Enum):
    REQUESTED = "REQUESTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETE = "COMPLETE"
    REJECTED = "REJECTED"


OPEN_PROGRESS_STATUSES = frozenset({ProgressStatus.REQUESTED, ProgressStatus.IN_PROGRESS})


class TenantCompanyInput(CamelModel):
    """A tenant company row as sent to the backend (no id)."""

    name: str
    january_usage: float
    august_usage: float

    @property
    def is_valid(self) -> bool:
        """Named, with at least one usage figure above zero."""
        return bool(self.name.strip()) and (self.january_usage > 0 or self.august_usage > 0)


class TenantCompany(TenantCompanyInput):
    """A leasing company inside a factory building.

    Persisted rows have positive ids; rows staged in the console carry a
    negative placeholder id until the backend assigns a real one.
    """

    id: int

    @property
    def is_persisted(self) -> bool:
        return self.id > 0

    def to_input(self) -> TenantCompanyInput:
        return TenantCompanyInput(
            name=self.name,
            january_usage=self.january_usage,
            august_usage=self.august_usage,
        )


class CustomerFields(CamelModel):
    """Scalar business fields shared by the record and its requests."""

    company_name: str
    representative: str
    business_number: str
    business_type: str
    business_item: str
    business_address: str
    manager_name: str = ""
    company_phone: str
    email: str
    phone_number: str
    power_planner_id: str
    power_planner_password: str
    building_type: BuildingType
    january_electric_usage: float = 0
    august_electric_usage: float = 0
    salesman_id: int | None = None
    engineer_id: int | None = None
    project_cost: float = 0
    electricity_saving_rate: float = 0
    subsidy: float = 0
    project_period: str = ""
    progress_status: ProgressStatus = ProgressStatus.REQUESTED

    @field_validator("manager_name", "project_period", mode="before")
    @classmethod
    def _null_as_blank(cls, value):
        return "" if value is None else value


class Customer(CustomerFields):
    """GET /api/customer/{id} response body."""

    customer_id: int | None = None
    tenant_factory: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tenant_company_list: list[TenantCompany] = Field(default_factory=list)
    customer_file_list: list[CustomerFile] = Field(default_factory=list)

    def scalar_fields(self) -> dict:
        """The CustomerFields part of the record, keyed by attribute name."""
        return {name: getattr(self, name) for name in CustomerFields.model_fields}


class CustomerCreateRequest(CustomerFields):
    """POST /api/customer request body."""

    tenant_factory: bool = False
    tenant_company_list: list[TenantCompanyInput] = Field(default_factory=list)
    attachment_file_list: list[AttachmentFile] = Field(default_factory=list)


class CustomerUpdateRequest(CustomerFields):
    """PATCH /api/customer/{id} request body (partial update)."""

    is_tenant_factory: bool = False
    new_tenant_company_list: list[TenantCompanyInput] = Field(default_factory=list)
    delete_tenant_company_list: list[int] = Field(default_factory=list)
    new_attachment_file_list: list[AttachmentFile] = Field(default_factory=list)
    delete_attachment_file_list: list[int] = Field(default_factory=list)

    @classmethod
    def from_customer(cls, customer: Customer, **changes) -> "CustomerUpdateRequest":
        """Full-record update payload, with the given fields overridden."""
        values = customer.scalar_fields()
        values["is_tenant_factory"] = customer.tenant_factory
        values.update(changes)
        return cls(**values)


class CustomerListItem(CamelModel):
    """Single customer row in GET /api/home/admin-customer."""

    customer_id: int
    company_name: str
    representative: str = ""
    building_type: BuildingType | None = None
    salesman_name: str | None = None
    engineer_name: str | None = None
    progress_status: ProgressStatus | None = None
    company_phone: str = ""
    company_email: str = ""


class CompanyNameCheck(CamelModel):
    """GET /api/customer/check/company-name response data."""

    possible: bool
    salesman_name: str | None = None
    salesman_phone_number: str | None = None
    salesman_email: str | None = None
