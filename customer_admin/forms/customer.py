"""Customer (수용가) create form.

The multi-tab form (basic / contact / project) is one model here.
Tenant rows and staged attachments are collected alongside the form and
bundled into a single create request.
"""

from typing import Any, ClassVar, Sequence

from pydantic import Field, ValidationError, field_validator

from customer_admin.core.exceptions import FormValidationError
from customer_admin.forms.base import (
    EntityForm,
    check_business_number,
    check_email,
    check_phone,
)
from customer_admin.schemas.customer import (
    BuildingType,
    CustomerCreateRequest,
    ProgressStatus,
    TenantCompanyInput,
)
from customer_admin.schemas.files import AttachmentFile

TENANT_REQUIRED_MESSAGE = "임차 공장의 경우 임차 업체를 1개 이상 입력해주세요 (업체명, 1월 또는 8월 사용량)"
TENANT_ROW_MESSAGE = "임차 업체명과 1월, 8월 사용량을 올바르게 입력해주세요"


class CustomerForm(EntityForm):
    field_messages: ClassVar[dict[str, str]] = {
        "company_name": "업체명을 입력해주세요",
        "representative": "대표자를 입력해주세요",
        "business_number": "사업자등록번호를 입력해주세요",
        "business_type": "업종을 입력해주세요",
        "business_item": "업태를 입력해주세요",
        "business_address": "사업장 주소를 입력해주세요",
        "company_phone": "회사전화를 입력해주세요",
        "email": "올바른 이메일을 입력해주세요",
        "phone_number": "휴대전화를 입력해주세요",
        "power_planner_id": "한전파워플래너 아이디를 입력해주세요",
        "power_planner_password": "한전파워플래너 패스워드를 입력해주세요",
        "building_type": "건물형태를 선택해주세요",
        "progress_status": "진행상황을 선택해주세요",
    }

    # basic
    company_name: str = Field(min_length=1)
    representative: str = Field(min_length=1)
    business_number: str
    business_type: str = Field(min_length=1)
    business_item: str = Field(min_length=1)
    business_address: str = Field(min_length=1)
    building_type: BuildingType = BuildingType.FACTORY
    tenant_factory: bool = False
    january_electric_usage: float = Field(default=0, ge=0)
    august_electric_usage: float = Field(default=0, ge=0)

    # contact
    manager_name: str = ""
    company_phone: str
    email: str
    phone_number: str
    power_planner_id: str = Field(min_length=1)
    power_planner_password: str = Field(min_length=1)

    # project
    salesman_id: int | None = None
    engineer_id: int | None = None
    progress_status: ProgressStatus = ProgressStatus.REQUESTED
    project_cost: float = Field(default=0, ge=0)
    electricity_saving_rate: float = Field(default=0, ge=0)
    subsidy: float = Field(default=0, ge=0)
    project_period: str = ""

    @field_validator("business_number")
    @classmethod
    def _business_number(cls, value: str) -> str:
        return check_business_number(value)

    @field_validator("company_phone")
    @classmethod
    def _company_phone(cls, value: str) -> str:
        return check_phone(value, "회사전화를 입력해주세요")

    @field_validator("phone_number")
    @classmethod
    def _phone_number(cls, value: str) -> str:
        return check_phone(value, "휴대전화를 입력해주세요")

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email(value)

    @property
    def needs_tenant_companies(self) -> bool:
        """A shared (not self-occupied) factory must list its tenant companies."""
        return self.building_type == BuildingType.FACTORY and not self.tenant_factory

    def to_create_request(
        self,
        tenant_rows: Sequence[TenantCompanyInput] = (),
        attachments: Sequence[AttachmentFile] = (),
    ) -> CustomerCreateRequest:
        """Bundle the form, its tenant rows and uploaded attachments into one request.

        Blank tenant rows are dropped. For a shared factory at least one valid
        row must remain; for a self-occupied factory (or any other building
        type) the tenant list is always sent empty.
        """
        tenant_company_list: list[TenantCompanyInput] = []
        if self.needs_tenant_companies:
            tenant_company_list = [row for row in tenant_rows if row.is_valid]
            if not tenant_company_list:
                raise FormValidationError({"tenant_company_list": TENANT_REQUIRED_MESSAGE})

        return CustomerCreateRequest(
            **self.model_dump(),
            tenant_company_list=tenant_company_list,
            attachment_file_list=list(attachments),
        )


def parse_tenant_rows(raw_rows: Any) -> list[TenantCompanyInput]:
    """Read tenant rows entered as plain dicts.

    Every malformed row is reported under ``tenant_company_list[<index>]``.
    """
    if not isinstance(raw_rows, list):
        raise FormValidationError({"tenant_company_list": TENANT_ROW_MESSAGE})
    rows: list[TenantCompanyInput] = []
    errors: dict[str, str] = {}
    for index, raw in enumerate(raw_rows):
        try:
            rows.append(TenantCompanyInput.model_validate(raw))
        except ValidationError:
            errors[f"tenant_company_list[{index}]"] = TENANT_ROW_MESSAGE
    if errors:
        raise FormValidationError(errors)
    return rows
