"""Salesman (영업자), engineer (기술사) and sales rep schemas."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from customer_admin.schemas.base import CamelModel


class SettlementMethod(str, Enum):
    INVOICE = "INVOICE"
    WITHHOLDING_TAX = "WITHHOLDING_TAX"


# ---------------------------------------------------------------------------
# Salesman (REST backend)
# ---------------------------------------------------------------------------


class Salesman(CamelModel):
    """Single row of GET /api/home/admin-salesman."""

    id: int
    user_id: str = ""
    user_pw: str = ""
    name: str | None = None
    phone_number: str = ""
    email: str = ""
    address: str = ""
    commission_rate: float = 0
    settlement_method: SettlementMethod = SettlementMethod.INVOICE
    bank_name: str = ""
    bank_account: str = ""
    business_number: str = ""
    business_type: str = Field(default="", alias="business_type")
    business_category: str = Field(default="", alias="business_category")
    representative: str = ""
    business_address: str = Field(default="", alias="business_address")


class SalesmanRequest(CamelModel):
    """POST /api/salesman/register request body."""

    username: str
    password: str
    name: str
    phone: str
    email: str
    address: str
    commission_rate: float
    settlement_method: SettlementMethod
    bank_name: str
    bank_account: str
    business_number: str = ""
    representative: str = ""
    business_item: str = ""
    business_type: str = ""
    business_address: str = ""


class SalesmanUpdateRequest(CamelModel):
    """PUT /api/salesman/{id} request body."""

    username: str
    password: str
    salesman_name: str
    salesman_phone: str
    salesman_email: str
    salesman_address: str
    commission_rate: float
    settlement_method: SettlementMethod
    bank_name: str
    bank_account: str
    business_number: str = ""
    representative: str = ""
    business_item: str = ""
    business_type: str = ""
    business_address: str = ""

    @classmethod
    def from_request(cls, request: SalesmanRequest) -> "SalesmanUpdateRequest":
        return cls(
            username=request.username,
            password=request.password,
            salesman_name=request.name,
            salesman_phone=request.phone,
            salesman_email=request.email,
            salesman_address=request.address,
            commission_rate=request.commission_rate,
            settlement_method=request.settlement_method,
            bank_name=request.bank_name,
            bank_account=request.bank_account,
            business_number=request.business_number,
            representative=request.representative,
            business_item=request.business_item,
            business_type=request.business_type,
            business_address=request.business_address,
        )


# ---------------------------------------------------------------------------
# Engineer (REST backend)
# ---------------------------------------------------------------------------


class Engineer(CamelModel):
    """Single row of GET /api/home/admin-engineer."""

    id: int
    user_id: str = ""
    user_pw: str = ""
    name: str = ""
    phone_number: str = ""
    email: str = ""
    address: str = ""


class EngineerRequest(CamelModel):
    """POST /api/engineer/register request body."""

    username: str
    password: str
    name: str
    phone: str
    email: str
    address: str


# ---------------------------------------------------------------------------
# Sales rep (Supabase sales_reps table, snake_case columns)
# ---------------------------------------------------------------------------


class SalesRepSettlement(str, Enum):
    INVOICE = "invoice"
    WITHHOLDING = "withholding"


class SalesRepFields(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    phone: str
    email: str
    commission_rate: float
    address: str
    settlement_method: SalesRepSettlement
    bank_name: str
    account_number: str
    business_number: str | None = None
    business_type: str | None = None
    business_category: str | None = None
    representative: str | None = None
    business_address: str | None = None


class SalesRep(SalesRepFields):
    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
