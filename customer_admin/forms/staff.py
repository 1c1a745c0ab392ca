"""Salesman, engineer and sales rep forms."""

from typing import ClassVar

from pydantic import Field, field_validator

from customer_admin.forms.base import (
    EntityForm,
    check_business_number,
    check_email,
    check_phone,
    check_username,
)
from customer_admin.schemas.staff import (
    EngineerRequest,
    Salesman,
    SalesmanRequest,
    SalesRepFields,
    SalesRepSettlement,
    SettlementMethod,
)


class SalesmanForm(EntityForm):
    field_messages: ClassVar[dict[str, str]] = {
        "username": "아이디를 입력해주세요",
        "password": "비밀번호를 입력해주세요",
        "salesman_name": "이름을 입력해주세요",
        "salesman_phone": "연락처를 입력해주세요",
        "salesman_email": "올바른 이메일을 입력해주세요",
        "salesman_address": "주소를 입력해주세요",
        "commission_rate": "수수료율을 입력해주세요",
        "settlement_method": "정산 방식을 선택해주세요",
        "bank_name": "은행명을 입력해주세요",
        "bank_account": "계좌번호를 입력해주세요",
    }

    username: str
    password: str = Field(min_length=1)
    salesman_name: str = Field(min_length=1)
    salesman_phone: str
    salesman_email: str
    salesman_address: str = Field(min_length=1)
    commission_rate: float = Field(ge=0)
    settlement_method: SettlementMethod = SettlementMethod.INVOICE
    bank_name: str = Field(min_length=1)
    bank_account: str = Field(min_length=1)
    business_number: str = ""
    representative: str = ""
    business_item: str = ""
    business_type: str = ""
    business_address: str = ""

    @field_validator("username")
    @classmethod
    def _username(cls, value: str) -> str:
        return check_username(value)

    @field_validator("salesman_phone")
    @classmethod
    def _phone(cls, value: str) -> str:
        return check_phone(value, "연락처를 입력해주세요")

    @field_validator("salesman_email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("business_number")
    @classmethod
    def _business_number(cls, value: str) -> str:
        return check_business_number(value, required=False)

    @classmethod
    def initial_from(cls, salesman: Salesman) -> dict:
        """Prefill values for editing an existing salesman."""
        return {
            "username": salesman.user_id,
            "password": salesman.user_pw,
            "salesman_name": salesman.name or "",
            "salesman_phone": salesman.phone_number,
            "salesman_email": salesman.email,
            "salesman_address": salesman.address,
            "commission_rate": salesman.commission_rate,
            "settlement_method": salesman.settlement_method,
            "bank_name": salesman.bank_name,
            "bank_account": salesman.bank_account,
            "business_number": salesman.business_number,
            "representative": salesman.representative,
            "business_item": salesman.business_category,
            "business_type": salesman.business_type,
            "business_address": salesman.business_address,
        }

    def to_request(self) -> SalesmanRequest:
        return SalesmanRequest(
            username=self.username,
            password=self.password,
            name=self.salesman_name,
            phone=self.salesman_phone,
            email=self.salesman_email,
            address=self.salesman_address,
            commission_rate=self.commission_rate,
            settlement_method=self.settlement_method,
            bank_name=self.bank_name,
            bank_account=self.bank_account,
            business_number=self.business_number,
            representative=self.representative,
            business_item=self.business_item,
            business_type=self.business_type,
            business_address=self.business_address,
        )


class EngineerForm(EntityForm):
    field_messages: ClassVar[dict[str, str]] = {
        "username": "아이디를 입력해주세요",
        "password": "비밀번호를 입력해주세요",
        "name": "이름을 입력해주세요",
        "phone": "연락처를 입력해주세요",
        "email": "올바른 이메일을 입력해주세요",
        "address": "주소를 입력해주세요",
    }

    username: str
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)
    phone: str
    email: str
    address: str = Field(min_length=1)

    @field_validator("username")
    @classmethod
    def _username(cls, value: str) -> str:
        return check_username(value)

    @field_validator("phone")
    @classmethod
    def _phone(cls, value: str) -> str:
        return check_phone(value, "연락처를 입력해주세요")

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email(value)

    def to_request(self) -> EngineerRequest:
        return EngineerRequest(**self.model_dump())


class SalesRepForm(EntityForm):
    field_messages: ClassVar[dict[str, str]] = {
        "name": "이름을 입력해주세요",
        "phone": "연락처를 입력해주세요",
        "email": "올바른 이메일을 입력해주세요",
        "commission_rate": "수수료율은 0에서 100 사이여야 합니다",
        "address": "주소를 입력해주세요",
        "settlement_method": "정산 방식을 선택해주세요",
        "bank_name": "은행명을 입력해주세요",
        "account_number": "계좌번호를 입력해주세요",
    }

    name: str = Field(min_length=1)
    phone: str
    email: str
    commission_rate: float = Field(default=0, ge=0, le=100)
    address: str = Field(min_length=1)
    settlement_method: SalesRepSettlement = SalesRepSettlement.INVOICE
    bank_name: str = Field(min_length=1)
    account_number: str = Field(min_length=1)
    business_number: str = ""
    business_type: str = ""
    business_category: str = ""
    representative: str = ""
    business_address: str = ""

    @field_validator("phone")
    @classmethod
    def _phone(cls, value: str) -> str:
        return check_phone(value, "연락처를 입력해주세요")

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("business_number")
    @classmethod
    def _business_number(cls, value: str) -> str:
        return check_business_number(value, required=False)

    def to_row(self) -> SalesRepFields:
        """Optional business fields are stored as NULL when left blank."""
        values = self.model_dump()
        for key in ("business_number", "business_type", "business_category", "representative", "business_address"):
            values[key] = values[key] or None
        return SalesRepFields(**values)
