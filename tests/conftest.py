"""Shared pytest fixtures for the customer admin console test suite.

Provides:
  - FakeBackend: in-process stand-in for the REST backend and object storage,
    served through httpx.MockTransport; records every request
  - backend / token_store / api_client: a wired client per test
  - make_token: signs a JWT with the given claims
  - sample_customer_data / sample_customer: a FACTORY customer as the
    backend returns it, with two tenant companies and one attachment
  - customer_form_data: valid raw input for CustomerForm

No network access: every HTTP call is answered by FakeBackend.
"""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest
from jose import jwt

from customer_admin.schemas.customer import Customer
from customer_admin.services.api_client import ApiClient
from customer_admin.services.token_store import MemoryTokenStore

API_BASE_URL = "https://api.test"
STORAGE_HOST = "storage.test"


# ---------------------------------------------------------------------------
# Fake backend
# ---------------------------------------------------------------------------


Handler = Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    """Answers requests by (method, path); unknown routes get a 404."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.calls: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        status_code: int = 200,
        handler: Handler | None = None,
    ) -> None:
        if handler is None:

            def handler(request: httpx.Request) -> httpx.Response:
                return httpx.Response(status_code, json=json_body)

        self.routes[(method.upper(), path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def requests(self, method: str, path: str) -> list[httpx.Request]:
        return [
            r for r in self.calls if r.method == method.upper() and r.url.path == path
        ]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content)


def make_token(username: str = "admin", role: str | None = "ADMIN", **claims: Any) -> str:
    """Sign a JWT; the console never verifies the signature."""
    payload: dict[str, Any] = {"username": username, **claims}
    if role is not None:
        payload["role"] = role
    return jwt.encode(payload, "test-secret", algorithm="HS256")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def backend() -> FakeBackend:
    """Fresh fake backend with no routes."""
    return FakeBackend()


@pytest.fixture
def token_store() -> MemoryTokenStore:
    """Token store already holding an admin token."""
    return MemoryTokenStore(make_token())


@pytest.fixture
def api_client(backend: FakeBackend, token_store: MemoryTokenStore) -> ApiClient:
    """ApiClient whose transport is the fake backend."""
    return ApiClient(API_BASE_URL, token_store, transport=backend.transport)


@pytest.fixture
def sample_customer_data() -> dict[str, Any]:
    """GET /api/customer/7 response data (camelCase, as on the wire)."""
    return {
        "customerId": 7,
        "companyName": "한빛정밀",
        "representative": "김대표",
        "businessNumber": "123-45-67890",
        "businessType": "제조업",
        "businessItem": "금속가공",
        "businessAddress": "경기도 안산시 단원구 1",
        "managerName": "이담당",
        "companyPhone": "031-123-4567",
        "email": "contact@hanbit.test",
        "phoneNumber": "010-1234-5678",
        "powerPlannerId": "hanbit",
        "powerPlannerPassword": "pw",
        "buildingType": "FACTORY",
        "januaryElectricUsage": 12000,
        "augustElectricUsage": 15000,
        "salesmanId": 3,
        "engineerId": None,
        "projectCost": 50000000,
        "electricitySavingRate": 12.5,
        "subsidy": 10000000,
        "projectPeriod": "2026-01 ~ 2026-06",
        "progressStatus": "IN_PROGRESS",
        "tenantFactory": False,
        "tenantCompanyList": [
            {"id": 11, "name": "A상사", "januaryUsage": 100, "augustUsage": 120},
            {"id": 12, "name": "B물산", "januaryUsage": 0, "augustUsage": 80},
        ],
        "customerFileList": [
            {
                "fileId": 501,
                "fileKey": "customers/7/license.pdf",
                "category": "BUSINESS_LICENSE",
                "originalFileName": "license.pdf",
                "extension": "pdf",
                "contentType": "application/pdf",
                "size": 2048,
            }
        ],
    }


@pytest.fixture
def sample_customer(sample_customer_data: dict[str, Any]) -> Customer:
    return Customer.model_validate(sample_customer_data)


@pytest.fixture
def customer_form_data() -> dict[str, Any]:
    """Valid CustomerForm input for a shared FACTORY."""
    return {
        "company_name": "새공장",
        "representative": "박대표",
        "business_number": "2345678901",
        "business_type": "제조업",
        "business_item": "플라스틱",
        "business_address": "충청남도 천안시 1",
        "building_type": "FACTORY",
        "tenant_factory": False,
        "company_phone": "0415551234",
        "email": "office@new.test",
        "phone_number": "01098765432",
        "power_planner_id": "newplant",
        "power_planner_password": "secret",
    }
