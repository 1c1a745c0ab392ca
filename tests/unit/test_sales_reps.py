"""Unit tests for SalesRepService against a fake PostgREST endpoint.

Tests:
  - create posts a one-row array and asks for the created row back
  - blank optional business fields are sent as null
  - update and delete filter by id=eq.<id>
  - a rejected request raises ApiError with the PostgREST message
"""

from __future__ import annotations

from typing import Any

import pytest

from customer_admin.core.exceptions import ApiError
from customer_admin.forms.base import validate_form
from customer_admin.forms.staff import SalesRepForm
from customer_admin.services.sales_reps import SalesRepService
from tests.conftest import FakeBackend

SUPABASE_URL = "https://proj.supabase.test"
TABLE_PATH = "/rest/v1/sales_reps"


@pytest.fixture
def sales_rep_form() -> SalesRepForm:
    return validate_form(
        SalesRepForm,
        {
            "name": "최담당",
            "phone": "01033334444",
            "email": "choi@rep.test",
            "commission_rate": 5,
            "address": "대구",
            "bank_name": "신한",
            "account_number": "110-000",
        },
    )


@pytest.fixture
def service(backend: FakeBackend) -> SalesRepService:
    return SalesRepService(SUPABASE_URL, "anon-key", transport=backend.transport)


def _created_row(**overrides: Any) -> dict[str, Any]:
    row = {
        "id": "a1",
        "name": "최담당",
        "phone": "010-3333-4444",
        "email": "choi@rep.test",
        "commission_rate": 5,
        "address": "대구",
        "settlement_method": "invoice",
        "bank_name": "신한",
        "account_number": "110-000",
    }
    row.update(overrides)
    return row


class TestCreate:
    """Tests for SalesRepService.create_sales_rep()."""

    @pytest.mark.asyncio
    async def test_posts_array_with_representation(
        self,
        service: SalesRepService,
        backend: FakeBackend,
        sales_rep_form: SalesRepForm,
    ) -> None:
        """The row goes out as a one-element array and the created row is returned."""
        backend.add("POST", TABLE_PATH, [_created_row()], status_code=201)

        created = await service.create_sales_rep(sales_rep_form)

        (request,) = backend.calls
        assert request.headers["prefer"] == "return=representation"
        assert request.headers["apikey"] == "anon-key"
        assert request.headers["authorization"] == "Bearer anon-key"
        body = FakeBackend.body(request)
        assert isinstance(body, list) and len(body) == 1
        assert body[0]["phone"] == "010-3333-4444"
        assert body[0]["settlement_method"] == "invoice"
        assert created is not None and created.id == "a1"
        await service.close()

    @pytest.mark.asyncio
    async def test_blank_business_fields_sent_as_null(
        self,
        service: SalesRepService,
        backend: FakeBackend,
        sales_rep_form: SalesRepForm,
    ) -> None:
        backend.add("POST", TABLE_PATH, [_created_row()], status_code=201)

        await service.create_sales_rep(sales_rep_form)

        (row,) = FakeBackend.body(backend.calls[0])
        for column in (
            "business_number",
            "business_type",
            "business_category",
            "representative",
            "business_address",
        ):
            assert row[column] is None
        await service.close()


class TestUpdateDelete:
    """Tests for the id-filtered PATCH and DELETE."""

    @pytest.mark.asyncio
    async def test_update_filters_by_id(
        self,
        service: SalesRepService,
        backend: FakeBackend,
        sales_rep_form: SalesRepForm,
    ) -> None:
        """PATCH carries id=eq.<id> and a single object body."""
        backend.add("PATCH", TABLE_PATH, None, status_code=204)

        await service.update_sales_rep("a1", sales_rep_form)

        (request,) = backend.calls
        assert request.url.params["id"] == "eq.a1"
        body = FakeBackend.body(request)
        assert isinstance(body, dict)
        assert body["name"] == "최담당"
        await service.close()

    @pytest.mark.asyncio
    async def test_delete_filters_by_id(self, service: SalesRepService, backend: FakeBackend) -> None:
        """DELETE carries id=eq.<id> and no body."""
        backend.add("DELETE", TABLE_PATH, None, status_code=204)

        await service.delete_sales_rep("a1")

        (request,) = backend.calls
        assert request.url.params["id"] == "eq.a1"
        assert request.content == b""
        await service.close()

    @pytest.mark.asyncio
    async def test_rejected_request_raises(
        self, service: SalesRepService, backend: FakeBackend
    ) -> None:
        """A non-2xx answer keeps the PostgREST message and status."""
        backend.add(
            "DELETE",
            TABLE_PATH,
            {"message": "permission denied for table sales_reps"},
            status_code=401,
        )

        with pytest.raises(ApiError) as exc_info:
            await service.delete_sales_rep("a1")

        assert exc_info.value.status_code == 401
        assert "permission denied" in exc_info.value.message
        await service.close()
