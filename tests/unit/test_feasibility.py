"""Unit tests for FeasibilityStudyForm and FeasibilityStudyService.

Tests:
  - the request date defaults to today and blank optional fields become null
  - a completion date before the request date is a field error
  - get_for_customer treats a 404 or an empty payload as "no study"
  - save_for_customer registers a new study or updates the existing one
  - a malformed study row raises ApiError
"""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from customer_admin.core.exceptions import ApiError, FormValidationError
from customer_admin.forms.base import validate_form
from customer_admin.forms.feasibility import FeasibilityStudyForm
from customer_admin.schemas.feasibility import FeasibilityStatus, FeasibilityStudy
from customer_admin.services.api_client import ApiClient
from customer_admin.services.feasibility import FeasibilityStudyService
from tests.conftest import FakeBackend

BY_CUSTOMER_PATH = "/api/feasibility-studies/customer/7"


def _study_row(**overrides: Any) -> dict[str, Any]:
    row = {
        "id": "f-1",
        "customer_id": 7,
        "request_date": "2024-03-02",
        "target_completion_date": "2024-04-30",
        "project_description": "수전 설비 교체",
        "expected_cost_reduction": 1200000,
        "status": "in_review",
        "reviewer_id": None,
        "review_comments": None,
        "created_at": "2024-03-02T09:00:00",
    }
    row.update(overrides)
    return row


class TestFeasibilityStudyForm:
    """Tests for FeasibilityStudyForm."""

    def test_defaults(self) -> None:
        form = validate_form(FeasibilityStudyForm, {})

        assert form.request_date == date.today()
        assert form.status is FeasibilityStatus.PENDING

    def test_blank_fields_sent_as_null(self) -> None:
        """Blank text, a blank date and a zero reduction all go out as null."""
        form = validate_form(
            FeasibilityStudyForm,
            {
                "request_date": "2024-03-02",
                "target_completion_date": "",
                "project_description": "  ",
                "expected_cost_reduction": 0,
            },
        )

        payload = form.to_request(7).to_payload()

        assert payload["customer_id"] == 7
        assert payload["request_date"] == "2024-03-02"
        assert payload["target_completion_date"] is None
        assert payload["project_description"] is None
        assert payload["expected_cost_reduction"] is None
        assert payload["status"] == "pending"

    def test_completion_before_request_rejected(self) -> None:
        with pytest.raises(FormValidationError) as exc_info:
            validate_form(
                FeasibilityStudyForm,
                {"request_date": "2024-03-02", "target_completion_date": "2024-03-01"},
            )

        assert "신청일 이후" in exc_info.value.field_errors["target_completion_date"]

    def test_initial_from_round_trips(self) -> None:
        study = FeasibilityStudy.model_validate(_study_row())

        form = validate_form(FeasibilityStudyForm, FeasibilityStudyForm.initial_from(study))

        assert form.status is FeasibilityStatus.IN_REVIEW
        assert form.expected_cost_reduction == 1200000
        assert form.project_description == "수전 설비 교체"


class TestFeasibilityStudyService:
    """Tests for FeasibilityStudyService."""

    @pytest.mark.asyncio
    async def test_missing_study_is_none(self, api_client: ApiClient, backend: FakeBackend) -> None:
        """The fake backend answers unknown routes with 404."""
        assert await FeasibilityStudyService(api_client).get_for_customer(7) is None

    @pytest.mark.asyncio
    async def test_empty_payload_is_none(self, api_client: ApiClient, backend: FakeBackend) -> None:
        backend.add("GET", BY_CUSTOMER_PATH, {"status": 200, "data": None})

        assert await FeasibilityStudyService(api_client).get_for_customer(7) is None

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, api_client: ApiClient, backend: FakeBackend) -> None:
        backend.add("GET", BY_CUSTOMER_PATH, {"message": "boom"}, status_code=500)

        with pytest.raises(ApiError):
            await FeasibilityStudyService(api_client).get_for_customer(7)

    @pytest.mark.asyncio
    async def test_save_registers_when_absent(
        self, api_client: ApiClient, backend: FakeBackend
    ) -> None:
        backend.add("POST", "/api/feasibility-studies/register", {"status": 200})
        form = validate_form(FeasibilityStudyForm, {"request_date": "2024-03-02"})

        await FeasibilityStudyService(api_client).save_for_customer(7, form)

        (post,) = backend.requests("POST", "/api/feasibility-studies/register")
        assert FakeBackend.body(post)["customer_id"] == 7
        assert backend.requests("PUT", "/api/feasibility-studies/f-1") == []

    @pytest.mark.asyncio
    async def test_save_updates_existing(self, api_client: ApiClient, backend: FakeBackend) -> None:
        backend.add("GET", BY_CUSTOMER_PATH, {"status": 200, "data": _study_row()})
        backend.add("PUT", "/api/feasibility-studies/f-1", {"status": 200})
        form = validate_form(
            FeasibilityStudyForm, {"request_date": "2024-03-02", "status": "approved"}
        )

        await FeasibilityStudyService(api_client).save_for_customer(7, form)

        (put,) = backend.requests("PUT", "/api/feasibility-studies/f-1")
        assert FakeBackend.body(put)["status"] == "approved"
        assert backend.requests("POST", "/api/feasibility-studies/register") == []

    @pytest.mark.asyncio
    async def test_list_and_delete(self, api_client: ApiClient, backend: FakeBackend) -> None:
        backend.add(
            "GET",
            "/api/feasibility-studies",
            {"status": 200, "data": {"feasibilityStudyList": [_study_row(id=3)]}},
        )
        backend.add("DELETE", "/api/feasibility-studies/3", {"status": 200})
        service = FeasibilityStudyService(api_client)

        (study,) = await service.list_studies()
        await service.delete_study(study.id)

        assert study.id == "3"
        assert len(backend.requests("DELETE", "/api/feasibility-studies/3")) == 1

    @pytest.mark.asyncio
    async def test_malformed_row_raises_api_error(
        self, api_client: ApiClient, backend: FakeBackend
    ) -> None:
        backend.add("GET", "/api/feasibility-studies/f-1", {"data": _study_row(status="unknown")})

        with pytest.raises(ApiError):
            await FeasibilityStudyService(api_client).get_study("f-1")
