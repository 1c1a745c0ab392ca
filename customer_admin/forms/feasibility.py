"""Feasibility study (타당성 검토 의뢰서) form."""

from datetime import date
from typing import ClassVar

from pydantic import Field, ValidationInfo, field_validator

from customer_admin.forms.base import EntityForm
from customer_admin.schemas.feasibility import (
    FeasibilityStatus,
    FeasibilityStudy,
    FeasibilityStudyRequest,
)


class FeasibilityStudyForm(EntityForm):
    field_messages: ClassVar[dict[str, str]] = {
        "request_date": "신청일을 입력해주세요",
        "target_completion_date": "올바른 날짜를 입력해주세요",
        "expected_cost_reduction": "예상 절감액을 올바르게 입력해주세요",
        "status": "진행 상태를 선택해주세요",
    }

    request_date: date = Field(default_factory=date.today)
    target_completion_date: date | None = None
    project_description: str = ""
    expected_cost_reduction: float | None = Field(default=None, ge=0)
    status: FeasibilityStatus = FeasibilityStatus.PENDING
    review_comments: str = ""

    @field_validator("target_completion_date", "expected_cost_reduction", mode="before")
    @classmethod
    def _blank_as_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("target_completion_date")
    @classmethod
    def _completion_after_request(cls, value: date | None, info: ValidationInfo) -> date | None:
        requested = info.data.get("request_date")
        if value is not None and requested is not None and value < requested:
            raise ValueError("완료 목표일은 신청일 이후여야 합니다")
        return value

    @classmethod
    def initial_from(cls, study: FeasibilityStudy) -> dict:
        """Prefill values for editing an existing study."""
        return {
            "request_date": study.request_date,
            "target_completion_date": study.target_completion_date,
            "project_description": study.project_description or "",
            "expected_cost_reduction": study.expected_cost_reduction,
            "status": study.status,
            "review_comments": study.review_comments or "",
        }

    def to_request(self, customer_id: int) -> FeasibilityStudyRequest:
        """Blank text and a zero reduction are stored as null."""
        return FeasibilityStudyRequest(
            customer_id=customer_id,
            request_date=self.request_date,
            target_completion_date=self.target_completion_date,
            project_description=self.project_description.strip() or None,
            expected_cost_reduction=self.expected_cost_reduction or None,
            status=self.status,
            review_comments=self.review_comments.strip() or None,
        )
