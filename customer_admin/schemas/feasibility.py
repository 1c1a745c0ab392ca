"""Feasibility study (타당성 검토 의뢰서) schemas.

These rows use snake_case keys on the wire, unlike the customer endpoints.
"""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class FeasibilityStatus(str, Enum):
    PENDING = "pending"
    IN_REVIEW = "in_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class FeasibilityStudyRequest(BaseModel):
    """POST /api/feasibility-studies/register and PUT /api/feasibility-studies/{id} body."""

    customer_id: int
    request_date: date
    target_completion_date: date | None = None
    project_description: str | None = None
    expected_cost_reduction: float | None = None
    status: FeasibilityStatus = FeasibilityStatus.PENDING
    review_comments: str | None = None

    def to_payload(self) -> dict:
        return self.model_dump(mode="json")


class FeasibilityStudy(FeasibilityStudyRequest):
    """One feasibility study as the backend returns it."""

    model_config = ConfigDict(extra="ignore")

    id: str
    reviewer_id: str | None = None
    review_date: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", "reviewer_id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        return None if value is None else str(value)
