"""Feasibility studies (타당성 검토 의뢰서) attached to a customer.

A customer has at most one study. Saving from the customer page updates
the existing study when there is one and registers a new one otherwise.
"""

import structlog

from customer_admin.core.endpoints import FeasibilityStudyEndpoints
from customer_admin.core.exceptions import ApiError
from customer_admin.forms.feasibility import FeasibilityStudyForm
from customer_admin.schemas.feasibility import FeasibilityStudy, FeasibilityStudyRequest
from customer_admin.services.api_client import ApiClient, parse_response, unwrap_data, unwrap_list

logger = structlog.get_logger(__name__)


class FeasibilityStudyService:
    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_studies(self) -> list[FeasibilityStudy]:
        body = await self._api.get(FeasibilityStudyEndpoints.LIST)
        return [
            parse_response(FeasibilityStudy, row)
            for row in unwrap_list(body, "feasibilityStudyList")
        ]

    async def get_study(self, study_id: str) -> FeasibilityStudy:
        body = await self._api.get(FeasibilityStudyEndpoints.detail(study_id))
        return parse_response(FeasibilityStudy, unwrap_data(body))

    async def get_for_customer(self, customer_id: int) -> FeasibilityStudy | None:
        """The customer's study, or None when none has been requested yet."""
        try:
            body = await self._api.get(FeasibilityStudyEndpoints.by_customer(customer_id))
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        data = unwrap_data(body)
        if not data:
            return None
        return parse_response(FeasibilityStudy, data)

    async def create_study(
        self, customer_id: int, form: FeasibilityStudyForm
    ) -> FeasibilityStudyRequest:
        request = form.to_request(customer_id)
        await self._api.post(FeasibilityStudyEndpoints.CREATE, request.to_payload())
        logger.info("feasibility_study_created", customer_id=customer_id)
        return request

    async def update_study(
        self, study_id: str, customer_id: int, form: FeasibilityStudyForm
    ) -> FeasibilityStudyRequest:
        request = form.to_request(customer_id)
        await self._api.put(FeasibilityStudyEndpoints.detail(study_id), request.to_payload())
        logger.info("feasibility_study_updated", study_id=study_id, customer_id=customer_id)
        return request

    async def delete_study(self, study_id: str) -> None:
        await self._api.delete(FeasibilityStudyEndpoints.detail(study_id))
        logger.info("feasibility_study_deleted", study_id=study_id)

    async def save_for_customer(
        self,
        customer_id: int,
        form: FeasibilityStudyForm,
        existing: FeasibilityStudy | None = None,
    ) -> FeasibilityStudyRequest:
        """Update the customer's study if one exists, otherwise register it."""
        if existing is None:
            existing = await self.get_for_customer(customer_id)
        if existing is None:
            return await self.create_study(customer_id, form)
        return await self.update_study(existing.id, customer_id, form)
