"""Salesman (영업자) and engineer (기술사) accounts on the backend."""

import structlog

from customer_admin.core.endpoints import EngineerEndpoints, SalesmanEndpoints
from customer_admin.forms.staff import EngineerForm, SalesmanForm
from customer_admin.schemas.staff import (
    Engineer,
    EngineerRequest,
    Salesman,
    SalesmanRequest,
    SalesmanUpdateRequest,
)
from customer_admin.services.api_client import ApiClient, parse_response, unwrap_data, unwrap_list

logger = structlog.get_logger(__name__)


class SalesmanService:
    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_salesmen(self) -> list[Salesman]:
        body = await self._api.get(SalesmanEndpoints.LIST)
        return [parse_response(Salesman, row) for row in unwrap_list(body, "adminSalesmanList")]

    async def get_salesman(self, salesman_id: int) -> Salesman:
        body = await self._api.get(SalesmanEndpoints.detail(salesman_id))
        return parse_response(Salesman, unwrap_data(body))

    async def create_salesman(self, form: SalesmanForm) -> SalesmanRequest:
        request = form.to_request()
        await self._api.post(SalesmanEndpoints.CREATE, request.to_payload())
        logger.info("salesman_created", username=request.username)
        return request

    async def update_salesman(self, salesman_id: int, form: SalesmanForm) -> SalesmanUpdateRequest:
        """Full replacement of the account (PUT)."""
        request = SalesmanUpdateRequest.from_request(form.to_request())
        await self._api.put(SalesmanEndpoints.detail(salesman_id), request.to_payload())
        logger.info("salesman_updated", salesman_id=salesman_id)
        return request

    async def delete_salesman(self, salesman_id: int) -> None:
        await self._api.delete(SalesmanEndpoints.detail(salesman_id))
        logger.info("salesman_deleted", salesman_id=salesman_id)


class EngineerService:
    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def list_engineers(self) -> list[Engineer]:
        body = await self._api.get(EngineerEndpoints.LIST)
        return [parse_response(Engineer, row) for row in unwrap_list(body, "adminEngineerList")]

    async def get_engineer(self, engineer_id: int) -> Engineer:
        body = await self._api.get(EngineerEndpoints.detail(engineer_id))
        return parse_response(Engineer, unwrap_data(body))

    async def create_engineer(self, form: EngineerForm) -> EngineerRequest:
        request = form.to_request()
        await self._api.post(EngineerEndpoints.CREATE, request.to_payload())
        logger.info("engineer_created", username=request.username)
        return request

    async def update_engineer(self, engineer_id: int, form: EngineerForm) -> EngineerRequest:
        request = form.to_request()
        await self._api.put(EngineerEndpoints.detail(engineer_id), request.to_payload())
        logger.info("engineer_updated", engineer_id=engineer_id)
        return request

    async def delete_engineer(self, engineer_id: int) -> None:
        await self._api.delete(EngineerEndpoints.detail(engineer_id))
        logger.info("engineer_deleted", engineer_id=engineer_id)
