"""Sales reps stored in the Supabase ``sales_reps`` table.

Talks to the PostgREST endpoint Supabase exposes under ``/rest/v1``,
authenticated with the project's anon key. Rows use snake_case columns
and string ids.
"""

from typing import Any

import httpx
import structlog

from customer_admin.core.endpoints import SALES_REPS_TABLE
from customer_admin.core.exceptions import ApiError, NetworkError
from customer_admin.forms.staff import SalesRepForm
from customer_admin.schemas.staff import SalesRep
from customer_admin.services.api_client import parse_response

logger = structlog.get_logger(__name__)


class SalesRepService:
    """CRUD over the sales_reps table."""

    def __init__(
        self,
        supabase_url: str,
        anon_key: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            supabase_url: Project URL, e.g. "https://xyz.supabase.co".
            anon_key: Public anon key, sent as both ``apikey`` and bearer token.
            timeout: HTTP timeout in seconds.
            transport: Optional httpx transport (tests plug a MockTransport here).
        """
        self.rest_url = f"{supabase_url.rstrip('/')}/rest/v1"
        self._anon_key = anon_key
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.rest_url,
                timeout=self._timeout,
                transport=self._transport,
                headers={
                    "Content-Type": "application/json",
                    "apikey": self._anon_key,
                    "Authorization": f"Bearer {self._anon_key}",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def _make_request(
        self,
        method: str,
        params: dict[str, str],
        json_data: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        client = await self._get_client()
        try:
            response = await client.request(
                method,
                f"/{SALES_REPS_TABLE}",
                params=params,
                json=json_data,
                headers=headers,
            )
        except httpx.RequestError as e:
            logger.error("sales_rep_request_failed", method=method, error=str(e))
            raise NetworkError() from e

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("message") if isinstance(body, dict) else None
            logger.error(
                "sales_rep_request_rejected",
                method=method,
                status_code=response.status_code,
                error=message,
            )
            raise ApiError(
                message or f"HTTP {response.status_code}: {response.reason_phrase}",
                status_code=response.status_code,
                payload=body,
            )

        return response.json() if response.content else None

    async def list_sales_reps(self) -> list[SalesRep]:
        """Newest first."""
        rows = await self._make_request(
            "GET", {"select": "*", "order": "created_at.desc"}
        )
        return [parse_response(SalesRep, row) for row in rows or []]

    async def create_sales_rep(self, form: SalesRepForm) -> SalesRep | None:
        row = form.to_row()
        created = await self._make_request(
            "POST",
            {},
            json_data=[row.model_dump(mode="json")],
            headers={"Prefer": "return=representation"},
        )
        logger.info("sales_rep_created", name=row.name)
        return parse_response(SalesRep, created[0]) if created else None

    async def update_sales_rep(self, sales_rep_id: str, form: SalesRepForm) -> None:
        await self._make_request(
            "PATCH",
            {"id": f"eq.{sales_rep_id}"},
            json_data=form.to_row().model_dump(mode="json"),
        )
        logger.info("sales_rep_updated", sales_rep_id=sales_rep_id)

    async def delete_sales_rep(self, sales_rep_id: str) -> None:
        await self._make_request("DELETE", {"id": f"eq.{sales_rep_id}"})
        logger.info("sales_rep_deleted", sales_rep_id=sales_rep_id)
