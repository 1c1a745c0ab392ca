"""Thin async HTTP wrapper around the backend REST API.

- Attaches ``Authorization: Bearer <token>`` whenever a token is stored.
- Normalizes failures: non-2xx → ApiError carrying the server's message,
  transport failures → NetworkError.
- A 403 from any call means the session is over: the injected
  auth-expired handler runs (token removal + redirect) and
  AuthorizationError is raised.
- No retries. Every call is bounded by the per-client ``timeout``
  (``http_timeout_seconds`` in the settings, 5 s by default).
"""

from typing import Any, Callable, Type, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from customer_admin.core.exceptions import (
    ApiError,
    AuthorizationError,
    NetworkError,
    UploadError,
)
from customer_admin.services.token_store import TokenStore

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiClient:
    """Backend REST client. One instance per console session."""

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        timeout: float = 5.0,
        on_auth_expired: Callable[[], None] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: Backend origin, e.g. "https://api.example.com".
            token_store: Where the bearer token is read from on every call.
            timeout: HTTP timeout in seconds.
            on_auth_expired: Called once per 403 response, before raising.
            transport: Optional httpx transport (tests plug a MockTransport here).
        """
        self.base_url = base_url.rstrip("/")
        self._token_store = token_store
        self._timeout = timeout
        self._on_auth_expired = on_auth_expired
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def set_auth_expired_handler(self, handler: Callable[[], None] | None) -> None:
        self._on_auth_expired = handler

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self._token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        method: str,
        endpoint: str,
        json_data: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an authenticated API request and return the decoded JSON body."""
        client = await self._get_client()
        try:
            response = await client.request(
                method,
                endpoint,
                json=json_data,
                params=params,
                headers=self._headers(),
            )
        except httpx.RequestError as e:
            logger.error("api_request_failed", method=method, endpoint=endpoint, error=str(e))
            raise NetworkError() from e

        if response.status_code == 403:
            logger.warning("api_auth_expired", method=method, endpoint=endpoint)
            if self._on_auth_expired is not None:
                self._on_auth_expired()
            raise AuthorizationError()

        if response.is_error:
            body = _json_or_none(response)
            message = None
            if isinstance(body, dict):
                message = body.get("message") or body.get("error")
            message = message or f"HTTP {response.status_code}: {response.reason_phrase}"
            logger.error(
                "api_request_rejected",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
                error=message,
            )
            raise ApiError(str(message), status_code=response.status_code, payload=body)

        return _json_or_none(response)

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Any) -> Any:
        return await self.request("POST", endpoint, json_data=data)

    async def patch(self, endpoint: str, data: Any) -> Any:
        return await self.request("PATCH", endpoint, json_data=data)

    async def put(self, endpoint: str, data: Any) -> Any:
        return await self.request("PUT", endpoint, json_data=data)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)

    async def put_object(self, upload_url: str, content: bytes, content_type: str) -> None:
        """Write raw bytes to a pre-signed object-storage URL.

        No bearer token is sent; storage authorizes through the URL itself.
        """
        client = await self._get_client()
        try:
            response = await client.put(
                upload_url,
                content=content,
                headers={"Content-Type": content_type},
            )
        except httpx.RequestError as e:
            logger.error("object_upload_failed", error=str(e))
            raise UploadError(f"파일 업로드에 실패했습니다: {e}") from e

        if response.is_error:
            logger.error("object_upload_rejected", status_code=response.status_code)
            raise UploadError(
                f"파일 업로드에 실패했습니다: HTTP {response.status_code}"
            )


def unwrap_data(body: Any) -> Any:
    """Backend responses wrap their payload as ``{status, message, data}``."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def unwrap_list(body: Any, key: str) -> list[Any]:
    """List endpoints nest their rows one level deeper: ``data.<key>``."""
    data = unwrap_data(body)
    if isinstance(data, dict):
        data = data.get(key)
    return data or []


def parse_response(model: Type[ModelT], data: Any) -> ModelT:
    """Validate a response payload. A body that does not fit raises ApiError."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "response_schema_mismatch",
            model=model.__name__,
            errors=e.error_count(),
        )
        raise ApiError(f"서버 응답 형식이 올바르지 않습니다 ({model.__name__})", payload=data) from e


def _json_or_none(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
