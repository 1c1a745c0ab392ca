"""Auth context: who is signed in, sign-in/sign-out, and session expiry.

One AuthContext is created per console session and injected wherever the
current user is needed. Lifecycle:

1. ``start()`` registers the expiry handler on the API client and restores
   the user from a stored token (an unreadable token is discarded)
2. ``sign_in()`` / ``sign_out()`` while the session runs
3. ``handle_token_expiration()`` fires on any 403: user and token are
   cleared and ``redirect_to`` becomes "/login"
4. ``close()`` detaches the expiry handler
"""

from typing import Iterable

import structlog

from customer_admin.core.endpoints import AuthEndpoints
from customer_admin.core.exceptions import (
    ApiError,
    AuthenticationError,
    InvalidTokenError,
    NotAuthenticatedError,
    PermissionDeniedError,
)
from customer_admin.core.security import DEFAULT_ROLE, decode_token_claims, user_from_token
from customer_admin.schemas.auth import AuthUser, LoginRequest, LoginResponse
from customer_admin.services.api_client import ApiClient
from customer_admin.services.token_store import TokenStore

logger = structlog.get_logger(__name__)

LOGIN_PATH = "/login"
_LOGIN_FAILED_MESSAGE = "로그인에 실패했습니다."


class AuthContext:
    """Holds the signed-in user for the lifetime of a console session."""

    def __init__(self, api: ApiClient, token_store: TokenStore) -> None:
        self._api = api
        self._token_store = token_store
        self._user: AuthUser | None = None
        self._started = False
        self.redirect_to: str | None = None

    @property
    def user(self) -> AuthUser | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> AuthUser | None:
        """Attach to the API client and restore a previously stored session."""
        self._api.set_auth_expired_handler(self.handle_token_expiration)
        self._started = True

        token = self._token_store.get()
        if not token:
            return None
        try:
            self._user = user_from_token(token)
        except InvalidTokenError as e:
            logger.warning("stored_token_invalid", error=e.message)
            self._token_store.remove()
            self._user = None
            return None

        logger.info("session_restored", username=self._user.username, role=self._user.role)
        return self._user

    def close(self) -> None:
        if self._started:
            self._api.set_auth_expired_handler(None)
            self._started = False

    # ------------------------------------------------------------------
    # Sign in / out
    # ------------------------------------------------------------------

    async def sign_in(self, username: str, password: str) -> AuthUser:
        """Log in against the backend and persist the access token.

        Raises:
            AuthenticationError: Rejected credentials or a non-200 status.
            NetworkError: The backend could not be reached.
        """
        try:
            body = await self._api.post(
                AuthEndpoints.LOGIN,
                LoginRequest(username=username, password=password).to_payload(),
            )
        except ApiError as e:
            logger.warning("sign_in_failed", username=username, status_code=e.status_code)
            raise AuthenticationError(e.message) from e

        response = LoginResponse.model_validate(body or {"status": 0})
        if response.status != 200 or response.data is None:
            logger.warning("sign_in_rejected", username=username, status=response.status)
            raise AuthenticationError(response.message or _LOGIN_FAILED_MESSAGE)

        try:
            claims = decode_token_claims(response.data.access_token)
        except InvalidTokenError as e:
            raise AuthenticationError(_LOGIN_FAILED_MESSAGE) from e

        self._user = AuthUser(
            username=response.data.username,
            role=str(claims.get("role") or DEFAULT_ROLE),
        )
        self._token_store.set(response.data.access_token)
        self.redirect_to = None
        logger.info("signed_in", username=self._user.username, role=self._user.role)
        return self._user

    def sign_out(self) -> None:
        if self._user is not None:
            logger.info("signed_out", username=self._user.username)
        self._user = None
        self._token_store.remove()

    def handle_token_expiration(self) -> None:
        """Drop the session after the backend refused the token."""
        logger.warning(
            "token_expired",
            username=self._user.username if self._user else None,
        )
        self._user = None
        self._token_store.remove()
        self.redirect_to = LOGIN_PATH

    # ------------------------------------------------------------------
    # Role gating
    # ------------------------------------------------------------------

    def has_role(self, required: str | Iterable[str]) -> bool:
        if self._user is None:
            return False
        if isinstance(required, str):
            return self._user.role == required
        return self._user.role in set(required)

    def require_user(self) -> AuthUser:
        if self._user is None:
            raise NotAuthenticatedError()
        return self._user

    def require_role(self, required: str | Iterable[str] | None = None) -> AuthUser:
        """Gate a view: no user → /login, wrong role → /."""
        user = self.require_user()
        if required is not None and not self.has_role(required):
            raise PermissionDeniedError()
        return user
