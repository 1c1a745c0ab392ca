"""JWT claim utilities for the signed-in console user.

The backend issues and verifies the tokens. The console only reads the
claims to learn who is signed in and with which role, so the signature is
not checked here.
"""

from typing import Any

from jose import JWTError, jwt

from customer_admin.core.exceptions import InvalidTokenError
from customer_admin.schemas.auth import AuthUser

DEFAULT_ROLE = "USER"


def decode_token_claims(token: str) -> dict[str, Any]:
    """Read the claims of a JWT without verifying it. Raises InvalidTokenError."""
    try:
        return jwt.get_unverified_claims(token)
    except JWTError as e:
        raise InvalidTokenError(f"토큰을 해석할 수 없습니다: {e}") from e


def user_from_claims(claims: dict[str, Any]) -> AuthUser:
    """Build the console user from token claims (username falls back to sub)."""
    username = claims.get("username") or claims.get("sub")
    if not username:
        raise InvalidTokenError("토큰에 사용자 정보가 없습니다.")
    role = claims.get("role") or DEFAULT_ROLE
    return AuthUser(username=str(username), role=str(role))


def user_from_token(token: str) -> AuthUser:
    return user_from_claims(decode_token_claims(token))
