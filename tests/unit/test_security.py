"""Unit tests for JWT claim decoding.

Tests:
  - username and role are read from the claims
  - sub is used when username is absent; role defaults to USER
  - malformed tokens and tokens without a user raise InvalidTokenError
"""

from __future__ import annotations

import pytest

from customer_admin.core.exceptions import InvalidTokenError
from customer_admin.core.security import DEFAULT_ROLE, decode_token_claims, user_from_token
from tests.conftest import make_token


class TestUserFromToken:
    """Tests for user_from_token()."""

    def test_username_and_role(self) -> None:
        user = user_from_token(make_token("admin", "ADMIN"))

        assert user.username == "admin"
        assert user.role == "ADMIN"

    def test_sub_fallback_and_default_role(self) -> None:
        token = make_token("", role=None, sub="sales01")

        user = user_from_token(token)

        assert user.username == "sales01"
        assert user.role == DEFAULT_ROLE

    def test_signature_is_not_checked(self) -> None:
        """Tokens signed with any key decode; the backend is the verifier."""
        claims = decode_token_claims(make_token("x", "USER"))

        assert claims["username"] == "x"

    def test_malformed_token(self) -> None:
        with pytest.raises(InvalidTokenError):
            user_from_token("not.a.jwt")

    def test_token_without_user(self) -> None:
        with pytest.raises(InvalidTokenError):
            user_from_token(make_token("", role="USER"))
