"""Auth request/response schemas."""

from pydantic import BaseModel, ConfigDict

from customer_admin.schemas.base import CamelModel


class LoginRequest(CamelModel):
    """POST /api/auth/login request body."""

    username: str
    password: str


class LoginData(CamelModel):
    username: str
    access_token: str


class LoginResponse(CamelModel):
    """POST /api/auth/login response body."""

    status: int
    message: str = ""
    data: LoginData | None = None


class AuthUser(BaseModel):
    """The signed-in console user, derived from the access token claims."""

    model_config = ConfigDict(frozen=True)

    username: str
    role: str
