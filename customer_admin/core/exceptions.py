"""Custom exception classes for structured error handling.

Four families, matching how the console reacts to them:
  - validation: local, block the current action only
  - authorization: global, force sign-out and a redirect to /login
  - network / API: surfaced to the user, the operation does not proceed
  - business conflicts: detected proactively before a risky write
"""

from typing import Any


class AdminConsoleError(Exception):
    """Base exception for all console errors."""

    def __init__(self, code: str, message: str, status_code: int = 500) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class FormValidationError(AdminConsoleError):
    """One or more form fields failed client-side validation."""

    def __init__(
        self,
        field_errors: dict[str, str],
        message: str = "입력값을 확인해주세요.",
    ) -> None:
        self.field_errors = field_errors
        super().__init__(code="FORM_INVALID", message=message, status_code=422)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["error"]["fields"] = dict(self.field_errors)
        return data


class TenantCompanyValidationError(AdminConsoleError):
    def __init__(self, message: str = "임차 업체명과 1월, 8월 사용량을 모두 입력해주세요.") -> None:
        super().__init__(code="TENANT_COMPANY_INVALID", message=message, status_code=422)


class DuplicateTenantCompanyError(AdminConsoleError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            code="TENANT_COMPANY_DUPLICATE",
            message=f'이미 등록된 임차 업체명입니다: "{name}"',
            status_code=409,
        )


class TenantCompanyNotFoundError(AdminConsoleError):
    def __init__(self, tenant_id: int) -> None:
        self.tenant_id = tenant_id
        super().__init__(
            code="TENANT_COMPANY_NOT_FOUND",
            message=f"임차 업체를 찾을 수 없습니다: {tenant_id}",
            status_code=404,
        )


class AttachmentLimitError(AdminConsoleError):
    def __init__(self, message: str) -> None:
        super().__init__(code="ATTACHMENT_LIMIT", message=message, status_code=409)


class InvalidAttachmentError(AdminConsoleError):
    def __init__(self, message: str = "지원하지 않는 파일입니다.") -> None:
        super().__init__(code="ATTACHMENT_INVALID", message=message, status_code=400)


# ---------------------------------------------------------------------------
# Authorization
# ---------------------------------------------------------------------------


class AuthenticationError(AdminConsoleError):
    def __init__(self, message: str = "로그인에 실패했습니다.") -> None:
        super().__init__(code="AUTHENTICATION_FAILED", message=message, status_code=401)


class InvalidTokenError(AdminConsoleError):
    def __init__(self, message: str = "토큰을 해석할 수 없습니다.") -> None:
        super().__init__(code="INVALID_TOKEN", message=message, status_code=401)


class NotAuthenticatedError(AdminConsoleError):
    def __init__(self, message: str = "로그인이 필요합니다.") -> None:
        self.redirect_to = "/login"
        super().__init__(code="NOT_AUTHENTICATED", message=message, status_code=401)


class PermissionDeniedError(AdminConsoleError):
    def __init__(self, message: str = "접근 권한이 없습니다.") -> None:
        self.redirect_to = "/"
        super().__init__(code="PERMISSION_DENIED", message=message, status_code=403)


class AuthorizationError(AdminConsoleError):
    """The backend answered 403: the session is over."""

    def __init__(self, message: str = "인증이 만료되었습니다. 다시 로그인해주세요.") -> None:
        super().__init__(code="AUTHORIZATION_EXPIRED", message=message, status_code=403)


# ---------------------------------------------------------------------------
# Network / API
# ---------------------------------------------------------------------------


class ApiError(AdminConsoleError):
    def __init__(
        self,
        message: str,
        status_code: int = 500,
        payload: Any = None,
    ) -> None:
        self.payload = payload
        super().__init__(code="API_ERROR", message=message, status_code=status_code)


class NetworkError(AdminConsoleError):
    def __init__(self, message: str = "네트워크 연결을 확인해주세요.") -> None:
        super().__init__(code="NETWORK_ERROR", message=message, status_code=503)


class UploadError(AdminConsoleError):
    def __init__(self, message: str = "파일 업로드에 실패했습니다.") -> None:
        super().__init__(code="UPLOAD_FAILED", message=message, status_code=502)


# ---------------------------------------------------------------------------
# Business conflicts
# ---------------------------------------------------------------------------


class DuplicateCompanyNameError(AdminConsoleError):
    """The company name already belongs to another customer."""

    def __init__(
        self,
        company_name: str,
        salesman_name: str | None = None,
        salesman_phone_number: str | None = None,
        salesman_email: str | None = None,
    ) -> None:
        self.company_name = company_name
        self.salesman_name = salesman_name
        self.salesman_phone_number = salesman_phone_number
        self.salesman_email = salesman_email
        message = (
            f'업체명 "{company_name}"이(가) 이미 존재합니다.\n\n'
            f"담당 영업사원: {salesman_name or '정보 없음'}\n"
            f"연락처: {salesman_phone_number or '정보 없음'}\n"
            f"이메일: {salesman_email or '정보 없음'}"
        )
        super().__init__(code="COMPANY_NAME_DUPLICATE", message=message, status_code=409)
