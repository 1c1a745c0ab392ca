"""Form plumbing: validation into field errors, shared field checks, username input.

Forms validate entirely on the client before anything is submitted. A
failing form raises FormValidationError with one Korean message per field;
the server's own validation errors are never mapped back onto fields.
"""

import time
from typing import Any, Callable, ClassVar, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from customer_admin.core.exceptions import FormValidationError
from customer_admin.core.formatting import (
    BUSINESS_NUMBER_PATTERN,
    EMAIL_PATTERN,
    PHONE_NUMBER_PATTERN,
    format_business_number,
    format_phone_number,
    format_user_id,
    validate_user_id,
)

FormT = TypeVar("FormT", bound="EntityForm")

USER_ID_RULE_MESSAGE = "아이디는 영문 소문자, 숫자, 특수문자(_-.)만 사용 가능합니다"
USER_ID_WARNING_MESSAGE = "영문 소문자, 숫자, 특수문자(_-.)만 입력 가능합니다."
_DEFAULT_FIELD_MESSAGE = "올바른 값을 입력해주세요"
_VALUE_ERROR_PREFIX = "Value error, "


class EntityForm(BaseModel):
    """Base for all entity forms.

    ``field_messages`` holds the message shown when a field is missing,
    empty or of the wrong type. Custom validators raise ValueError with
    their own message instead.
    """

    model_config = ConfigDict(extra="ignore")

    field_messages: ClassVar[dict[str, str]] = {}


def validate_form(form_cls: Type[FormT], data: dict[str, Any]) -> FormT:
    """Validate raw form input. Raises FormValidationError with per-field messages."""
    try:
        return form_cls.model_validate(data)
    except ValidationError as e:
        raise FormValidationError(_field_errors(form_cls, e)) from e


def _field_errors(form_cls: Type[EntityForm], error: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for item in error.errors():
        field = str(item["loc"][0]) if item["loc"] else "__root__"
        if field in errors:
            continue
        if item["type"] == "value_error":
            message = item["msg"]
            if message.startswith(_VALUE_ERROR_PREFIX):
                message = message[len(_VALUE_ERROR_PREFIX):]
        else:
            message = form_cls.field_messages.get(field, _DEFAULT_FIELD_MESSAGE)
        errors[field] = message
    return errors


# ---------------------------------------------------------------------------
# Shared field checks (used from field_validator bodies)
# ---------------------------------------------------------------------------


def check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError("올바른 이메일을 입력해주세요")
    return value


def check_phone(value: str, required_message: str) -> str:
    if not value:
        raise ValueError(required_message)
    formatted = format_phone_number(value)
    if not PHONE_NUMBER_PATTERN.match(formatted):
        raise ValueError("올바른 전화번호 형식이 아닙니다 (예: 010-1234-5678)")
    return formatted


def check_business_number(value: str, required: bool = True) -> str:
    if not value:
        if required:
            raise ValueError("사업자등록번호를 입력해주세요")
        return value
    formatted = format_business_number(value)
    if not BUSINESS_NUMBER_PATTERN.match(formatted):
        raise ValueError("사업자등록번호 형식이 올바르지 않습니다 (예: 123-45-67890)")
    return formatted


def check_username(value: str) -> str:
    if not value:
        raise ValueError("아이디를 입력해주세요")
    if len(value) < 3:
        raise ValueError("아이디는 3자 이상이어야 합니다")
    if len(value) > 20:
        raise ValueError("아이디는 20자 이하여야 합니다")
    if not validate_user_id(value):
        raise ValueError(USER_ID_RULE_MESSAGE)
    return value


# ---------------------------------------------------------------------------
# Keystroke-level username input
# ---------------------------------------------------------------------------


class UsernameInput:
    """Username/ID text box that normalizes on every keystroke.

    Whenever the typed text contained a character that normalization
    changed, a warning banner becomes visible for ``warning_seconds``.
    """

    def __init__(
        self,
        value: str = "",
        warning_seconds: float = 3.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.value = format_user_id(value)
        self._warning_seconds = warning_seconds
        self._clock = clock
        self._warning_until: float | None = None

    def type(self, text: str) -> str:
        """Replace the box content with ``text`` as the user typed it."""
        normalized = format_user_id(text)
        if normalized != text:
            self._warning_until = self._clock() + self._warning_seconds
        self.value = normalized
        return normalized

    def append(self, chars: str) -> str:
        """Type ``chars`` at the end of the current value."""
        return self.type(self.value + chars)

    @property
    def warning_visible(self) -> bool:
        return self._warning_until is not None and self._clock() < self._warning_until

    @property
    def warning_message(self) -> str | None:
        return USER_ID_WARNING_MESSAGE if self.warning_visible else None

    @property
    def is_valid(self) -> bool:
        return validate_user_id(self.value) and 3 <= len(self.value) <= 20
