"""Input normalizers and display formatters shared by forms and the CLI."""

import re

_NON_DIGIT = re.compile(r"[^0-9]")
_BUSINESS_NUMBER = re.compile(r"([0-9]{3})([0-9]{2})([0-9]{5})")
_PHONE_NUMBER = re.compile(r"(^02|^01.|^0[3-6][0-9]|[0-9]{3,4})([0-9]{3,4})([0-9]{4})")
_USER_ID_DISALLOWED = re.compile(r"[^a-z0-9._-]")
_USER_ID = re.compile(r"^[a-z0-9._-]+$")

BUSINESS_NUMBER_PATTERN = re.compile(r"^\d{3}-\d{2}-\d{5}$")
PHONE_NUMBER_PATTERN = re.compile(r"^\d{2,4}-\d{3,4}-\d{4}$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


def format_business_number(value: str) -> str:
    """'1234567890' → '123-45-67890'. Non-digits are dropped first."""
    return _BUSINESS_NUMBER.sub(r"\1-\2-\3", _NON_DIGIT.sub("", value))


def format_phone_number(value: str) -> str:
    """'01012345678' → '010-1234-5678', '0212345678' → '02-1234-5678'."""
    return _PHONE_NUMBER.sub(r"\1-\2-\3", _NON_DIGIT.sub("", value))


def format_user_id(value: str) -> str:
    """Lowercase, then strip every character outside [a-z0-9._-]."""
    return _USER_ID_DISALLOWED.sub("", value.lower())


def validate_user_id(value: str) -> bool:
    return bool(_USER_ID.match(value))


def format_file_size(size: int) -> str:
    if size <= 0:
        return "0 Bytes"
    exponent = 0
    while exponent < len(_SIZE_UNITS) - 1 and size >= 1024 ** (exponent + 1):
        exponent += 1
    scaled = round(size / 1024**exponent, 2)
    text = f"{scaled:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[exponent]}"


def format_currency(amount: float | int | None) -> str:
    if not amount:
        return "-"
    if float(amount).is_integer():
        return f"{int(amount):,}원"
    return f"{amount:,.2f}원"


def file_extension(file_name: str) -> str:
    """Lowercase extension without the dot; '' when the name has none."""
    _, dot, ext = file_name.rpartition(".")
    return ext.lower() if dot and ext else ""
