"""Field-level form checks.

These helpers never raise: each one records a message in ``errors`` under the
field name and returns whether the value passed, so a form can collect every
problem in one pass.
"""
from __future__ import annotations

import base64
import binascii
import math
import re
from enum import Enum
from typing import Any, MutableMapping, Optional, Type

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<b64>;base64)?,(?P<data>.*)$", re.DOTALL)


def require_non_empty(errors: MutableMapping[str, str], value: Optional[str], field_name: str, message: str) -> bool:
    if not value or not str(value).strip():
        errors[field_name] = message
        return False
    return True


def require_email(errors: MutableMapping[str, str], value: Optional[str], field_name: str = "email") -> bool:
    if not require_non_empty(errors, value, field_name, "Email is required"):
        return False
    if not _EMAIL_RE.search(str(value)):
        errors[field_name] = "Email is invalid"
        return False
    return True


def require_positive(errors: MutableMapping[str, str], value: Any, field_name: str, message: str) -> bool:
    try:
        number = float(value)
    except (TypeError, ValueError):
        errors[field_name] = message
        return False
    if not math.isfinite(number) or number <= 0:
        errors[field_name] = message
        return False
    return True


def require_int_between(
    errors: MutableMapping[str, str], value: Any, field_name: str, low: int, high: int, message: str
) -> bool:
    try:
        number = int(value)
    except (TypeError, ValueError):
        errors[field_name] = message
        return False
    if number < low or number > high:
        errors[field_name] = message
        return False
    return True


def require_choice(errors: MutableMapping[str, str], value: Any, field_name: str, enum_cls: Type[Enum]) -> bool:
    allowed = [m.value for m in enum_cls]
    raw = value.value if isinstance(value, Enum) else value
    if raw not in allowed:
        errors[field_name] = f"Must be one of: {', '.join(allowed)}"
        return False
    return True


def data_uri_size(value: str) -> Optional[int]:
    """Decoded payload size of a data URI, or None when it is not one."""
    m = _DATA_URI_RE.match(value or "")
    if not m:
        return None
    payload = m.group("data")
    if not m.group("b64"):
        return len(payload.encode("utf-8"))
    try:
        return len(base64.b64decode(payload, validate=False))
    except (binascii.Error, ValueError):
        return None


def require_image_data_uri(
    errors: MutableMapping[str, str], value: Optional[str], field_name: str, max_bytes: int
) -> bool:
    if not value:
        errors[field_name] = "National ID image is required"
        return False
    m = _DATA_URI_RE.match(value)
    size = data_uri_size(value)
    if size is None or not (m.group("mime") or "").startswith("image/"):
        errors[field_name] = "Please select a valid image file"
        return False
    if size > max_bytes:
        errors[field_name] = f"Image size must be less than {max_bytes // (1024 * 1024)}MB"
        return False
    return True
