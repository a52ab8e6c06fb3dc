"""Session token helpers: extraction, composite splitting and cookie encoding."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from .exceptions import MalformedResponse, NoTokenField

# Checked in order. "access_token" is what the previous auth server revision
# returns; both are still live.
TOKEN_FIELD_NAMES: tuple[str, ...] = ("accessToken", "access_token")

COMPOSITE_DELIMITER = "::"
ENCODED_COMPOSITE_DELIMITER = quote(COMPOSITE_DELIMITER, safe="")
SESSION_COOKIE_NAME = "WorkosCursorSessionToken"


def extract_token(payload: dict[str, Any], field_names: tuple[str, ...] = TOKEN_FIELD_NAMES) -> str:
    """Return the first string value found under one of ``field_names``.

    Raises:
        NoTokenField: If none of the names holds a string.
    """
    for name in field_names:
        value = payload.get(name)
        if isinstance(value, str):
            return value
    raise NoTokenField(f"No token in response (expected one of: {', '.join(field_names)})")


def split_composite_token(value: str) -> tuple[str, str]:
    """Split a ``<user_id>::<token>`` value into its two parts.

    The delimiter may arrive percent-encoded (``%3A%3A``). Only the delimiter
    is decoded; both halves are returned as sent. Anything after a second
    delimiter is dropped.

    Raises:
        MalformedResponse: If the value contains no delimiter.
    """
    parts = value.replace(ENCODED_COMPOSITE_DELIMITER, COMPOSITE_DELIMITER).split(COMPOSITE_DELIMITER)
    if len(parts) < 2:
        raise MalformedResponse("Account token is not in <user_id>::<token> form")
    return parts[0], parts[1]


def build_session_cookie(user_id: str, token: str) -> str:
    """Build the Cookie header value the third-party service authenticates with."""
    return f"{SESSION_COOKIE_NAME}={user_id}{ENCODED_COMPOSITE_DELIMITER}{token}"


def mask_token(token: str) -> str:
    """Shorten a token for log output."""
    if len(token) >= 16:
        return token[:4] + "..." + token[-4:]
    if len(token) >= 8:
        return token[:4] + "..."
    return "***"
