"""Normalization of backend response envelopes into one canonical Outcome.

Three backend families answer with incompatible envelopes:

- ``EnvelopeKind.LEGACY``: ``{"status": "success", "message": ..., "data": ...}``
- ``EnvelopeKind.BLADE``: ``{"code": 200, "success": true, "msg": ..., "data": ...}``
- ``EnvelopeKind.THIRD_PARTY``: bare JSON, success is decided by the HTTP status

The calling operation always names the kind explicitly. Detecting it from the
body is not attempted because the shapes overlap (a Blade body may also carry
a ``status`` key).

``normalize`` is total: any byte sequence and any status code yields exactly
one ``Outcome``, and a failed ``Outcome`` never carries data.
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field, replace
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from .exceptions import BackendError, ParseError

if TYPE_CHECKING:
    import httpx

T = TypeVar("T")
U = TypeVar("U")

LEGACY_SUCCESS_STATUS = "success"
BLADE_SUCCESS_CODE = 200
ERROR_SNIPPET_CHARS = 500


class EnvelopeKind(str, enum.Enum):
    """Which envelope a backend wraps its payloads in."""

    LEGACY = "legacy"
    BLADE = "blade"
    THIRD_PARTY = "third_party"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Canonical result of one backend call.

    ``ok`` is True only when the backend reported success; ``data`` is only
    set on success. ``raw`` keeps the undecoded body for diagnostics, even
    when it failed to parse.
    """

    ok: bool
    message: str = ""
    code: Optional[int] = None
    data: Optional[T] = None
    kind: Optional[EnvelopeKind] = None
    status_code: Optional[int] = None
    raw: Optional[str] = field(default=None, repr=False)
    parse_error: bool = False

    def __post_init__(self) -> None:
        if not self.ok and self.data is not None:
            raise ValueError("A failed Outcome cannot carry data")

    def unwrap(self) -> Optional[T]:
        """Return the payload, or raise the error this outcome describes."""
        if self.ok:
            return self.data
        if self.parse_error:
            raise ParseError(self.message, status_code=self.status_code, body=self.raw)
        raise BackendError(self.message, code=self.code, status_code=self.status_code, body=self.raw)

    def map(self, fn: Callable[[Optional[T]], U]) -> Outcome[U]:
        """Apply ``fn`` to the payload of a successful outcome."""
        if not self.ok:
            return self  # type: ignore[return-value]
        return replace(self, data=fn(self.data))  # type: ignore[return-value]


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _decode(body: bytes | str) -> str:
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="replace")
    return body


def _parse_failure(kind: EnvelopeKind, message: str, raw: str, status_code: Optional[int]) -> Outcome[Any]:
    return Outcome(
        ok=False,
        message=message,
        code=None,
        kind=kind,
        status_code=status_code,
        raw=raw,
        parse_error=True,
    )


def _parse_object(kind: EnvelopeKind, raw: str, status_code: Optional[int]) -> dict[str, Any] | Outcome[Any]:
    try:
        parsed = json.loads(raw)
    except ValueError as e:
        return _parse_failure(kind, str(e), raw, status_code)
    if not isinstance(parsed, dict):
        return _parse_failure(kind, f"Expected a JSON object, got {_json_type(parsed)}", raw, status_code)
    return parsed


def _message_field(envelope: dict[str, Any], key: str) -> str:
    value = envelope.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else json.dumps(value)


def _normalize_legacy(envelope: dict[str, Any], raw: str, status_code: Optional[int]) -> Outcome[Any]:
    status = envelope.get("status")
    if not isinstance(status, str):
        return _parse_failure(EnvelopeKind.LEGACY, "Missing or invalid field `status`", raw, status_code)

    ok = status == LEGACY_SUCCESS_STATUS
    return Outcome(
        ok=ok,
        message=_message_field(envelope, "message"),
        data=envelope.get("data") if ok else None,
        kind=EnvelopeKind.LEGACY,
        status_code=status_code,
        raw=raw,
    )


def _normalize_blade(envelope: dict[str, Any], raw: str, status_code: Optional[int]) -> Outcome[Any]:
    code = envelope.get("code")
    success = envelope.get("success")
    if not isinstance(code, int) or isinstance(code, bool):
        return _parse_failure(EnvelopeKind.BLADE, "Missing or invalid field `code`", raw, status_code)
    if not isinstance(success, bool):
        return _parse_failure(EnvelopeKind.BLADE, "Missing or invalid field `success`", raw, status_code)

    ok = success and code == BLADE_SUCCESS_CODE
    if ok and envelope.get("data") is None:
        return _parse_failure(EnvelopeKind.BLADE, "Missing field `data`", raw, status_code)
    return Outcome(
        ok=ok,
        message=_message_field(envelope, "msg"),
        code=code,
        data=envelope["data"] if ok else None,
        kind=EnvelopeKind.BLADE,
        status_code=status_code,
        raw=raw,
    )


def _status_phrase(status_code: Optional[int]) -> str:
    try:
        return HTTPStatus(status_code).phrase  # type: ignore[arg-type]
    except ValueError:
        return "OK"


def _normalize_third_party(raw: str, status_code: Optional[int]) -> Outcome[Any]:
    kind = EnvelopeKind.THIRD_PARTY
    # Without a status only the body can be judged.
    if status_code is not None and not 200 <= status_code < 300:
        return Outcome(
            ok=False,
            message=f"HTTP {status_code}: {raw[:ERROR_SNIPPET_CHARS]}",
            code=status_code,
            kind=kind,
            status_code=status_code,
            raw=raw,
        )

    parsed = _parse_object(kind, raw, status_code)
    if isinstance(parsed, Outcome):
        return parsed
    return Outcome(
        ok=True,
        message=_status_phrase(status_code),
        code=status_code,
        data=parsed,
        kind=kind,
        status_code=status_code,
        raw=raw,
    )


_ENVELOPE_NORMALIZERS = {
    EnvelopeKind.LEGACY: _normalize_legacy,
    EnvelopeKind.BLADE: _normalize_blade,
}


def normalize(body: bytes | str, kind: EnvelopeKind, status_code: Optional[int] = None) -> Outcome[Any]:
    """Project a raw response body into an ``Outcome``.

    Args:
        body: Raw response body. Bytes are decoded as UTF-8 with replacement.
        kind: Envelope the calling operation expects.
        status_code: HTTP status of the response. Only the third-party kind
            judges success by it; the others just record it.

    Returns:
        Exactly one ``Outcome``. Bodies that do not parse, or parse into the
        wrong shape, give ``ok=False`` with ``parse_error=True``.
    """
    raw = _decode(body)
    kind = EnvelopeKind(kind)

    if kind is EnvelopeKind.THIRD_PARTY:
        return _normalize_third_party(raw, status_code)

    parsed = _parse_object(kind, raw, status_code)
    if isinstance(parsed, Outcome):
        return parsed
    return _ENVELOPE_NORMALIZERS[kind](parsed, raw, status_code)


def normalize_response(response: httpx.Response, kind: EnvelopeKind) -> Outcome[Any]:
    """Normalize an ``httpx.Response`` with its status code."""
    return normalize(response.content, kind, response.status_code)
