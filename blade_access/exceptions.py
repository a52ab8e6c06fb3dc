"""Custom exceptions raised by the Blade access layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .types import LoginStage


class BladeAccessError(Exception):
    """Base exception for all access-layer failures.

    ``str(exc)`` is always the user-facing message. ``status_code`` and
    ``body`` carry diagnostics when a response was received; ``stage`` is set
    by the login orchestrator to the step that failed.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.stage: Optional[LoginStage] = None


class TransportError(BladeAccessError):
    """Raised when a request never produced a response (connect, timeout, protocol)."""


class ParseError(BladeAccessError):
    """Raised when a response body does not match the expected JSON shape."""


class BackendError(BladeAccessError):
    """Raised when an envelope parsed but reported failure."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[int] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message, status_code=status_code, body=body)
        self.code = code


class AccountNotFound(BladeAccessError):
    """Raised when the tenant lookup answers HTTP 400 for an account."""


class MalformedResponse(BladeAccessError):
    """Raised when a successful envelope carries a payload of the wrong shape."""


class NoTokenField(MalformedResponse):
    """Raised when a token payload has none of the known token field names."""


class ConfigurationError(BladeAccessError):
    """Raised when an operation targets a backend that is not configured."""
