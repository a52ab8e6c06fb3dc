"""Typed values passed into and returned by access-layer operations."""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Credentials:
    """What a user types into the login form. Never persisted."""

    account: str
    password: str = field(repr=False)
    tenant_id: str | None = None
    sms_code: str | None = field(default=None, repr=False)
    device_id: str = ""


class LoginStage(str, enum.Enum):
    """Steps of the login flow, in order."""

    RESOLVING_TENANT = "resolving_tenant"
    EXCHANGING_CREDENTIALS = "exchanging_credentials"
    EXTRACTING_TOKEN = "extracting_token"
    DONE = "done"


@dataclass(frozen=True)
class AccountDetail:
    """Account info with its composite session token split into parts."""

    email: str
    user_id: str
    token: str = field(repr=False)


@dataclass(frozen=True)
class ActivationResult:
    """Result of redeeming a card key."""

    expire_time: int  # milliseconds since the epoch
    level: int


@dataclass(frozen=True)
class UserInfo:
    """Profile summary derived from the Blade user record."""

    username: str
    balance: float
    bonus: float
    credits: float
    total_count: float
    expire_time: int
    used_count: int = 0
    level: int = 1
    is_expired: bool = False
    email: str = ""


@dataclass
class BugReport:
    """Body of a bug report sent to the legacy backend."""

    app_version: str
    os_version: str
    device_model: str
    cursor_version: str
    bug_description: str
    occurrence_time: str
    severity: str
    api_key: str | None = None
    screenshot_urls: list[str] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize, leaving out the optional fields that are unset."""
        return {k: v for k, v in asdict(self).items() if v is not None}
