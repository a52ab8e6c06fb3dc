"""Request building and response interpretation shared by sync and async namespaces.

Everything here is free of I/O: namespaces send the request, then hand the
``httpx.Response`` to one of the ``read_*`` functions.
"""

from __future__ import annotations

import logging
import platform
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from ._http import build_query_params
from .envelope import EnvelopeKind, Outcome, normalize_response
from .exceptions import AccountNotFound, BladeAccessError, ConfigurationError, MalformedResponse
from .tokens import mask_token, split_composite_token
from .types import AccountDetail, ActivationResult, BugReport, Credentials, LoginStage, UserInfo

if TYPE_CHECKING:
    import httpx

    from .config import AccessConfig

logger = logging.getLogger(__name__)

ACCOUNT_NOT_FOUND_STATUS = 400
ACCOUNT_NOT_FOUND_MESSAGE = "Account does not exist"

# The register endpoint does not hand out a session; callers log in afterwards.
REGISTRATION_PLACEHOLDER_TOKEN = "dummy_api_key"

# The card-key endpoint stopped returning expiry and tier. These fill the
# fields older callers still read; they are not business rules.
ACTIVATION_VALID_DAYS = 30
DEFAULT_MEMBERSHIP_LEVEL = 1

# /api/usage only checks the token half of the session cookie.
ANONYMOUS_USER_ID = "user_01000000000000000000000000"

UNKNOWN = "Unknown"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _expire_time_ms(days: int = ACTIVATION_VALID_DAYS) -> int:
    return int((_utcnow() + timedelta(days=days)).timestamp()) * 1000


# ---------------------------------------------------------------------------
# Request side
# ---------------------------------------------------------------------------


def token_exchange_params(credentials: Credentials, tenant_id: str) -> dict[str, Any]:
    """Query parameters for the password grant."""
    return build_query_params(
        tenantId=tenant_id,
        account=credentials.account,
        password=credentials.password,
        type="password",
        smsCode=credentials.sms_code,
    )


def legacy_url(config: AccessConfig, path: str) -> str:
    """Build a legacy backend URL, refusing when the backend is switched off."""
    if not config.legacy_enabled:
        raise ConfigurationError(f"Legacy backend is not configured (needed for {path})")
    return f"{config.legacy_base_url}{path}"


def build_bug_report(
    severity: str,
    bug_description: str,
    *,
    api_key: str | None = None,
    screenshot_urls: list[str] | None = None,
    cursor_version: str | None = None,
) -> BugReport:
    """Collect the environment details that accompany a bug report."""
    from blade_access import __version__

    return BugReport(
        app_version=__version__,
        os_version=f"{platform.system()} {platform.release()}".strip() or UNKNOWN,
        device_model=platform.node() or UNKNOWN,
        cursor_version=cursor_version or UNKNOWN,
        bug_description=bug_description,
        occurrence_time=_utcnow().isoformat(),
        severity=severity,
        api_key=api_key,
        screenshot_urls=screenshot_urls,
    )


# ---------------------------------------------------------------------------
# Login bookkeeping
# ---------------------------------------------------------------------------


def record_login_failure(exc: BladeAccessError, stage: LoginStage, account: str) -> None:
    """Tag a login failure with the stage it happened in."""
    exc.stage = stage
    logger.warning("Login failed for %s while %s: %s", account, stage.value, exc)


def record_login_success(account: str, tenant_id: str, token: str) -> None:
    logger.info("Logged in %s (tenant %s), token=%s", account, tenant_id, mask_token(token))


# ---------------------------------------------------------------------------
# Response side
# ---------------------------------------------------------------------------


def read_tenant_id(response: httpx.Response) -> str:
    """Interpret a tenant lookup response.

    HTTP 400 means the account does not exist and is checked before the body
    is looked at.
    """
    if response.status_code == ACCOUNT_NOT_FOUND_STATUS:
        raise AccountNotFound(ACCOUNT_NOT_FOUND_MESSAGE, status_code=response.status_code, body=response.text)

    outcome = normalize_response(response, EnvelopeKind.BLADE)
    tenant_id = outcome.unwrap()
    if not isinstance(tenant_id, str):
        raise MalformedResponse(
            "Tenant lookup did not return a tenant id",
            status_code=outcome.status_code,
            body=outcome.raw,
        )
    return tenant_id


def read_token_payload(response: httpx.Response) -> dict[str, Any]:
    """Interpret a password grant response, returning the token object."""
    outcome = normalize_response(response, EnvelopeKind.BLADE)
    payload = outcome.unwrap()
    if not isinstance(payload, dict):
        raise MalformedResponse(
            "Login response carried no token data",
            status_code=outcome.status_code,
            body=outcome.raw,
        )
    return payload


def read_registration(response: httpx.Response) -> Outcome[str]:
    outcome = normalize_response(response, EnvelopeKind.BLADE)
    outcome.unwrap()
    return outcome.map(lambda _: REGISTRATION_PLACEHOLDER_TOKEN)


def read_activation(response: httpx.Response) -> Outcome[ActivationResult]:
    outcome = normalize_response(response, EnvelopeKind.BLADE)
    outcome.unwrap()
    return outcome.map(
        lambda _: ActivationResult(expire_time=_expire_time_ms(), level=DEFAULT_MEMBERSHIP_LEVEL)
    )


def read_user_detail(response: httpx.Response) -> dict[str, Any]:
    outcome = normalize_response(response, EnvelopeKind.BLADE)
    detail = outcome.unwrap()
    if not isinstance(detail, dict):
        raise MalformedResponse("User detail is not an object", status_code=outcome.status_code, body=outcome.raw)
    return detail


def read_password_update(response: httpx.Response) -> bool:
    normalize_response(response, EnvelopeKind.BLADE).unwrap()
    return True


def _amount(detail: dict[str, Any], key: str) -> float:
    value = detail.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedResponse(f"User detail field {key!r} is not a number")
    return value


def _text(detail: dict[str, Any], key: str) -> str:
    value = detail.get(key)
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value)


def user_info_from_detail(detail: dict[str, Any]) -> UserInfo:
    """Summarize a Blade user record the way the account screen shows it."""
    balance = _amount(detail, "balance")
    bonus = _amount(detail, "bonus")
    credits = balance + bonus
    return UserInfo(
        username=_text(detail, "realName") or _text(detail, "account"),
        balance=balance,
        bonus=bonus,
        credits=credits,
        total_count=credits,
        expire_time=_expire_time_ms(),
        level=DEFAULT_MEMBERSHIP_LEVEL,
    )


def read_account_detail(response: httpx.Response) -> Outcome[AccountDetail]:
    """Interpret ``/account/get``: split the composite token of a successful answer."""
    outcome = normalize_response(response, EnvelopeKind.LEGACY)
    if not outcome.ok:
        return outcome  # type: ignore[return-value]

    data = outcome.data
    if not isinstance(data, dict) or not isinstance(data.get("token"), str):
        raise MalformedResponse("Account info carried no token", status_code=outcome.status_code, body=outcome.raw)

    try:
        user_id, token = split_composite_token(data["token"])
    except MalformedResponse as e:
        raise MalformedResponse(e.message, status_code=outcome.status_code, body=outcome.raw) from e
    email = data.get("email")
    return outcome.map(
        lambda _: AccountDetail(email=email if isinstance(email, str) else "", user_id=user_id, token=token)
    )


def read_legacy(response: httpx.Response) -> Outcome[Any]:
    return normalize_response(response, EnvelopeKind.LEGACY)


def read_third_party(response: httpx.Response) -> Outcome[dict[str, Any]]:
    return normalize_response(response, EnvelopeKind.THIRD_PARTY)
