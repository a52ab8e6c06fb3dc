"""Legacy backend namespace for the Blade access layer (sync)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .._http import build_headers, transport_errors
from .._operations import build_bug_report, legacy_url, read_legacy

if TYPE_CHECKING:
    import httpx

    from ..config import AccessConfig
    from ..envelope import Outcome


class LegacyNamespace:
    """Namespace for the original backend (``{"status", "message", "data"}`` envelopes).

    The backend is off unless ``AccessConfig.legacy_base_url`` is set; every
    call raises ``ConfigurationError`` until then. Failed envelopes are
    returned as failed outcomes rather than raised.
    """

    def __init__(self, client: httpx.Client, config: AccessConfig) -> None:
        self._client = client
        self._config = config

    def _get(self, path: str, api_key: str | None = None) -> Outcome[Any]:
        url = legacy_url(self._config, path)
        headers = build_headers(api_key) if api_key else build_headers(auth_type="none")
        with transport_errors():
            response = self._client.get(url, headers=headers)
        return read_legacy(response)

    def _post(self, path: str, payload: dict[str, Any], api_key: str | None = None) -> Outcome[Any]:
        url = legacy_url(self._config, path)
        headers = build_headers(api_key) if api_key else build_headers(auth_type="none")
        with transport_errors():
            response = self._client.post(url, headers=headers, json=payload)
        return read_legacy(response)

    def check_user(self, username: str) -> Outcome[Any]:
        """Check whether a username is registered."""
        return self._post("/user/check", {"username": username})

    def send_code(self, username: str, *, is_reset_password: bool | None = None) -> Outcome[Any]:
        """Send a verification code to the user."""
        payload: dict[str, Any] = {"username": username}
        if is_reset_password is not None:
            payload["is_reset_password"] = is_reset_password
        return self._post("/user/send_code", payload)

    def user_info(self, api_key: str) -> Outcome[Any]:
        return self._get("/user/info", api_key)

    def change_password(self, api_key: str, old_password: str, new_password: str) -> Outcome[Any]:
        return self._post(
            "/user/change_password",
            {"old_password": old_password, "new_password": new_password},
            api_key,
        )

    def reset_password(self, email: str, sms_code: str, new_password: str) -> Outcome[Any]:
        return self._post(
            "/user/reset_password",
            {"email": email, "sms_code": sms_code, "new_password": new_password},
        )

    def version(self) -> Outcome[Any]:
        return self._get("/version")

    def public_info(self) -> Outcome[Any]:
        return self._get("/public/info")

    def disclaimer(self) -> Outcome[Any]:
        return self._get("/disclaimer")

    def report_bug(
        self,
        severity: str,
        bug_description: str,
        *,
        api_key: str | None = None,
        screenshot_urls: list[str] | None = None,
        cursor_version: str | None = None,
    ) -> None:
        """Send a bug report. The response is not inspected.

        Args:
            severity: Severity label chosen by the user.
            bug_description: What went wrong.
            api_key: Session of the reporting user, if logged in.
            screenshot_urls: Already uploaded screenshots.
            cursor_version: Version of the editor; "Unknown" when omitted.
        """
        url = legacy_url(self._config, "/report")
        report = build_bug_report(
            severity,
            bug_description,
            api_key=api_key,
            screenshot_urls=screenshot_urls,
            cursor_version=cursor_version,
        )
        with transport_errors():
            self._client.post(url, headers=build_headers(auth_type="none"), json=report.to_payload())
