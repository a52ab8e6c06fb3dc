"""Legacy backend namespace for the Blade access layer (async)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .._http import build_headers, transport_errors
from .._operations import build_bug_report, legacy_url, read_legacy

if TYPE_CHECKING:
    import httpx

    from ..config import AccessConfig
    from ..envelope import Outcome


class AsyncLegacyNamespace:
    """Async namespace for the original backend. Off unless a base URL is configured."""

    def __init__(self, client: httpx.AsyncClient, config: AccessConfig) -> None:
        self._client = client
        self._config = config

    async def _get(self, path: str, api_key: str | None = None) -> Outcome[Any]:
        url = legacy_url(self._config, path)
        headers = build_headers(api_key) if api_key else build_headers(auth_type="none")
        with transport_errors():
            response = await self._client.get(url, headers=headers)
        return read_legacy(response)

    async def _post(self, path: str, payload: dict[str, Any], api_key: str | None = None) -> Outcome[Any]:
        url = legacy_url(self._config, path)
        headers = build_headers(api_key) if api_key else build_headers(auth_type="none")
        with transport_errors():
            response = await self._client.post(url, headers=headers, json=payload)
        return read_legacy(response)

    async def check_user(self, username: str) -> Outcome[Any]:
        return await self._post("/user/check", {"username": username})

    async def send_code(self, username: str, *, is_reset_password: bool | None = None) -> Outcome[Any]:
        payload: dict[str, Any] = {"username": username}
        if is_reset_password is not None:
            payload["is_reset_password"] = is_reset_password
        return await self._post("/user/send_code", payload)

    async def user_info(self, api_key: str) -> Outcome[Any]:
        return await self._get("/user/info", api_key)

    async def change_password(self, api_key: str, old_password: str, new_password: str) -> Outcome[Any]:
        return await self._post(
            "/user/change_password",
            {"old_password": old_password, "new_password": new_password},
            api_key,
        )

    async def reset_password(self, email: str, sms_code: str, new_password: str) -> Outcome[Any]:
        return await self._post(
            "/user/reset_password",
            {"email": email, "sms_code": sms_code, "new_password": new_password},
        )

    async def version(self) -> Outcome[Any]:
        return await self._get("/version")

    async def public_info(self) -> Outcome[Any]:
        return await self._get("/public/info")

    async def disclaimer(self) -> Outcome[Any]:
        return await self._get("/disclaimer")

    async def report_bug(
        self,
        severity: str,
        bug_description: str,
        *,
        api_key: str | None = None,
        screenshot_urls: list[str] | None = None,
        cursor_version: str | None = None,
    ) -> None:
        """Send a bug report. The response is not inspected."""
        url = legacy_url(self._config, "/report")
        report = build_bug_report(
            severity,
            bug_description,
            api_key=api_key,
            screenshot_urls=screenshot_urls,
            cursor_version=cursor_version,
        )
        with transport_errors():
            await self._client.post(url, headers=build_headers(auth_type="none"), json=report.to_payload())
