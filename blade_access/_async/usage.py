"""Usage namespace for the Blade access layer (async)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .._http import build_headers, transport_errors
from .._operations import ANONYMOUS_USER_ID, read_third_party
from ..tokens import build_session_cookie

if TYPE_CHECKING:
    import httpx

    from ..config import AccessConfig
    from ..envelope import Outcome


class AsyncUsageNamespace:
    """Async namespace for the third-party usage service."""

    def __init__(self, client: httpx.AsyncClient, config: AccessConfig) -> None:
        self._client = client
        self._config = config

    async def _get(self, path: str, user_id: str, token: str) -> Outcome[dict[str, Any]]:
        with transport_errors():
            response = await self._client.get(
                f"{self._config.cursor_base_url}{path}",
                headers=build_headers(build_session_cookie(user_id, token), auth_type="cookie"),
            )
        return read_third_party(response)

    async def profile(self, user_id: str, token: str) -> Outcome[dict[str, Any]]:
        return await self._get("/api/auth/me", user_id, token)

    async def get(self, user_id: str | None, token: str) -> Outcome[dict[str, Any]]:
        """Get request quotas and usage; None for ``user_id`` sends a placeholder."""
        return await self._get("/api/usage", user_id or ANONYMOUS_USER_ID, token)
