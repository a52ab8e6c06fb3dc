"""Usage namespace for the Blade access layer (sync)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .._http import build_headers, transport_errors
from .._operations import ANONYMOUS_USER_ID, read_third_party
from ..tokens import build_session_cookie

if TYPE_CHECKING:
    import httpx

    from ..config import AccessConfig
    from ..envelope import Outcome


class UsageNamespace:
    """Namespace for the third-party usage service (session cookie auth)."""

    def __init__(self, client: httpx.Client, config: AccessConfig) -> None:
        self._client = client
        self._config = config

    def _get(self, path: str, user_id: str, token: str) -> Outcome[dict[str, Any]]:
        with transport_errors():
            response = self._client.get(
                f"{self._config.cursor_base_url}{path}",
                headers=build_headers(build_session_cookie(user_id, token), auth_type="cookie"),
            )
        return read_third_party(response)

    def profile(self, user_id: str, token: str) -> Outcome[dict[str, Any]]:
        """Get the profile of the account behind a session.

        Returns:
            Outcome whose data is the service's JSON object, unchanged.
        """
        return self._get("/api/auth/me", user_id, token)

    def get(self, user_id: str | None, token: str) -> Outcome[dict[str, Any]]:
        """Get request quotas and usage for a session.

        Args:
            user_id: Owner of the session. The endpoint only checks the token,
                so None sends a placeholder id.
            token: Session token of the account.

        Returns:
            Outcome whose data is the service's JSON object, unchanged.
        """
        return self._get("/api/usage", user_id or ANONYMOUS_USER_ID, token)
