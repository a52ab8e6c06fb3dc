"""Account namespace for the Blade access layer (async)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .._http import build_headers, transport_errors
from .._operations import (
    legacy_url,
    read_account_detail,
    read_activation,
    read_user_detail,
    user_info_from_detail,
)

if TYPE_CHECKING:
    import httpx

    from ..config import AccessConfig
    from ..envelope import Outcome
    from ..types import AccountDetail, ActivationResult, UserInfo


class AsyncAccountNamespace:
    """Async namespace for operations on the logged-in account."""

    def __init__(self, client: httpx.AsyncClient, config: AccessConfig) -> None:
        self._client = client
        self._config = config

    async def activate(self, token: str, card_key: str) -> Outcome[ActivationResult]:
        """Redeem a card key. Expiry and level are filled in locally."""
        with transport_errors():
            response = await self._client.post(
                f"{self._config.system_base_url}/cardKey/useNew",
                headers=build_headers(token, auth_type="blade"),
                json={"cardKey": card_key},
            )
        return read_activation(response)

    async def detail(self, token: str) -> Outcome[AccountDetail]:
        """Fetch the account's email and split its composite session token."""
        with transport_errors():
            response = await self._client.get(
                legacy_url(self._config, "/account/get"),
                headers=build_headers(token),
            )
        return read_account_detail(response)

    async def user_detail(self, token: str) -> dict[str, Any]:
        with transport_errors():
            response = await self._client.get(
                f"{self._config.auth_host_url}/blade-system/user/info",
                headers=build_headers(token, auth_type="blade"),
            )
        return read_user_detail(response)

    async def user_info(self, token: str) -> UserInfo:
        return user_info_from_detail(await self.user_detail(token))
