"""Account namespace for the Blade access layer (sync)."""

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


class AccountNamespace:
    """Namespace for operations on the logged-in account."""

    def __init__(self, client: httpx.Client, config: AccessConfig) -> None:
        self._client = client
        self._config = config

    def activate(self, token: str, card_key: str) -> Outcome[ActivationResult]:
        """Redeem a card key for the logged-in account.

        Args:
            token: Session token from ``auth.login``.
            card_key: The card key to redeem.

        Returns:
            A successful outcome whose expiry (30 days out) and level (1) are
            filled in locally; the backend only answers yes or no.

        Raises:
            BackendError: The card key was refused.
        """
        with transport_errors():
            response = self._client.post(
                f"{self._config.system_base_url}/cardKey/useNew",
                headers=build_headers(token, auth_type="blade"),
                json={"cardKey": card_key},
            )
        return read_activation(response)

    def detail(self, token: str) -> Outcome[AccountDetail]:
        """Fetch the account's email and split its composite session token.

        Requires the legacy backend. A failed envelope comes back as a failed
        outcome; a token without ``::`` raises ``MalformedResponse``.
        """
        with transport_errors():
            response = self._client.get(
                legacy_url(self._config, "/account/get"),
                headers=build_headers(token),
            )
        return read_account_detail(response)

    def user_detail(self, token: str) -> dict[str, Any]:
        """Fetch the raw Blade user record."""
        with transport_errors():
            response = self._client.get(
                f"{self._config.auth_host_url}/blade-system/user/info",
                headers=build_headers(token, auth_type="blade"),
            )
        return read_user_detail(response)

    def user_info(self, token: str) -> UserInfo:
        """Fetch the Blade user record and summarize it."""
        return user_info_from_detail(self.user_detail(token))
