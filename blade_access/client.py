"""Synchronous HTTP client for the Blade access layer."""

from __future__ import annotations

from typing import Any

import httpx

from ._http import create_client
from ._sync import AccountNamespace, AuthNamespace, LegacyNamespace, UsageNamespace
from .config import DEFAULT_TIMEOUT_SECONDS, AccessConfig


class BladeClient:
    """Synchronous client for the Blade identity backend and the usage service.

    Example:
        >>> from blade_access import BladeClient, Credentials
        >>> with BladeClient() as client:
        ...     token = client.auth.login(Credentials(account="alice", password="..."))
        ...     print(client.usage.get(None, token).data)

    The client provides namespaced access to the backends:
        - client.auth: Tenant lookup, login, registration, password update
        - client.account: Card-key activation and account details
        - client.usage: Profile and usage from the third-party service
        - client.legacy: The original backend (off unless configured)

    Nothing is kept between calls except the connection pool; callers carry
    the session token themselves.
    """

    def __init__(
        self,
        config: AccessConfig | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the Blade client.

        Args:
            config: Endpoints and client credential. Defaults to
                ``AccessConfig.from_env()``.
            timeout: Request timeout in seconds (default: 10). Ignored when
                ``http_client`` is given.
            http_client: Transport to share with other clients. It is left
                open by ``close()``.
        """
        self._config = config or AccessConfig.from_env()
        self._owns_client = http_client is None
        self._client = http_client or create_client(timeout=timeout)

        # Initialize namespaces
        self.auth = AuthNamespace(self._client, self._config)
        self.account = AccountNamespace(self._client, self._config)
        self.usage = UsageNamespace(self._client, self._config)
        self.legacy = LegacyNamespace(self._client, self._config)

    @property
    def config(self) -> AccessConfig:
        return self._config

    def close(self) -> None:
        """Release the underlying HTTP client resources."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> BladeClient:
        return self

    def __exit__(self, exc_type: type | None, exc: BaseException | None, traceback: Any) -> None:
        self.close()
