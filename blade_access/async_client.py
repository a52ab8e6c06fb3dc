"""Asynchronous HTTP client for the Blade access layer."""

from __future__ import annotations

from typing import Any

import httpx

from ._async import (
    AsyncAccountNamespace,
    AsyncAuthNamespace,
    AsyncLegacyNamespace,
    AsyncUsageNamespace,
)
from ._http import create_async_client
from .config import DEFAULT_TIMEOUT_SECONDS, AccessConfig


class AsyncBladeClient:
    """Asynchronous client for the Blade identity backend and the usage service.

    Example:
        >>> import asyncio
        >>> from blade_access import AsyncBladeClient, Credentials
        >>>
        >>> async def main():
        ...     async with AsyncBladeClient() as client:
        ...         token = await client.auth.login(Credentials(account="alice", password="..."))
        ...         print((await client.usage.get(None, token)).data)
        >>>
        >>> asyncio.run(main())

    One client may serve many concurrent operations; each operation runs its
    own requests in sequence and shares only the connection pool.
    """

    def __init__(
        self,
        config: AccessConfig | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the async Blade client.

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
        self._client = http_client or create_async_client(timeout=timeout)

        # Initialize async namespaces
        self.auth = AsyncAuthNamespace(self._client, self._config)
        self.account = AsyncAccountNamespace(self._client, self._config)
        self.usage = AsyncUsageNamespace(self._client, self._config)
        self.legacy = AsyncLegacyNamespace(self._client, self._config)

    @property
    def config(self) -> AccessConfig:
        return self._config

    async def close(self) -> None:
        """Release the underlying HTTP client resources."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncBladeClient:
        return self

    async def __aexit__(self, exc_type: type | None, exc: BaseException | None, traceback: Any) -> None:
        await self.close()
