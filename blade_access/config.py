"""Configuration helpers for the Blade access layer."""

from __future__ import annotations

import os
from dataclasses import dataclass

# Blade identity backend: tenant lookup, registration and card-key activation
DEFAULT_SYSTEM_BASE_URL = "http://27.25.153.228:8080/api/blade-system"
# Blade auth server: token exchange
DEFAULT_AUTH_BASE_URL = "http://27.25.153.228:8083/blade-auth"
# Same host as the auth server, serving the blade-system user endpoints
DEFAULT_AUTH_HOST_URL = "http://27.25.153.228:8083"
DEFAULT_CURSOR_BASE_URL = "https://www.cursor.com"
# The legacy backend is switched off until a base URL is configured.
DEFAULT_LEGACY_BASE_URL = ""

DEFAULT_CLIENT_ID = "saber"
DEFAULT_CLIENT_SECRET = "saber_secret"

DEFAULT_TIMEOUT_SECONDS = 10.0
# The Blade hosts serve self-signed certificates.
DEFAULT_VERIFY_TLS = False


def sanitize_base_url(url: str) -> str:
    """Ensure the base URL never ends with a trailing slash."""

    return url.rstrip("/")


@dataclass(frozen=True)
class AccessConfig:
    """Endpoints and static client credential shared by every operation."""

    system_base_url: str = DEFAULT_SYSTEM_BASE_URL
    auth_base_url: str = DEFAULT_AUTH_BASE_URL
    auth_host_url: str = DEFAULT_AUTH_HOST_URL
    cursor_base_url: str = DEFAULT_CURSOR_BASE_URL
    legacy_base_url: str = DEFAULT_LEGACY_BASE_URL
    client_id: str = DEFAULT_CLIENT_ID
    client_secret: str = DEFAULT_CLIENT_SECRET

    def __post_init__(self) -> None:
        for name in ("system_base_url", "auth_base_url", "auth_host_url", "cursor_base_url", "legacy_base_url"):
            object.__setattr__(self, name, sanitize_base_url(getattr(self, name)))

    @classmethod
    def from_env(cls) -> AccessConfig:
        """Build a config, letting BLADE_ACCESS_* environment variables override the defaults."""
        return cls(
            system_base_url=os.environ.get("BLADE_ACCESS_SYSTEM_URL", DEFAULT_SYSTEM_BASE_URL),
            auth_base_url=os.environ.get("BLADE_ACCESS_AUTH_URL", DEFAULT_AUTH_BASE_URL),
            auth_host_url=os.environ.get("BLADE_ACCESS_AUTH_HOST_URL", DEFAULT_AUTH_HOST_URL),
            cursor_base_url=os.environ.get("BLADE_ACCESS_CURSOR_URL", DEFAULT_CURSOR_BASE_URL),
            legacy_base_url=os.environ.get("BLADE_ACCESS_LEGACY_URL", DEFAULT_LEGACY_BASE_URL),
            client_id=os.environ.get("BLADE_ACCESS_CLIENT_ID", DEFAULT_CLIENT_ID),
            client_secret=os.environ.get("BLADE_ACCESS_CLIENT_SECRET", DEFAULT_CLIENT_SECRET),
        )

    @property
    def legacy_enabled(self) -> bool:
        return bool(self.legacy_base_url)
