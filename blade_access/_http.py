"""Shared HTTP request utilities for sync and async clients."""

from __future__ import annotations

import base64
from contextlib import contextmanager
from typing import Any, Iterator

import httpx

from .config import DEFAULT_TIMEOUT_SECONDS, DEFAULT_VERIFY_TLS
from .exceptions import TransportError


def create_client(timeout: float = DEFAULT_TIMEOUT_SECONDS, verify: bool = DEFAULT_VERIFY_TLS) -> httpx.Client:
    """Create the shared sync transport."""
    return httpx.Client(timeout=timeout, verify=verify)


def create_async_client(
    timeout: float = DEFAULT_TIMEOUT_SECONDS, verify: bool = DEFAULT_VERIFY_TLS
) -> httpx.AsyncClient:
    """Create the shared async transport."""
    return httpx.AsyncClient(timeout=timeout, verify=verify)


def basic_credential(client_id: str, client_secret: str) -> str:
    """Encode a client id/secret pair for a Basic Authorization header."""
    return base64.b64encode(f"{client_id}:{client_secret}".encode()).decode()


def build_headers(credential: str | None = None, auth_type: str = "bearer") -> dict[str, str]:
    """Build request headers with appropriate authentication.

    auth_type is one of:
        - "basic": ``Authorization: Basic <credential>`` (already encoded)
        - "bearer": ``Authorization: Bearer <credential>``
        - "blade": ``Blade-Auth: bearer <credential>``
        - "cookie": ``Cookie: <credential>``
        - "none": no authentication header
    """
    headers = {"Content-Type": "application/json"}

    if auth_type == "none":
        return headers
    if credential is None:
        raise ValueError(f"auth type {auth_type!r} needs a credential")

    if auth_type == "basic":
        headers["Authorization"] = f"Basic {credential}"
    elif auth_type == "bearer":
        headers["Authorization"] = f"Bearer {credential}"
    elif auth_type == "blade":
        headers["Blade-Auth"] = f"bearer {credential}"
    elif auth_type == "cookie":
        headers["Cookie"] = credential
    else:
        raise ValueError(f"Unsupported auth type: {auth_type}")

    return headers


def build_query_params(**kwargs: Any) -> dict[str, Any]:
    """Build query parameters, filtering out None values."""
    return {k: v for k, v in kwargs.items() if v is not None}


@contextmanager
def transport_errors() -> Iterator[None]:
    """Convert httpx failures raised inside the block into TransportError."""
    try:
        yield
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(str(e) or type(e).__name__) from e
