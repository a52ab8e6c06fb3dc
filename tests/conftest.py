"""Test configuration for blade-access tests."""

from typing import Any

import httpx
import pytest

from blade_access import AccessConfig, BladeClient

LEGACY_URL = "https://legacy.test"


def blade_body(data: Any = None, *, code: int = 200, success: bool = True, msg: str = "ok") -> dict[str, Any]:
    """A Blade envelope as the identity backend sends it."""
    return {"code": code, "success": success, "data": data, "msg": msg}


def json_response(status_code: int, body: Any) -> httpx.Response:
    return httpx.Response(status_code, json=body)


@pytest.fixture
def config():
    return AccessConfig(legacy_base_url=LEGACY_URL)


@pytest.fixture
def client(config):
    """Shared BladeClient fixture for sync tests."""
    client = BladeClient(config)
    yield client
    client.close()
