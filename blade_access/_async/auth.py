"""Auth namespace for the Blade access layer (async)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .._http import basic_credential, build_headers, build_query_params, transport_errors
from .._operations import (
    read_password_update,
    read_registration,
    read_tenant_id,
    read_token_payload,
    record_login_failure,
    record_login_success,
    token_exchange_params,
)
from ..exceptions import BladeAccessError
from ..tokens import extract_token
from ..types import Credentials, LoginStage

if TYPE_CHECKING:
    import httpx

    from ..config import AccessConfig
    from ..envelope import Outcome

logger = logging.getLogger(__name__)


class AsyncAuthNamespace:
    """Async namespace for identity operations: tenant lookup, login, registration."""

    def __init__(self, client: httpx.AsyncClient, config: AccessConfig) -> None:
        self._client = client
        self._config = config
        self._basic = basic_credential(config.client_id, config.client_secret)

    async def get_tenant_id(self, account: str, tenant_id: str | None = None) -> str:
        """Resolve the tenant an account belongs to.

        A supplied ``tenant_id`` is returned without a request. See
        ``AuthNamespace.get_tenant_id`` for the errors raised.
        """
        if tenant_id:
            return tenant_id

        with transport_errors():
            response = await self._client.get(
                f"{self._config.system_base_url}/user/getTenantId",
                headers=build_headers(self._basic, auth_type="basic"),
                params={"account": account},
            )
        return read_tenant_id(response)

    async def login(self, credentials: Credentials) -> str:
        """Log in and return the session token.

        The tenant lookup and the password grant run one after the other,
        never concurrently. The first failure is re-raised with ``stage`` set.
        """
        logger.debug("Login requested for %s (device %s)", credentials.account, credentials.device_id or "-")

        stage = LoginStage.RESOLVING_TENANT
        try:
            tenant_id = await self.get_tenant_id(credentials.account, credentials.tenant_id)

            stage = LoginStage.EXCHANGING_CREDENTIALS
            logger.debug("Using tenant %s", tenant_id)
            with transport_errors():
                response = await self._client.post(
                    f"{self._config.auth_base_url}/token",
                    headers=build_headers(self._basic, auth_type="basic"),
                    params=token_exchange_params(credentials, tenant_id),
                )
            payload = read_token_payload(response)

            stage = LoginStage.EXTRACTING_TOKEN
            token = extract_token(payload)
        except BladeAccessError as e:
            record_login_failure(e, stage, credentials.account)
            raise

        record_login_success(credentials.account, tenant_id, token)
        return token

    async def register(self, tenant_id: str, account: str, password: str) -> Outcome[str]:
        """Register a new account. The outcome carries a placeholder token."""
        with transport_errors():
            response = await self._client.post(
                f"{self._config.system_base_url}/user/register",
                headers=build_headers(self._basic, auth_type="basic"),
                json={"tenantId": tenant_id, "account": account, "password": password},
            )
        outcome = read_registration(response)
        logger.info("Registered %s in tenant %s", account, tenant_id)
        return outcome

    async def update_password(self, token: str, old_password: str, new_password: str) -> bool:
        with transport_errors():
            response = await self._client.post(
                f"{self._config.auth_host_url}/blade-system/user/update-password",
                headers=build_headers(token, auth_type="blade"),
                params=build_query_params(
                    oldPassword=old_password,
                    newPassword=new_password,
                    newPassword1=new_password,
                ),
            )
        return read_password_update(response)
