"""Auth namespace for the Blade access layer (sync)."""

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


class AuthNamespace:
    """Namespace for identity operations: tenant lookup, login, registration."""

    def __init__(self, client: httpx.Client, config: AccessConfig) -> None:
        self._client = client
        self._config = config
        self._basic = basic_credential(config.client_id, config.client_secret)

    def get_tenant_id(self, account: str, tenant_id: str | None = None) -> str:
        """Resolve the tenant an account belongs to.

        Args:
            account: Account name as typed by the user.
            tenant_id: Already known tenant. Returned as-is without a request.

        Returns:
            The tenant id.

        Raises:
            AccountNotFound: The backend does not know the account.
            BackendError: The lookup failed; carries the backend's message.
            MalformedResponse: The lookup succeeded without a string tenant id.
        """
        if tenant_id:
            return tenant_id

        with transport_errors():
            response = self._client.get(
                f"{self._config.system_base_url}/user/getTenantId",
                headers=build_headers(self._basic, auth_type="basic"),
                params={"account": account},
            )
        return read_tenant_id(response)

    def login(self, credentials: Credentials) -> str:
        """Log in and return the session token.

        Resolves the tenant (unless ``credentials.tenant_id`` is set), runs the
        password grant, then pulls the token out of the grant's payload. The
        first failure is re-raised unchanged with ``stage`` set to the step
        that failed. Nothing is retried.
        """
        logger.debug("Login requested for %s (device %s)", credentials.account, credentials.device_id or "-")

        stage = LoginStage.RESOLVING_TENANT
        try:
            tenant_id = self.get_tenant_id(credentials.account, credentials.tenant_id)

            stage = LoginStage.EXCHANGING_CREDENTIALS
            logger.debug("Using tenant %s", tenant_id)
            with transport_errors():
                response = self._client.post(
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

    def register(self, tenant_id: str, account: str, password: str) -> Outcome[str]:
        """Register a new account.

        The backend does not issue a session on registration, so the returned
        outcome carries a placeholder token; log in to get a real one.

        Raises:
            BackendError: Registration was refused.
        """
        with transport_errors():
            response = self._client.post(
                f"{self._config.system_base_url}/user/register",
                headers=build_headers(self._basic, auth_type="basic"),
                json={"tenantId": tenant_id, "account": account, "password": password},
            )
        outcome = read_registration(response)
        logger.info("Registered %s in tenant %s", account, tenant_id)
        return outcome

    def update_password(self, token: str, old_password: str, new_password: str) -> bool:
        """Change the password of the logged-in user. Returns True or raises."""
        with transport_errors():
            response = self._client.post(
                f"{self._config.auth_host_url}/blade-system/user/update-password",
                headers=build_headers(token, auth_type="blade"),
                params=build_query_params(
                    oldPassword=old_password,
                    newPassword=new_password,
                    newPassword1=new_password,
                ),
            )
        return read_password_update(response)
