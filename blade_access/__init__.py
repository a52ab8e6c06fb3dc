"""Blade access layer - login, account and usage lookups for the desktop app."""

from importlib.metadata import PackageNotFoundError, version

from .async_client import AsyncBladeClient
from .client import BladeClient
from .config import AccessConfig
from .envelope import EnvelopeKind, Outcome, normalize
from .exceptions import (
    AccountNotFound,
    BackendError,
    BladeAccessError,
    ConfigurationError,
    MalformedResponse,
    NoTokenField,
    ParseError,
    TransportError,
)
from .types import AccountDetail, ActivationResult, Credentials, LoginStage, UserInfo

__all__ = [
    "BladeClient",
    "AsyncBladeClient",
    "AccessConfig",
    "Credentials",
    "LoginStage",
    "AccountDetail",
    "ActivationResult",
    "UserInfo",
    "EnvelopeKind",
    "Outcome",
    "normalize",
    "BladeAccessError",
    "TransportError",
    "ParseError",
    "BackendError",
    "AccountNotFound",
    "MalformedResponse",
    "NoTokenField",
    "ConfigurationError",
]

try:
    __version__ = version("blade-access")
except PackageNotFoundError:
    __version__ = "0.1.0"
