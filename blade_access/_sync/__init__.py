"""Sync namespace classes for the Blade access layer."""

from .account import AccountNamespace
from .auth import AuthNamespace
from .legacy import LegacyNamespace
from .usage import UsageNamespace

__all__ = [
    "AuthNamespace",
    "AccountNamespace",
    "UsageNamespace",
    "LegacyNamespace",
]
