"""Async namespace classes for the Blade access layer."""

from .account import AsyncAccountNamespace
from .auth import AsyncAuthNamespace
from .legacy import AsyncLegacyNamespace
from .usage import AsyncUsageNamespace

__all__ = [
    "AsyncAuthNamespace",
    "AsyncAccountNamespace",
    "AsyncUsageNamespace",
    "AsyncLegacyNamespace",
]
