"""Notification provider abstraction layer."""

from uptime_notify.providers.base import NotificationProvider
from uptime_notify.providers.xmatters import XMattersProvider
from uptime_notify.providers.resolver import PROVIDERS, resolve_provider

__all__ = [
    "NotificationProvider",
    "PROVIDERS",
    "XMattersProvider",
    "resolve_provider",
]
