"""Resolve a notification provider from its type name."""

from uptime_notify.providers.base import NotificationProvider
from uptime_notify.providers.xmatters import XMattersProvider

PROVIDERS: dict[str, type[NotificationProvider]] = {
    "xmatters": XMattersProvider,
}


def resolve_provider(provider_type: str, **kwargs) -> NotificationProvider:
    """Instantiate the provider registered under ``provider_type``."""
    provider_cls = PROVIDERS.get(provider_type.lower())
    if provider_cls is None:
        raise ValueError(f"Unknown notification provider type: {provider_type}")
    return provider_cls(**kwargs)
