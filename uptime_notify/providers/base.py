"""Base notification provider interface."""

from abc import ABC, abstractmethod
from typing import Optional

from uptime_notify.errors import TransportError


class NotificationProvider(ABC):
    """
    Common interface for all notification destinations.
    Each provider implements send() using its own API/protocol.
    """

    @property
    @abstractmethod
    def provider_type(self) -> str:
        ...

    @abstractmethod
    async def send(
        self,
        config: dict,
        message: str,
        monitor: Optional[dict] = None,
        heartbeat: Optional[dict] = None,
    ) -> Optional[str]:
        """
        Deliver one alert. Returns a confirmation message, or None when
        the event does not warrant a notification.
        """
        ...

    def raise_transport_error(self, exc: Exception) -> None:
        """Re-raise a transport failure as the single outward-facing TransportError."""
        raise TransportError(f"{self.provider_type} request failed: {exc}") from exc
