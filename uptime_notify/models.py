"""Monitor and heartbeat shapes consumed by notification providers."""

from dataclasses import dataclass
from typing import Any, Optional

# Heartbeat status values reported by the monitoring application
DOWN = 0
UP = 1
PENDING = 2
MAINTENANCE = 3


@dataclass(frozen=True)
class TargetDescriptor:
    """What is being monitored, normalized from a monitor record."""
    kind: str
    url: Optional[str] = None
    hostname: Optional[str] = None
    port: Optional[int] = None
    id: Optional[Any] = None
    name: Optional[str] = None

    @classmethod
    def from_monitor(cls, monitor: dict) -> "TargetDescriptor":
        """
        Monitor shape (subset): {
            "id": int, "name": str, "type": str,
            "url": str, "hostname": str | None, "port": int | None,
        }
        """
        return cls(
            kind=monitor.get("type", ""),
            url=monitor.get("url"),
            hostname=monitor.get("hostname"),
            port=monitor.get("port"),
            id=monitor.get("id"),
            name=monitor.get("name"),
        )


def monitor_relative_url(monitor_id: Any) -> str:
    return f"/dashboard/{monitor_id}"
