"""Classify monitor events into alert titles and target descriptors."""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from uptime_notify.models import DOWN, UP, TargetDescriptor

logger = logging.getLogger(__name__)

TEST_ALERT_TITLE = "Uptime Kuma Alert"

# Stands in for a monitor when the user presses the "Test" button
TEST_TARGET = TargetDescriptor(kind="ping", url="Uptime Kuma Test Button")


class EventKind(str, enum.Enum):
    TEST = "test"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class AlertEvent:
    kind: EventKind
    title: str
    target: TargetDescriptor
    status: Optional[int] = None


def classify_event(
    monitor: Optional[dict] = None,
    heartbeat: Optional[dict] = None,
) -> Optional[AlertEvent]:
    """
    Turn a (monitor, heartbeat) pair into an AlertEvent.

    A missing heartbeat means a test notification. Heartbeats that are
    neither UP nor DOWN (pending, maintenance) produce no event.
    """
    if heartbeat is None:
        return AlertEvent(kind=EventKind.TEST, title=TEST_ALERT_TITLE, target=TEST_TARGET)

    status = heartbeat.get("status")
    monitor = monitor or {}
    name = monitor.get("name", "")

    if status == UP:
        return AlertEvent(
            kind=EventKind.UP,
            title=f"{name} ✅ Up",
            target=TargetDescriptor.from_monitor(monitor),
            status=UP,
        )

    if status == DOWN:
        return AlertEvent(
            kind=EventKind.DOWN,
            title=f"{name} 🔴 Down",
            target=TargetDescriptor.from_monitor(monitor),
            status=DOWN,
        )

    logger.debug("No alert for monitor %s with heartbeat status %s", name, status)
    return None


def resolve_address(target: TargetDescriptor) -> Optional[str]:
    """Pick the human-readable address of a monitored target."""
    if target.kind == "port":
        address = target.hostname
        if target.port:
            address = f"{address}:{target.port}"
        return address
    if target.hostname is not None:
        return target.hostname
    return target.url
