"""Deliver uptime monitor alerts to third-party alerting services."""

__version__ = "0.1.0"
