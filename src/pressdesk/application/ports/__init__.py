"""Ports (interfaces) implemented by infrastructure adapters."""

from pressdesk.application.ports.metrics import MetricsSource

__all__ = ["MetricsSource"]
