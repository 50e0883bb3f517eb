"""Metrics ports (read side).

A metrics source supplies raw, untyped records. Normalization into the
dashboard read models happens in the application layer, so callers never
depend on where the numbers came from.
"""

from pressdesk.application.ports.metrics.metrics_source_port import MetricsSource

__all__ = ["MetricsSource"]
