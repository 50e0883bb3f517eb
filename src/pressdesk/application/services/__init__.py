"""Application services (pure dashboard transforms and helpers)."""

from pressdesk.application.services.chart_helpers import (
    aggregate_by_period,
    calculate_percentage_change,
    clamp_percentage,
    format_compact_number,
    format_currency,
    format_percentage,
)
from pressdesk.application.services.metrics_normalizer import (
    FIELD_DEFAULTS,
    FieldDefault,
    MetricsNormalizer,
    normalize,
)
from pressdesk.application.services.navigation_state import NavigationState

__all__ = [
    "FIELD_DEFAULTS",
    "FieldDefault",
    "MetricsNormalizer",
    "NavigationState",
    "aggregate_by_period",
    "calculate_percentage_change",
    "clamp_percentage",
    "format_compact_number",
    "format_currency",
    "format_percentage",
    "normalize",
]
