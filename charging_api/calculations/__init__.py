"""
Charging analytics calculation module.

Pure functions over period records: the summary aggregation used by every
summary endpoint, plus per-record derived metrics.

Usage:
    from charging_api.calculations import summarize
    from charging_api.calculations.constants import PEAK_HOUR_ESTIMATE_RATIO
"""

# Aggregation
from .aggregation import (
    average,
    round_half_away_from_zero,
    summarize,
)

# Derived metrics
from .derived import (
    energy_per_session,
    estimate_peak_hour_sessions,
    peak_hour_share,
    record_metrics,
    revenue_per_session,
)

__all__ = [
    # Aggregation
    "summarize",
    "average",
    "round_half_away_from_zero",
    # Derived
    "energy_per_session",
    "revenue_per_session",
    "peak_hour_share",
    "estimate_peak_hour_sessions",
    "record_metrics",
]
