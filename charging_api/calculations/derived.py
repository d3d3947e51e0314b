"""
Per-Record Derived Metrics

Ratios a dashboard shows next to a single period:
- Energy and revenue per session
- Share of sessions in peak hours
- Estimated peak-hour sessions where the data has none
"""

import math
from typing import Optional

from charging_api.models import PeriodRecord

from .aggregation import average
from .constants import PEAK_HOUR_ESTIMATE_RATIO, PERCENT_DECIMALS, RATIO_DECIMALS


def energy_per_session(record: PeriodRecord) -> Optional[float]:
    """
    Average kWh delivered per charging session.

    Examples:
        >>> energy_per_session(PeriodRecord("Week 1", 343, 6860, 1372))
        20.0
    """
    if record.sessions == 0:
        return None
    return average(record.energy, record.sessions, RATIO_DECIMALS)


def revenue_per_session(record: PeriodRecord) -> Optional[float]:
    """Average revenue per charging session."""
    if record.sessions == 0:
        return None
    return average(record.revenue, record.sessions, RATIO_DECIMALS)


def peak_hour_share(record: PeriodRecord) -> Optional[float]:
    """
    Percentage of a period's sessions that fell in peak hours.

    Returns None for records without a peak-hour count or with no sessions.
    """
    if record.peak_hour_sessions is None or record.sessions == 0:
        return None
    return average(record.peak_hour_sessions * 100, record.sessions, PERCENT_DECIMALS)


def estimate_peak_hour_sessions(sessions: int, ratio: float = PEAK_HOUR_ESTIMATE_RATIO) -> int:
    """
    Approximate peak-hour sessions as a fixed share of total sessions.

    Display-only: the result is synthetic and must never be stored on a
    record or fed into summarize().

    Examples:
        >>> estimate_peak_hour_sessions(343)
        205
    """
    if sessions < 0:
        raise ValueError("sessions must be non-negative")
    if not 0 <= ratio <= 1:
        raise ValueError("ratio must be between 0 and 1")
    return math.floor(sessions * ratio)


def record_metrics(record: PeriodRecord) -> dict:
    """Derived metrics for one record, keyed for JSON output."""
    return {
        "energyPerSession": energy_per_session(record),
        "revenuePerSession": revenue_per_session(record),
        "peakHourShare": peak_hour_share(record),
    }
