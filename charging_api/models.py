"""
Value types for charging analytics.

PeriodRecord is one row of aggregated charging activity for a day or a
week. SummaryStats is derived from a sequence of records and never stored.
"""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional, Union

from charging_api.exceptions import DataSetValidationError, InvalidViewError


class View(str, Enum):
    """Aggregation granularity selector."""

    DAILY = "daily"
    WEEKLY = "weekly"

    @classmethod
    def parse(cls, value: Union["View", str]) -> "View":
        """Return the View for ``value`` or raise InvalidViewError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidViewError(value) from None

    @property
    def period_field(self) -> str:
        """Name of the period key in the wire format."""
        return "date" if self is View.DAILY else "week"


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_amount(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        # Amounts must be representable as a float
        return math.isfinite(float(value)) and value >= 0
    except OverflowError:
        return False


@dataclass(frozen=True)
class PeriodRecord:
    """Charging activity for one period (a calendar day or a labelled week)."""

    period: Union[date, str]
    sessions: int
    energy: float  # kWh
    revenue: float
    peak_hour_sessions: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.period, str):
            if not self.period.strip():
                raise DataSetValidationError("Period label must not be blank", field="period", value=self.period)
        elif not isinstance(self.period, date):
            raise DataSetValidationError("Period must be a date or a label", field="period", value=self.period)

        if not _is_count(self.sessions):
            raise DataSetValidationError(
                "sessions must be a non-negative integer", field="sessions", value=self.sessions
            )
        if not _is_amount(self.energy):
            raise DataSetValidationError("energy must be a non-negative number", field="energy", value=self.energy)
        if not _is_amount(self.revenue):
            raise DataSetValidationError("revenue must be a non-negative number", field="revenue", value=self.revenue)

        if self.peak_hour_sessions is not None:
            if not _is_count(self.peak_hour_sessions):
                raise DataSetValidationError(
                    "peakHour must be a non-negative integer", field="peakHour", value=self.peak_hour_sessions
                )
            if self.peak_hour_sessions > self.sessions:
                raise DataSetValidationError(
                    "peakHour cannot exceed sessions", field="peakHour", value=self.peak_hour_sessions
                )

    @property
    def key(self) -> str:
        """Identifier used for lookups: ISO date for days, the label for weeks."""
        if isinstance(self.period, date):
            return self.period.isoformat()
        return self.period

    @property
    def view(self) -> View:
        return View.DAILY if isinstance(self.period, date) else View.WEEKLY

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the dashboard's wire format."""
        data = {
            self.view.period_field: self.key,
            "sessions": self.sessions,
            "energy": self.energy,
            "revenue": self.revenue,
        }
        if self.peak_hour_sessions is not None:
            data["peakHour"] = self.peak_hour_sessions
        return data

    @classmethod
    def from_dict(cls, view: Union[View, str], data: Dict[str, Any]) -> "PeriodRecord":
        """
        Build a record from its wire-format dict.

        Args:
            view: Which variant to build (daily records require a date and peakHour)
            data: Dict with date/week, sessions, energy, revenue and optionally peakHour

        Raises:
            DataSetValidationError: If a field is missing or malformed
        """
        view = View.parse(view)
        if not isinstance(data, dict):
            raise DataSetValidationError("Record must be an object", value=data)

        field = view.period_field
        for required in (field, "sessions", "energy", "revenue"):
            if required not in data:
                raise DataSetValidationError(f"Missing required field '{required}'", field=required)

        raw_period = data[field]
        if not isinstance(raw_period, str):
            raise DataSetValidationError(f"'{field}' must be a string", field=field, value=raw_period)

        peak = data.get("peakHour")
        if view is View.DAILY:
            try:
                period = date.fromisoformat(raw_period)
            except ValueError:
                raise DataSetValidationError("Invalid ISO date", field=field, value=raw_period) from None
            if peak is None:
                raise DataSetValidationError("Missing required field 'peakHour'", field="peakHour")
        else:
            period = raw_period
            if peak is not None:
                raise DataSetValidationError(
                    "Weekly records do not carry peakHour", field="peakHour", value=peak
                )

        return cls(
            period=period,
            sessions=data["sessions"],
            energy=data["energy"],
            revenue=data["revenue"],
            peak_hour_sessions=peak,
        )


@dataclass(frozen=True)
class SummaryStats:
    """Totals, maximum and rounded averages over a set of period records."""

    total_sessions: int
    total_energy: float
    total_revenue: float
    peak_usage: int
    avg_sessions: int
    avg_energy: int
    avg_revenue: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSessions": self.total_sessions,
            "totalEnergy": self.total_energy,
            "totalRevenue": self.total_revenue,
            "peakUsage": self.peak_usage,
            "avgSessions": self.avg_sessions,
            "avgEnergy": self.avg_energy,
            "avgRevenue": self.avg_revenue,
        }
