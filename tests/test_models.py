"""Tests for charging data value types."""

from datetime import date

import pytest

from charging_api.exceptions import DataSetValidationError, InvalidViewError
from charging_api.models import PeriodRecord, SummaryStats, View


class TestView:
    """Tests for the View selector."""

    def test_parse_strings(self):
        assert View.parse("daily") is View.DAILY
        assert View.parse("weekly") is View.WEEKLY

    def test_parse_view_passthrough(self):
        assert View.parse(View.WEEKLY) is View.WEEKLY

    @pytest.mark.parametrize("value", ["monthly", "Daily", "", None, 1])
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidViewError) as exc_info:
            View.parse(value)
        assert exc_info.value.view == value

    def test_period_field(self):
        assert View.DAILY.period_field == "date"
        assert View.WEEKLY.period_field == "week"

    def test_is_string_valued(self):
        assert View.DAILY == "daily"


class TestPeriodRecord:
    """Tests for PeriodRecord invariants and serialization."""

    def test_daily_record(self):
        record = PeriodRecord(date(2025, 5, 1), 45, 900, 180, 28)

        assert record.key == "2025-05-01"
        assert record.view is View.DAILY

    def test_weekly_record(self):
        record = PeriodRecord("Week 1", 343, 6860, 1372)

        assert record.key == "Week 1"
        assert record.view is View.WEEKLY
        assert record.peak_hour_sessions is None

    def test_is_immutable(self):
        record = PeriodRecord("Week 1", 343, 6860, 1372)
        with pytest.raises(AttributeError):
            record.sessions = 1

    def test_peak_hour_may_equal_sessions(self):
        record = PeriodRecord(date(2025, 5, 1), 10, 200, 40, 10)
        assert record.peak_hour_sessions == 10

    def test_peak_hour_exceeding_sessions_rejected(self):
        with pytest.raises(DataSetValidationError) as exc_info:
            PeriodRecord(date(2025, 5, 1), 10, 200, 40, 11)
        assert exc_info.value.field == "peakHour"

    @pytest.mark.parametrize("sessions", [-1, 1.5, True, "45", None])
    def test_invalid_sessions(self, sessions):
        with pytest.raises(DataSetValidationError) as exc_info:
            PeriodRecord("Week 1", sessions, 100, 10)
        assert exc_info.value.field == "sessions"

    @pytest.mark.parametrize("energy", [-0.1, float("nan"), float("inf"), "900", False, 10**400])
    def test_invalid_energy(self, energy):
        with pytest.raises(DataSetValidationError) as exc_info:
            PeriodRecord("Week 1", 1, energy, 10)
        assert exc_info.value.field == "energy"

    def test_large_integer_amount_accepted(self):
        record = PeriodRecord("Week 1", 1, 10**30, 10**20)
        assert record.energy == 10**30

    def test_invalid_revenue(self):
        with pytest.raises(DataSetValidationError) as exc_info:
            PeriodRecord("Week 1", 1, 10, -5)
        assert exc_info.value.field == "revenue"

    def test_blank_label_rejected(self):
        with pytest.raises(DataSetValidationError):
            PeriodRecord("  ", 1, 10, 5)

    def test_non_date_period_rejected(self):
        with pytest.raises(DataSetValidationError):
            PeriodRecord(20250501, 1, 10, 5)

    def test_to_dict_daily(self):
        record = PeriodRecord(date(2025, 5, 1), 45, 900, 180, 28)
        assert record.to_dict() == {
            "date": "2025-05-01",
            "sessions": 45,
            "energy": 900,
            "revenue": 180,
            "peakHour": 28,
        }

    def test_to_dict_weekly_omits_peak_hour(self):
        record = PeriodRecord("Week 2", 385, 7700, 1540)
        assert record.to_dict() == {
            "week": "Week 2",
            "sessions": 385,
            "energy": 7700,
            "revenue": 1540,
        }


class TestPeriodRecordFromDict:
    """Tests for building records from wire-format dicts."""

    def test_daily(self):
        record = PeriodRecord.from_dict(
            "daily", {"date": "2025-05-01", "sessions": 45, "energy": 900, "revenue": 180, "peakHour": 28}
        )
        assert record.period == date(2025, 5, 1)
        assert record.peak_hour_sessions == 28

    def test_weekly(self):
        record = PeriodRecord.from_dict(View.WEEKLY, {"week": "Week 1", "sessions": 343, "energy": 6860, "revenue": 1372})
        assert record.period == "Week 1"

    def test_missing_field(self):
        with pytest.raises(DataSetValidationError) as exc_info:
            PeriodRecord.from_dict("weekly", {"week": "Week 1", "sessions": 1, "energy": 2})
        assert exc_info.value.field == "revenue"

    def test_daily_requires_peak_hour(self):
        with pytest.raises(DataSetValidationError) as exc_info:
            PeriodRecord.from_dict("daily", {"date": "2025-05-01", "sessions": 1, "energy": 2, "revenue": 3})
        assert exc_info.value.field == "peakHour"

    def test_weekly_rejects_peak_hour(self):
        with pytest.raises(DataSetValidationError):
            PeriodRecord.from_dict(
                "weekly", {"week": "Week 1", "sessions": 10, "energy": 2, "revenue": 3, "peakHour": 6}
            )

    def test_invalid_date(self):
        with pytest.raises(DataSetValidationError) as exc_info:
            PeriodRecord.from_dict(
                "daily", {"date": "05/01/2025", "sessions": 1, "energy": 2, "revenue": 3, "peakHour": 0}
            )
        assert exc_info.value.value == "05/01/2025"

    def test_non_string_period(self):
        with pytest.raises(DataSetValidationError):
            PeriodRecord.from_dict("weekly", {"week": 1, "sessions": 1, "energy": 2, "revenue": 3})

    def test_not_a_dict(self):
        with pytest.raises(DataSetValidationError):
            PeriodRecord.from_dict("weekly", ["Week 1", 1, 2, 3])

    def test_invalid_view(self):
        with pytest.raises(InvalidViewError):
            PeriodRecord.from_dict("monthly", {})


class TestSummaryStats:
    def test_to_dict_uses_dashboard_keys(self):
        stats = SummaryStats(988, 19760, 3952, 385, 329, 6587, 1317)
        assert stats.to_dict() == {
            "totalSessions": 988,
            "totalEnergy": 19760,
            "totalRevenue": 3952,
            "peakUsage": 385,
            "avgSessions": 329,
            "avgEnergy": 6587,
            "avgRevenue": 1317,
        }
