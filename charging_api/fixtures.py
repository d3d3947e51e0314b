"""
Built-in sample charging data.

Used when no DATASET_PATH is configured. The rows use the same wire format
as JSON fixture files.
"""

from typing import Dict

from charging_api.dataset import DataSet, build_datasets
from charging_api.models import View

DAILY_SAMPLE = [
    {"date": "2025-05-01", "sessions": 45, "energy": 900, "revenue": 180, "peakHour": 28},
    {"date": "2025-05-02", "sessions": 52, "energy": 1040, "revenue": 208, "peakHour": 32},
    {"date": "2025-05-03", "sessions": 38, "energy": 760, "revenue": 152, "peakHour": 22},
    {"date": "2025-05-04", "sessions": 41, "energy": 820, "revenue": 164, "peakHour": 25},
    {"date": "2025-05-05", "sessions": 67, "energy": 1340, "revenue": 268, "peakHour": 42},
    {"date": "2025-05-06", "sessions": 73, "energy": 1460, "revenue": 292, "peakHour": 48},
    {"date": "2025-05-07", "sessions": 58, "energy": 1160, "revenue": 232, "peakHour": 35},
    {"date": "2025-05-08", "sessions": 49, "energy": 980, "revenue": 196, "peakHour": 31},
    {"date": "2025-05-09", "sessions": 55, "energy": 1100, "revenue": 220, "peakHour": 34},
    {"date": "2025-05-10", "sessions": 61, "energy": 1220, "revenue": 244, "peakHour": 38},
    {"date": "2025-05-11", "sessions": 44, "energy": 880, "revenue": 176, "peakHour": 27},
    {"date": "2025-05-12", "sessions": 69, "energy": 1380, "revenue": 276, "peakHour": 43},
    {"date": "2025-05-13", "sessions": 71, "energy": 1420, "revenue": 284, "peakHour": 45},
    {"date": "2025-05-14", "sessions": 63, "energy": 1260, "revenue": 252, "peakHour": 39},
    {"date": "2025-05-15", "sessions": 57, "energy": 1140, "revenue": 228, "peakHour": 36},
]

WEEKLY_SAMPLE = [
    {"week": "Week 1", "sessions": 343, "energy": 6860, "revenue": 1372},
    {"week": "Week 2", "sessions": 385, "energy": 7700, "revenue": 1540},
    {"week": "Week 3", "sessions": 260, "energy": 5200, "revenue": 1040},
]


def sample_datasets() -> Dict[View, DataSet]:
    """Validated data sets built from the sample rows."""
    return build_datasets({
        View.DAILY.value: DAILY_SAMPLE,
        View.WEEKLY.value: WEEKLY_SAMPLE,
    })
