"""
Charging data query service.

Dispatches a view selector (and optionally a period identifier) to the
injected data sets and the aggregator. Every operation is a read over
immutable data, so the service is safe to share between requests.
"""

import logging
from typing import Dict, List, Mapping, Tuple, Union

from charging_api.calculations import estimate_peak_hour_sessions, summarize
from charging_api.calculations.constants import PEAK_HOUR_ESTIMATE_RATIO
from charging_api.dataset import DataSet
from charging_api.exceptions import ConfigurationError, NotFoundError
from charging_api.models import PeriodRecord, SummaryStats, View

logger = logging.getLogger(__name__)

ViewArg = Union[View, str]


class QueryService:
    """Read-only queries over one DataSet per view."""

    def __init__(
        self,
        datasets: Mapping[View, DataSet],
        peak_hour_ratio: float = PEAK_HOUR_ESTIMATE_RATIO,
    ):
        resolved: Dict[View, DataSet] = {}
        for key, dataset in datasets.items():
            view = View.parse(key)
            if not isinstance(dataset, DataSet):
                raise ConfigurationError(f"Data source for '{view.value}' is not a DataSet", config_key=view.value)
            if dataset.view is not view:
                raise ConfigurationError(
                    f"Data set for '{dataset.view.value}' registered under '{view.value}'",
                    config_key=view.value,
                )
            resolved[view] = dataset

        missing = [view.value for view in View if view not in resolved]
        if missing:
            raise ConfigurationError(f"No data set configured for: {', '.join(missing)}", config_key=missing[0])

        if not 0 <= peak_hour_ratio <= 1:
            raise ConfigurationError("Peak-hour estimate ratio must be between 0 and 1", "PEAK_HOUR_ESTIMATE_RATIO")

        self._datasets = resolved
        self._peak_hour_ratio = peak_hour_ratio

    def dataset(self, view: ViewArg) -> DataSet:
        """Return the DataSet for ``view`` or raise InvalidViewError."""
        return self._datasets[View.parse(view)]

    def list_by_view(self, view: ViewArg) -> Tuple[PeriodRecord, ...]:
        """All records for the view, in chronological order."""
        return self.dataset(view).records

    def find_by_view(self, view: ViewArg, identifier: str) -> PeriodRecord:
        """
        Find one record by exact match on its period key.

        Args:
            view: "daily" or "weekly"
            identifier: ISO date (daily) or week label (weekly)

        Raises:
            InvalidViewError: If view is not recognized
            NotFoundError: If no record has that key
        """
        dataset = self.dataset(view)
        record = dataset.get(identifier)
        if record is None:
            raise NotFoundError(identifier, dataset.view.value)
        return record

    def summary_by_view(self, view: ViewArg) -> SummaryStats:
        """Summary statistics over every record in the view."""
        return summarize(self.dataset(view).records)

    def peak_usage_by_view(self, view: ViewArg) -> List[dict]:
        """
        Peak-hour series for the usage chart.

        Weekly data has no peak-hour column, so weekly entries carry a
        synthetic estimate and are flagged ``estimated``.
        """
        dataset = self.dataset(view)
        series = []
        for record in dataset:
            estimated = record.peak_hour_sessions is None
            if estimated:
                peak = estimate_peak_hour_sessions(record.sessions, self._peak_hour_ratio)
            else:
                peak = record.peak_hour_sessions
            series.append({
                dataset.view.period_field: record.key,
                "sessions": record.sessions,
                "peakHour": peak,
                "estimated": estimated,
            })
        return series
