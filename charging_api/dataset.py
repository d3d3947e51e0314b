"""
Read-only data sets of period records.

A DataSet is built and validated once at startup, then shared by every
request. Validation failures are raised immediately so a misconfigured
fixture stops the application from starting.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from charging_api.exceptions import (
    ConfigurationError,
    DataSetValidationError,
    EmptyDataSetError,
)
from charging_api.models import PeriodRecord, View

logger = logging.getLogger(__name__)


class DataSet:
    """Immutable, chronologically ordered records for a single view."""

    __slots__ = ("_view", "_records", "_index")

    def __init__(self, view: Union[View, str], records: Iterable[PeriodRecord]):
        view = View.parse(view)
        records = tuple(records)
        if not records:
            raise EmptyDataSetError(view.value)

        index: Dict[str, PeriodRecord] = {}
        previous = None
        for position, record in enumerate(records):
            if not isinstance(record, PeriodRecord):
                raise DataSetValidationError("Expected a PeriodRecord", value=repr(record), index=position)
            if record.view is not view:
                raise DataSetValidationError(
                    f"Record does not belong to the {view.value} view", field="period", value=record.key, index=position
                )
            if view is View.DAILY and record.peak_hour_sessions is None:
                raise DataSetValidationError(
                    "Daily records require peakHour", field="peakHour", index=position
                )
            if view is View.WEEKLY and record.peak_hour_sessions is not None:
                raise DataSetValidationError(
                    "Weekly records do not carry peakHour", field="peakHour", index=position
                )
            if record.key in index:
                raise DataSetValidationError("Duplicate period", field="period", value=record.key, index=position)
            # Weekly labels keep fixture order; dates must increase
            if view is View.DAILY and previous is not None and record.period <= previous.period:
                raise DataSetValidationError(
                    "Daily records must be in chronological order", field="period", value=record.key, index=position
                )
            index[record.key] = record
            previous = record

        self._view = view
        self._records = records
        self._index = index

    @property
    def view(self) -> View:
        return self._view

    @property
    def records(self) -> Tuple[PeriodRecord, ...]:
        return self._records

    def get(self, key: str) -> Optional[PeriodRecord]:
        """Exact-match lookup on the period key."""
        return self._index.get(key)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PeriodRecord]:
        return iter(self._records)

    def __getitem__(self, position: int) -> PeriodRecord:
        return self._records[position]

    def __eq__(self, other) -> bool:
        if not isinstance(other, DataSet):
            return NotImplemented
        return self._view is other._view and self._records == other._records

    def __repr__(self) -> str:
        return f"DataSet(view={self._view.value!r}, records={len(self._records)})"

    @classmethod
    def from_dicts(cls, view: Union[View, str], rows: Iterable[dict]) -> "DataSet":
        """Build a data set from wire-format dicts, reporting the failing row index."""
        view = View.parse(view)
        records = []
        for position, row in enumerate(rows):
            try:
                records.append(PeriodRecord.from_dict(view, row))
            except DataSetValidationError as e:
                raise DataSetValidationError(e.message, field=e.field, value=e.value, index=position) from e
        return cls(view, records)


def build_datasets(payload: Mapping) -> Dict[View, DataSet]:
    """
    Build one DataSet per view from a mapping of view name to rows.

    Args:
        payload: Dict like {"daily": [...], "weekly": [...]}

    Returns:
        Dict mapping each View to its validated DataSet

    Raises:
        DataSetValidationError: If a view is missing or a row is invalid
        EmptyDataSetError: If a view has no rows
    """
    if not isinstance(payload, Mapping):
        raise DataSetValidationError("Fixture must be an object keyed by view")

    datasets = {}
    for view in View:
        rows = payload.get(view.value)
        if rows is None:
            raise DataSetValidationError(f"Missing '{view.value}' records", field=view.value)
        if not isinstance(rows, list):
            raise DataSetValidationError(f"'{view.value}' must be a list", field=view.value)
        datasets[view] = DataSet.from_dicts(view, rows)
    return datasets


def load_dataset_file(path: Union[str, Path]) -> Dict[View, DataSet]:
    """Load and validate a JSON fixture file."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Dataset file not found: {path}", config_key="DATASET_PATH") from None
    except json.JSONDecodeError as e:
        raise DataSetValidationError(f"Dataset file is not valid JSON: {e.msg}", value=str(path)) from e

    datasets = build_datasets(payload)
    logger.info(
        f"Loaded dataset file {path}: "
        + ", ".join(f"{view.value}={len(ds)}" for view, ds in datasets.items())
    )
    return datasets
