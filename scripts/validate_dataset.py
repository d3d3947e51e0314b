#!/usr/bin/env python3
"""
Charging Dataset Validation Utility

Checks a JSON fixture file before it is deployed as DATASET_PATH and
prints the summary statistics the API would serve for it.

Usage:
    python validate_dataset.py data/charging.json
    python validate_dataset.py data/charging.json --json
"""

import argparse
import json
import sys

from charging_api.calculations import summarize
from charging_api.dataset import load_dataset_file
from charging_api.exceptions import ChargingApiError


def print_report(datasets) -> None:
    """Print a human-readable summary per view."""
    print("=" * 60)
    print("CHARGING DATASET REPORT")
    print("=" * 60)

    for view, dataset in datasets.items():
        stats = summarize(dataset.records)
        print(f"\n{view.value.upper()} ({len(dataset)} records: {dataset[0].key} .. {dataset[-1].key})")
        print(f"  Total sessions: {stats.total_sessions}")
        print(f"  Total energy:   {stats.total_energy} kWh")
        print(f"  Total revenue:  {stats.total_revenue}")
        print(f"  Peak usage:     {stats.peak_usage} sessions")
        print(f"  Averages:       {stats.avg_sessions} sessions, "
              f"{stats.avg_energy} kWh, {stats.avg_revenue} revenue")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Validate a charging data fixture file')
    parser.add_argument('path', help='JSON file with "daily" and "weekly" records')
    parser.add_argument('--json', action='store_true', help='Output summaries as JSON')
    args = parser.parse_args(argv)

    try:
        datasets = load_dataset_file(args.path)
    except ChargingApiError as e:
        print(f"Invalid dataset: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(
            {view.value: summarize(ds.records).to_dict() for view, ds in datasets.items()},
            indent=2,
        ))
    else:
        print_report(datasets)

    return 0


if __name__ == '__main__':
    sys.exit(main())
