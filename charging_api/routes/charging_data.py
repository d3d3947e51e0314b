"""
Charging data routes for the charging analytics API.

Serves the daily/weekly data sets, summary statistics, single-period
lookups and the peak-usage series behind the dashboard charts.
"""

import logging

from flask import Blueprint, current_app

from charging_api.calculations import record_metrics
from charging_api.extensions import RateLimits, cache, limiter
from charging_api.models import View
from charging_api.services import QueryService
from charging_api.utils.responses import success_response
from charging_api.utils.wide_events import track_operation

logger = logging.getLogger(__name__)

charging_data_bp = Blueprint("charging_data", __name__)

QUERY_SERVICE_KEY = "charging_query_service"


def get_query_service() -> QueryService:
    """Query service attached to the running app by create_app()."""
    return current_app.extensions[QUERY_SERVICE_KEY]


def _list_view(view: View):
    with track_operation("charging_data_list", view=view.value) as event:
        records = get_query_service().list_by_view(view)
        event.add_business_metric("records_returned", len(records))

    return success_response(
        [r.to_dict() for r in records],
        f"{view.value.capitalize()} charging data retrieved successfully",
    )


@charging_data_bp.route("/charging-data/daily", methods=["GET"])
@limiter.limit(RateLimits.READ_HEAVY)
@cache.cached()
def get_daily_data():
    """Get every daily record."""
    return _list_view(View.DAILY)


@charging_data_bp.route("/charging-data/weekly", methods=["GET"])
@limiter.limit(RateLimits.READ_HEAVY)
@cache.cached()
def get_weekly_data():
    """Get every weekly record."""
    return _list_view(View.WEEKLY)


@charging_data_bp.route("/charging-data/summary/<view>", methods=["GET"])
@limiter.limit(RateLimits.READ_HEAVY)
@cache.cached()
def get_summary(view):
    """
    Get summary statistics for a view.

    Returns totals, peak usage (busiest period) and per-period averages.
    Responds 400 when view is not "daily" or "weekly".
    """
    with track_operation("charging_data_summary", view=view) as event:
        service = get_query_service()
        with event.timer("summarize"):
            stats = service.summary_by_view(view)
        event.add_business_metric("total_sessions", stats.total_sessions)
        event.add_business_metric("peak_usage", stats.peak_usage)

    return success_response(stats.to_dict(), f"{view} summary statistics retrieved successfully")


@charging_data_bp.route("/charging-data/specific/<view>/<identifier>", methods=["GET"])
@limiter.limit(RateLimits.READ_HEAVY)
def get_specific(view, identifier):
    """
    Get one day or week.

    identifier is an ISO date for the daily view and a week label
    ("Week 1") for the weekly view. The record is returned with its
    derived per-session metrics under "metrics".
    """
    with track_operation("charging_data_specific", view=view, identifier=identifier):
        record = get_query_service().find_by_view(view, identifier)

    data = record.to_dict()
    data["metrics"] = record_metrics(record)
    return success_response(data, f"Data for {identifier} retrieved successfully")


@charging_data_bp.route("/charging-data/peak-usage/<view>", methods=["GET"])
@limiter.limit(RateLimits.READ_HEAVY)
@cache.cached()
def get_peak_usage(view):
    """
    Get the peak-hour series for the usage chart.

    Weekly entries are estimates (flagged "estimated": true) because the
    weekly data has no peak-hour column.
    """
    with track_operation("charging_data_peak_usage", view=view) as event:
        series = get_query_service().peak_usage_by_view(view)
        event.add_business_metric("estimated_points", sum(1 for p in series if p["estimated"]))

    return success_response(series, f"{view} peak usage data retrieved successfully")
