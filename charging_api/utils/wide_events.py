"""
Wide Events (Canonical Log Lines) - Structured Logging Utility

- Emit ONE comprehensive JSON event per request/operation
- Include high-cardinality data (request ids, views, period identifiers)
- Capture full context: business metrics, errors, latencies
- Use tail sampling: keep all errors/slow requests, sample successful fast requests

Instead of logging what your code is doing, log what happened to this request.
"""

import random
import time
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

from charging_api.config import Config
from charging_api.utils.error_codes import StructuredError, http_status_for

# Configure structlog for JSON output
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class WideEvent:
    """
    Accumulates context throughout an operation, then emits one comprehensive log event.

    Usage:
        event = WideEvent("charging_data_summary")
        event.add_context(view="daily")
        event.add_business_metric("record_count", 15)

        with event.timer("summarize"):
            service.summary_by_view("daily")

        event.emit()
    """

    def __init__(self, operation: str, request_id: Optional[str] = None, trace_id: Optional[str] = None):
        """
        Initialize a wide event for a specific operation.

        Args:
            operation: Name of the operation (e.g., "charging_data_summary")
            request_id: Unique ID for this specific request (auto-generated if not provided)
            trace_id: ID that connects related operations
        """
        self.operation = operation
        self.context: Dict[str, Any] = {
            "operation": operation,
            "service": Config.SERVICE_NAME,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "start_time": time.time(),
            "request_id": request_id or str(uuid.uuid4()),
        }

        if trace_id:
            self.context["trace_id"] = trace_id

        self.logger = structlog.get_logger("charging_api.events")

    def add_context(self, **kwargs) -> "WideEvent":
        """Add high-cardinality context fields (view, identifier, client, etc.)."""
        self.context.update(kwargs)
        return self

    def add_business_metric(self, key: str, value: Any) -> "WideEvent":
        """Add business metrics (records returned, total sessions, etc.)."""
        self.context.setdefault("business_metrics", {})[key] = value
        return self

    def add_error(self, error, **kwargs) -> "WideEvent":
        """Add error details to the event. Accepts an exception or a StructuredError."""
        if isinstance(error, StructuredError):
            structured = error
        else:
            structured = StructuredError.from_exception(error)

        self.context["error"] = {
            "type": type(structured.exception or error).__name__,
            "message": structured.message,
            "code": structured.code.value,
            "category": structured.metadata["category"].value,
            "details": {**structured.context, **kwargs},
        }
        self.context["success"] = False
        return self

    def mark_success(self) -> "WideEvent":
        """Mark the operation as successful."""
        self.context["success"] = True
        return self

    def mark_failure(self, reason: str) -> "WideEvent":
        """Mark the operation as failed."""
        self.context["success"] = False
        self.context["failure_reason"] = reason
        return self

    @contextmanager
    def timer(self, operation_name: str):
        """
        Context manager to time a specific operation within the request.

        Usage:
            with event.timer("summarize"):
                summarize(records)

            # Outputs: {"performance_breakdown": {"summarize_ms": 0.12}}
        """
        start = time.time()
        try:
            yield
        finally:
            duration_ms = (time.time() - start) * 1000
            self.context.setdefault("performance_breakdown", {})[f"{operation_name}_ms"] = round(duration_ms, 2)

    def set_duration(self) -> "WideEvent":
        """Calculate and set the duration of the operation."""
        if "start_time" in self.context:
            duration_ms = (time.time() - self.context["start_time"]) * 1000
            self.context["duration_ms"] = round(duration_ms, 2)
            del self.context["start_time"]
        return self

    def should_emit(self, sample_rate: Optional[float] = None, slow_threshold_ms: Optional[float] = None) -> bool:
        """
        Implement tail sampling logic:
        - Always emit errors
        - Always emit slow requests (>slow_threshold_ms)
        - Sample successful fast requests at sample_rate

        Both thresholds default to Config.LOGGING_SAMPLE_RATE and
        Config.LOGGING_SLOW_THRESHOLD_MS.
        """
        if sample_rate is None:
            sample_rate = Config.LOGGING_SAMPLE_RATE
        if slow_threshold_ms is None:
            slow_threshold_ms = Config.LOGGING_SLOW_THRESHOLD_MS

        if not self.context.get("success", True):
            return True

        if self.context.get("duration_ms", 0) > slow_threshold_ms:
            return True

        return random.random() < sample_rate

    def emit(self, level: str = "info", force: bool = False) -> None:
        """
        Emit the wide event as a single comprehensive log line.

        Args:
            level: Log level (info, warning, error)
            force: Force emission even if sampling says no
        """
        self.set_duration()

        if not force and not self.should_emit():
            return

        log_method = getattr(self.logger, level, self.logger.info)
        log_method(f"{self.operation}_complete", **self.context)


@contextmanager
def track_operation(operation: str, **initial_context):
    """
    Context manager for tracking an operation with a wide event.

    Failures are always emitted: client errors (4xx) at warning level,
    everything else at error level. Successful operations go through tail
    sampling, so only slow ones and a sampled share are logged.

    Usage:
        with track_operation("charging_data_summary", view="daily") as event:
            stats = service.summary_by_view("daily")
            event.add_business_metric("total_sessions", stats.total_sessions)
    """
    event = WideEvent(operation)
    event.add_context(**initial_context)
    level = "info"

    try:
        yield event
        event.mark_success()
    except Exception as e:
        event.add_error(e)
        level = "warning" if http_status_for(e) < 500 else "error"
        raise
    finally:
        event.emit(level=level, force=level != "info")


def log_dataset_loaded(source: str, record_counts: Dict[str, int], success: bool, **kwargs) -> None:
    """Log the startup data set load."""
    event = WideEvent("dataset_load")
    event.add_context(source=source, **kwargs)
    for view, count in record_counts.items():
        event.add_business_metric(f"{view}_records", count)

    if success:
        event.mark_success()
    else:
        event.mark_failure(kwargs.get("error", "Unknown error"))

    event.emit(level="info" if success else "error", force=True)
