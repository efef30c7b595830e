"""
Prometheus metrics for the license status service.

Custom metrics for the event log and its storage.
"""

from prometheus_client import Counter, Histogram

# Event log metrics
license_events_appended_total = Counter(
    "license_events_appended_total",
    "Total license status events appended",
    ["type"],
)

# Database metrics
db_query_duration_seconds = Histogram(
    "license_events_db_query_duration_seconds",
    "Database query duration in seconds",
    ["operation", "table"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)

# Error metrics
storage_errors_total = Counter(
    "license_events_storage_errors_total",
    "Total storage failures",
    ["operation"],
)
