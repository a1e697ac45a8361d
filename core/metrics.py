"""
Prometheus metrics for the license service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# License lifecycle metrics
license_operations_total = Counter(
    "license_operations_total",
    "Total license lifecycle operations",
    ["operation", "outcome"],
)

tokens_reissued_total = Counter(
    "tokens_reissued_total",
    "Total tokens re-issued from a refresh credential",
    ["path"],
)

# Store metrics
store_errors_total = Counter(
    "store_errors_total",
    "Total record store failures",
    ["operation"],
)
