"""
Prometheus metrics for the license key service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# License key metrics
license_keys_issued_total = Counter(
    "license_keys_issued_total",
    "Total license keys issued",
)

license_key_issue_collisions_total = Counter(
    "license_key_issue_collisions_total",
    "Generated license keys rejected because the key text already existed",
)

license_key_verifications_total = Counter(
    "license_key_verifications_total",
    "Total license key verifications",
    ["reason"],
)
