# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics: single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "designflow_requests_total",
    "Total HTTP requests to the design queue service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "designflow_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "designflow_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
REQUESTS_SUBMITTED = Counter(
    "designflow_design_requests_submitted_total",
    "Total design requests received through intake",
    ["priority"],
)
ASSIGNMENTS_TOTAL = Counter(
    "designflow_assignments_total",
    "Total requests assigned to a designer",
    ["designer"],
)
FEEDBACK_TOTAL = Counter(
    "designflow_feedback_total",
    "Total feedback entries recorded",
    ["type"],
)
FEEDBACK_REJECTED = Counter(
    "designflow_feedback_rejected_total",
    "Feedback submissions rejected for missing content",
    ["type"],
)
STATUS_CHANGES = Counter(
    "designflow_status_changes_total",
    "Total request status changes",
    ["to_status"],
)
SUGGESTIONS_TOTAL = Counter(
    "designflow_suggestions_total",
    "Advisory suggestions by outcome",
    ["outcome"],
)
ORACLE_FAILURES = Counter(
    "designflow_oracle_failures_total",
    "Advisory oracle calls that degraded to a fallback",
    ["operation"],
)
DESIGNER_LOAD_HOURS = Gauge(
    "designflow_designer_assigned_hours",
    "Currently assigned hours per designer",
    ["designer"],
)
