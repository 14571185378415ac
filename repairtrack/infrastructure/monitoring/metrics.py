"""
Prometheus metrics for system monitoring.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

registry = CollectorRegistry()

JOBS_CREATED = Counter(
    "jobs_created_total",
    "Total number of repair jobs created",
    registry=registry,
)

JOB_STATUS_UPDATES = Counter(
    "job_status_updates_total",
    "Total number of job status changes",
    ["status"],
    registry=registry,
)

NOTIFICATIONS_SENT = Counter(
    "notifications_sent_total",
    "Outbound WhatsApp notification attempts",
    ["kind", "outcome"],
    registry=registry,
)

NOTIFICATION_DURATION = Histogram(
    "notification_duration_seconds",
    "Time spent sending a WhatsApp notification",
    ["kind"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0],
    registry=registry,
)

API_REQUESTS = Counter(
    "api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status_code"],
    registry=registry,
)


def record_job_created() -> None:
    JOBS_CREATED.inc()


def record_status_update(status: str) -> None:
    JOB_STATUS_UPDATES.labels(status=status).inc()


def record_notification(kind: str, outcome: str, duration: float) -> None:
    NOTIFICATIONS_SENT.labels(kind=kind, outcome=outcome).inc()
    NOTIFICATION_DURATION.labels(kind=kind).observe(duration)


def record_api_request(method: str, endpoint: str, status_code: int) -> None:
    API_REQUESTS.labels(
        method=method, endpoint=endpoint, status_code=str(status_code)
    ).inc()


def get_metrics() -> bytes:
    """Render the registry in Prometheus exposition format."""
    return generate_latest(registry)


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
