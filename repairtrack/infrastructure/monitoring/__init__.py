"""
Monitoring package.
"""

from .health_checks import HealthChecker
from .metrics import (
    get_metrics,
    get_metrics_content_type,
    record_api_request,
    record_job_created,
    record_notification,
    record_status_update,
)

__all__ = [
    "HealthChecker",
    "get_metrics",
    "get_metrics_content_type",
    "record_api_request",
    "record_job_created",
    "record_notification",
    "record_status_update",
]
