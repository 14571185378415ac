"""
Application services package.
"""

from .job_code_generator import AtomicJobCodeGenerator, CountingJobCodeGenerator
from .message_templates import NotificationTemplates
from .notification_dispatcher import NotificationDispatcher
from .receipts import Receipt, build_receipt, build_track_url

__all__ = [
    "AtomicJobCodeGenerator",
    "CountingJobCodeGenerator",
    "NotificationDispatcher",
    "NotificationTemplates",
    "Receipt",
    "build_receipt",
    "build_track_url",
]
