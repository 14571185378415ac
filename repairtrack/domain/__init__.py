"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "Job",
    "Profile",
    # Exceptions
    "DuplicateJobError",
    "InvalidFormatError",
    "InvalidStatusTransitionError",
    "JobNotFoundError",
    "NotificationConfigurationError",
    "NotificationDeliveryError",
    "NotificationError",
    "ProfileRequiredError",
    "RepositoryError",
    "RequiredFieldError",
    "SessionError",
    "SessionNotFoundError",
    "SubmissionInProgressError",
    "ValidationError",
    # Value Objects
    "JobCode",
    "JobFilter",
    "JobStatus",
    "normalize_whatsapp_number",
]
