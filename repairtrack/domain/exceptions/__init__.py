"""
Domain exceptions package.
"""

from .notification_error import (
    NotificationConfigurationError,
    NotificationDeliveryError,
    NotificationError,
)
from .repository_error import DuplicateJobError, JobNotFoundError, RepositoryError
from .session_error import SessionError, SessionNotFoundError, SubmissionInProgressError
from .validation_error import (
    InvalidFormatError,
    InvalidStatusTransitionError,
    ProfileRequiredError,
    RequiredFieldError,
    ValidationError,
)

__all__ = [
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
]
