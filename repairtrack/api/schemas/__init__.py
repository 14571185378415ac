"""
API schemas for the RepairTrack service.
"""

from .common import ErrorResponse
from .job import JobCreateRequest, JobResponse, JobStatusUpdateRequest, ReceiptResponse
from .notification import SendWhatsAppError, SendWhatsAppRequest, SendWhatsAppResponse
from .profile import ProfileResponse, ProfileUpsertRequest
from .session import SessionResponse

__all__ = [
    "ErrorResponse",
    "JobCreateRequest",
    "JobResponse",
    "JobStatusUpdateRequest",
    "ProfileResponse",
    "ProfileUpsertRequest",
    "ReceiptResponse",
    "SendWhatsAppError",
    "SendWhatsAppRequest",
    "SendWhatsAppResponse",
    "SessionResponse",
]
