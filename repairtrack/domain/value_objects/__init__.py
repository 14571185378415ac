"""
Domain value objects package.
"""

from .job_code import JOB_CODE_PATTERN, JobCode
from .job_filter import JobFilter
from .job_status import JobStatus
from .whatsapp_number import (
    is_valid_indian_mobile,
    normalize_whatsapp_number,
    to_whatsapp_address,
)

__all__ = [
    "JOB_CODE_PATTERN",
    "JobCode",
    "JobFilter",
    "JobStatus",
    "is_valid_indian_mobile",
    "normalize_whatsapp_number",
    "to_whatsapp_address",
]
