"""
Database models package.
"""

from .base import Base, BaseModel
from .job import JobModel
from .job_sequence import JobSequenceModel
from .profile import ProfileModel

__all__ = [
    "Base",
    "BaseModel",
    "JobModel",
    "JobSequenceModel",
    "ProfileModel",
]
