"""
Database repositories package.
"""

from .job_repository import JobRepository
from .job_sequence_repository import JobSequenceRepository
from .profile_repository import ProfileRepository
from .transaction_repository import TransactionService

__all__ = [
    "JobRepository",
    "JobSequenceRepository",
    "ProfileRepository",
    "TransactionService",
]
