"""
Application interfaces package.
"""

from .notifications import MessageSenderInterface, OutboundMessage
from .repositories import (
    JobRepositoryInterface,
    JobSequenceRepositoryInterface,
    ProfileRepositoryInterface,
)
from .services import JobCodeGeneratorInterface

__all__ = [
    "JobCodeGeneratorInterface",
    "JobRepositoryInterface",
    "JobSequenceRepositoryInterface",
    "MessageSenderInterface",
    "OutboundMessage",
    "ProfileRepositoryInterface",
]
