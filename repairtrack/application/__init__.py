"""
Application layer package.

This package contains use cases, services, and interfaces that implement
the business logic of the application.
"""

from .interfaces import (
    JobCodeGeneratorInterface,
    JobRepositoryInterface,
    JobSequenceRepositoryInterface,
    MessageSenderInterface,
    OutboundMessage,
    ProfileRepositoryInterface,
)
from .services import (
    AtomicJobCodeGenerator,
    CountingJobCodeGenerator,
    NotificationDispatcher,
    NotificationTemplates,
)
from .session import SessionContext, SessionManager
from .use_cases import (
    CreateJobRequest,
    JobLifecycleController,
    SaveProfileRequest,
    SaveProfileUseCase,
)

__all__ = [
    # Interfaces
    "JobCodeGeneratorInterface",
    "JobRepositoryInterface",
    "JobSequenceRepositoryInterface",
    "MessageSenderInterface",
    "OutboundMessage",
    "ProfileRepositoryInterface",
    # Services
    "AtomicJobCodeGenerator",
    "CountingJobCodeGenerator",
    "NotificationDispatcher",
    "NotificationTemplates",
    # Session
    "SessionContext",
    "SessionManager",
    # Use Cases
    "CreateJobRequest",
    "JobLifecycleController",
    "SaveProfileRequest",
    "SaveProfileUseCase",
]
