"""
Use cases package.

This package contains the business logic use cases that orchestrate
the application services and repositories.
"""

from .job_lifecycle import CreateJobRequest, JobLifecycleController
from .save_profile import SaveProfileRequest, SaveProfileUseCase

__all__ = [
    "CreateJobRequest",
    "JobLifecycleController",
    "SaveProfileRequest",
    "SaveProfileUseCase",
]
