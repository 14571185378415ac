"""
Domain entities package.
"""

from .job import Job
from .profile import Profile

__all__ = [
    "Job",
    "Profile",
]
