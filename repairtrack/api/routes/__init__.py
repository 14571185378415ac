"""
API routes package.
"""

from .health import router as health_router
from .jobs import router as jobs_router
from .notifications import router as notifications_router
from .profile import router as profile_router
from .session import router as session_router

__all__ = [
    "health_router",
    "jobs_router",
    "notifications_router",
    "profile_router",
    "session_router",
]
