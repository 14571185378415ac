"""
Signed-in session state.

A ``SessionContext`` is created once when a user signs in and dropped when
they sign out. It carries the user's profile and a cache of their jobs, and
is passed explicitly to whatever needs it.
"""

import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional
from uuid import UUID

from repairtrack.application.interfaces.repositories import (
    JobRepositoryInterface,
    ProfileRepositoryInterface,
)
from repairtrack.config.logging import get_logger
from repairtrack.domain.entities.job import Job
from repairtrack.domain.entities.profile import Profile
from repairtrack.domain.exceptions.session_error import SessionNotFoundError
from repairtrack.domain.exceptions.validation_error import RequiredFieldError

logger = get_logger(__name__)


def _new_token() -> str:
    return secrets.token_urlsafe(32)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SessionContext:
    """Per-sign-in state for one user.

    ``jobs`` mirrors the repository, newest first. It is only changed after
    the matching write has been committed.
    """

    user_id: str
    token: str = field(default_factory=_new_token)
    profile: Optional[Profile] = None
    jobs: List[Job] = field(default_factory=list)
    submitting: bool = False
    signed_in_at: datetime = field(default_factory=_utcnow)
    last_seen_at: datetime = field(default_factory=_utcnow)

    @property
    def has_profile(self) -> bool:
        return self.profile is not None

    def find_job(self, job_id: UUID) -> Optional[Job]:
        return next((job for job in self.jobs if job.id == job_id), None)

    def prepend_job(self, job: Job) -> None:
        self.jobs.insert(0, job)

    def replace_job(self, job: Job) -> bool:
        """Swap the cached job with the same id. Returns ``False`` if absent."""
        for index, cached in enumerate(self.jobs):
            if cached.id == job.id:
                self.jobs[index] = job
                return True
        return False

    def reset_jobs(self, jobs: List[Job]) -> None:
        self.jobs = list(jobs)


class SessionManager:
    """Registry of signed-in sessions, keyed by token.

    Sessions that go unused for ``idle_timeout_seconds`` are dropped the next
    time the registry is touched. A timeout of 0 keeps them until sign out.
    """

    def __init__(
        self,
        idle_timeout_seconds: int = 0,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._sessions: Dict[str, SessionContext] = {}
        self.idle_timeout = timedelta(seconds=idle_timeout_seconds)
        self._clock = clock or _utcnow

    def __len__(self) -> int:
        return len(self._sessions)

    async def sign_in(
        self,
        user_id: str,
        profile_repo: ProfileRepositoryInterface,
        job_repo: JobRepositoryInterface,
    ) -> SessionContext:
        """Open a session and load the user's profile and jobs."""
        if not user_id or not user_id.strip():
            raise RequiredFieldError("user_id")

        profile = await profile_repo.get_by_user_id(user_id)
        jobs = await job_repo.list_for_user(user_id)

        self.prune_expired()
        now = self._clock()
        context = SessionContext(
            user_id=user_id,
            profile=profile,
            jobs=list(jobs),
            signed_in_at=now,
            last_seen_at=now,
        )
        self._sessions[context.token] = context

        logger.info(
            "Session opened",
            user_id=user_id,
            has_profile=context.has_profile,
            job_count=len(context.jobs),
        )
        return context

    def get(self, token: Optional[str]) -> SessionContext:
        self.prune_expired()
        context = self._sessions.get(token or "")
        if context is None:
            raise SessionNotFoundError()
        context.last_seen_at = self._clock()
        return context

    def sign_out(self, token: str) -> None:
        context = self._sessions.pop(token, None)
        if context is None:
            raise SessionNotFoundError()
        logger.info("Session closed", user_id=context.user_id)

    def prune_expired(self) -> int:
        """Drop idle sessions. Returns how many were removed."""
        if not self.idle_timeout:
            return 0

        cutoff = self._clock() - self.idle_timeout
        expired = [
            token
            for token, context in self._sessions.items()
            if context.last_seen_at <= cutoff
        ]
        for token in expired:
            context = self._sessions.pop(token)
            logger.info("Session expired", user_id=context.user_id)
        return len(expired)
