"""
Sign in and sign out endpoints.
"""

from fastapi import APIRouter, Header, Response, status

from repairtrack.api.dependencies import (
    JobRepositoryDep,
    ProfileRepositoryDep,
    SessionManagerDep,
)
from repairtrack.api.schemas.session import SessionResponse
from repairtrack.config.logging import get_logger
from repairtrack.domain.exceptions.session_error import SessionNotFoundError

logger = get_logger(__name__)
router = APIRouter(prefix="/session", tags=["session"])


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def sign_in(
    session_manager: SessionManagerDep,
    profile_repository: ProfileRepositoryDep,
    job_repository: JobRepositoryDep,
    x_user_id: str = Header(""),
):
    """Open a session for the user asserted by the upstream auth provider.

    The profile and the job list are loaded once here; later job writes keep
    the session's copy in step with the database.
    """
    if not x_user_id.strip():
        raise SessionNotFoundError("Missing X-User-Id header")

    context = await session_manager.sign_in(
        x_user_id.strip(), profile_repository, job_repository
    )
    return SessionResponse(
        token=context.token,
        user_id=context.user_id,
        has_profile=context.has_profile,
        job_count=len(context.jobs),
        signed_in_at=context.signed_in_at,
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    session_manager: SessionManagerDep,
    x_session_token: str = Header(""),
) -> Response:
    """Drop the session and its cached jobs."""
    if not x_session_token:
        raise SessionNotFoundError()
    session_manager.sign_out(x_session_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
