"""
Shop profile endpoints.
"""

from fastapi import APIRouter, HTTPException, status

from repairtrack.api.dependencies import SaveProfileUseCaseDep, SessionContextDep
from repairtrack.api.schemas.common import ErrorResponse
from repairtrack.api.schemas.profile import ProfileResponse, ProfileUpsertRequest
from repairtrack.application.use_cases.save_profile import SaveProfileRequest
from repairtrack.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(
    prefix="/profile",
    tags=["profile"],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)


@router.get("", response_model=ProfileResponse)
async def get_profile(session: SessionContextDep):
    """Return the signed-in user's profile, 404 until it has been set up."""
    if session.profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not set up yet",
        )
    return ProfileResponse.model_validate(session.profile)


@router.put("", response_model=ProfileResponse)
async def save_profile(
    profile_data: ProfileUpsertRequest,
    use_case: SaveProfileUseCaseDep,
):
    """Create or replace the signed-in user's profile."""
    profile = await use_case.execute(
        SaveProfileRequest(
            full_name=profile_data.full_name,
            phone=profile_data.phone,
            shop_name=profile_data.shop_name,
        )
    )
    return ProfileResponse.model_validate(profile)
