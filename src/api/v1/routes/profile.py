"""Profile API routes."""

from fastapi import APIRouter, Depends, Response, status

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import MessageResponse
from api.v1.schemas.profile import ProfileResponse, ProfileSavedResponse, ProfileUpsert
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=ProfileResponse,
    summary="Get the profile",
    responses={404: {"description": "No profile has been created"}},
)
async def get_profile(
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get the full profile including skills, projects and work experience."""
    profile = await service.get()
    return ProfileResponse.model_validate(profile)


@router.post(
    "",
    response_model=ProfileSavedResponse,
    summary="Create or update the profile",
    responses={
        200: {"description": "Profile updated"},
        201: {"description": "Profile created"},
        400: {"description": "Validation failed"},
    },
)
async def save_profile(
    body: ProfileUpsert,
    response: Response,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileSavedResponse:
    """Create the profile on first call, afterwards merge the sent fields into it.

    ``links`` and ``preferences`` are merged key by key. Skills, projects and
    work experience are never changed by this endpoint.
    """
    profile, created = await service.upsert(body.changes())
    if created:
        response.status_code = status.HTTP_201_CREATED
        message = "Profile created successfully"
    else:
        message = "Profile updated successfully"
    return ProfileSavedResponse(
        message=message,
        profile=ProfileResponse.model_validate(profile),
    )


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete the profile",
    responses={404: {"description": "No profile has been created"}},
)
async def delete_profile(
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete the profile and everything embedded in it."""
    await service.delete()
    return MessageResponse(message="Profile deleted successfully")
