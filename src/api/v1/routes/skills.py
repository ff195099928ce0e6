"""Skills API routes."""

from fastapi import APIRouter, Depends, status

from api.v1.dependencies import get_skill_service
from api.v1.schemas.skill import (
    SkillAddedResponse,
    SkillCreate,
    SkillDeletedResponse,
    SkillsReplace,
    SkillsUpdatedResponse,
)
from domain.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get(
    "",
    response_model=list[str],
    summary="List skills",
    responses={404: {"description": "No profile has been created"}},
)
async def list_skills(
    service: SkillService = Depends(get_skill_service),
) -> list[str]:
    """All skills, sorted ascending."""
    return await service.get_all()


@router.get(
    "/top",
    response_model=list[str],
    summary="List skills (legacy alias)",
    responses={404: {"description": "No profile has been created"}},
)
async def list_top_skills(
    service: SkillService = Depends(get_skill_service),
) -> list[str]:
    """Kept for older clients; same result as ``GET /skills``."""
    return await service.get_all()


@router.post(
    "",
    response_model=SkillAddedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a skill",
    responses={
        400: {"description": "Validation failed or skill already exists"},
        404: {"description": "No profile has been created"},
    },
)
async def add_skill(
    body: SkillCreate,
    service: SkillService = Depends(get_skill_service),
) -> SkillAddedResponse:
    """Add a skill. Names are unique ignoring case."""
    skills = await service.add(body.skill)
    return SkillAddedResponse(
        message="Skill added successfully",
        skill=body.skill,
        skills=skills,
    )


@router.put(
    "",
    response_model=SkillsUpdatedResponse,
    summary="Replace all skills",
    responses={
        400: {"description": "Body's skills is not an array"},
        404: {"description": "No profile has been created"},
    },
)
async def replace_skills(
    body: SkillsReplace,
    service: SkillService = Depends(get_skill_service),
) -> SkillsUpdatedResponse:
    """Replace the skill list.

    Entries shorter than two characters are dropped and duplicates that
    differ only in case are collapsed to the first occurrence.
    """
    skills = await service.replace(body.skills)
    return SkillsUpdatedResponse(message="Skills updated successfully", skills=skills)


@router.delete(
    "/{skill:path}",
    response_model=SkillDeletedResponse,
    summary="Delete a skill",
    responses={404: {"description": "No profile, or skill not found"}},
)
async def delete_skill(
    skill: str,
    service: SkillService = Depends(get_skill_service),
) -> SkillDeletedResponse:
    """Delete a skill by URL-encoded name, matched ignoring case."""
    deleted, skills = await service.delete(skill.strip())
    return SkillDeletedResponse(
        message="Skill deleted successfully",
        deleted_skill=deleted,
        skills=skills,
    )
