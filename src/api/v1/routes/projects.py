"""Project API routes."""

from fastapi import APIRouter, Depends, Query, status

from api.v1.dependencies import get_project_service
from api.v1.schemas.project import (
    ProjectDeletedResponse,
    ProjectIn,
    ProjectResponse,
    ProjectSavedResponse,
)
from domain.services.project_service import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectResponse],
    summary="List projects",
    responses={404: {"description": "No profile has been created"}},
)
async def list_projects(
    skill: str | None = Query(None, description="Case-insensitive skill substring"),
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """List all projects, optionally only those using a matching skill."""
    projects = await service.get_all(skill.strip() if skill else None)
    return [ProjectResponse.model_validate(p) for p in projects]


@router.post(
    "",
    response_model=ProjectSavedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a project",
    responses={
        400: {"description": "Validation failed"},
        404: {"description": "No profile has been created"},
    },
)
async def add_project(
    body: ProjectIn,
    service: ProjectService = Depends(get_project_service),
) -> ProjectSavedResponse:
    """Append a project to the end of the list."""
    project, projects = await service.add(body.to_entity())
    return ProjectSavedResponse(
        message="Project added successfully",
        project=ProjectResponse.model_validate(project),
        projects=[ProjectResponse.model_validate(p) for p in projects],
    )


@router.put(
    "/{index}",
    response_model=ProjectSavedResponse,
    summary="Replace a project",
    responses={
        400: {"description": "Validation failed or index out of range"},
        404: {"description": "No profile has been created"},
    },
)
async def update_project(
    index: int,
    body: ProjectIn,
    service: ProjectService = Depends(get_project_service),
) -> ProjectSavedResponse:
    """Replace the project at ``index`` (zero-based)."""
    project, projects = await service.update(index, body.to_entity())
    return ProjectSavedResponse(
        message="Project updated successfully",
        project=ProjectResponse.model_validate(project),
        projects=[ProjectResponse.model_validate(p) for p in projects],
    )


@router.delete(
    "/{index}",
    response_model=ProjectDeletedResponse,
    summary="Delete a project",
    responses={
        400: {"description": "Index out of range"},
        404: {"description": "No profile has been created"},
    },
)
async def delete_project(
    index: int,
    service: ProjectService = Depends(get_project_service),
) -> ProjectDeletedResponse:
    """Remove the project at ``index`` and return it."""
    removed, projects = await service.delete(index)
    return ProjectDeletedResponse(
        message="Project deleted successfully",
        deleted_project=ProjectResponse.model_validate(removed),
        projects=[ProjectResponse.model_validate(p) for p in projects],
    )
