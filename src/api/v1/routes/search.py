"""Project search route."""

from fastapi import APIRouter, Depends, Query

from api.v1.dependencies import get_project_service
from api.v1.schemas.project import ProjectResponse
from domain.services.project_service import ProjectService

router = APIRouter(tags=["search"])


@router.get(
    "/search",
    response_model=list[ProjectResponse],
    summary="Search projects",
    responses={404: {"description": "No profile has been created"}},
)
async def search_projects(
    q: str | None = Query(None, description="Case-insensitive text to find"),
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """Projects whose title or description contains ``q``. Empty ``q`` returns ``[]``."""
    projects = await service.search(q)
    return [ProjectResponse.model_validate(p) for p in projects]
