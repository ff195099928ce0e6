"""Work experience API routes."""

from fastapi import APIRouter, Depends, status

from api.v1.dependencies import get_work_service
from api.v1.schemas.work import (
    WorkDeletedResponse,
    WorkIn,
    WorkResponse,
    WorkSavedResponse,
)
from domain.services.work_service import WorkService

router = APIRouter(prefix="/work", tags=["work"])


@router.get(
    "",
    response_model=list[WorkResponse],
    summary="List work experience",
    responses={404: {"description": "No profile has been created"}},
)
async def list_work(
    service: WorkService = Depends(get_work_service),
) -> list[WorkResponse]:
    entries = await service.get_all()
    return [WorkResponse.model_validate(w) for w in entries]


@router.post(
    "",
    response_model=WorkSavedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add work experience",
    responses={
        400: {"description": "Validation failed"},
        404: {"description": "No profile has been created"},
    },
)
async def add_work(
    body: WorkIn,
    service: WorkService = Depends(get_work_service),
) -> WorkSavedResponse:
    entry, entries = await service.add(body.to_entity())
    return WorkSavedResponse(
        message="Work experience added successfully",
        work=WorkResponse.model_validate(entry),
        work_list=[WorkResponse.model_validate(w) for w in entries],
    )


@router.put(
    "/{index}",
    response_model=WorkSavedResponse,
    summary="Replace work experience",
    responses={
        400: {"description": "Validation failed or index out of range"},
        404: {"description": "No profile has been created"},
    },
)
async def update_work(
    index: int,
    body: WorkIn,
    service: WorkService = Depends(get_work_service),
) -> WorkSavedResponse:
    """Replace the entry at ``index`` (zero-based)."""
    entry, entries = await service.update(index, body.to_entity())
    return WorkSavedResponse(
        message="Work experience updated successfully",
        work=WorkResponse.model_validate(entry),
        work_list=[WorkResponse.model_validate(w) for w in entries],
    )


@router.delete(
    "/{index}",
    response_model=WorkDeletedResponse,
    summary="Delete work experience",
    responses={
        400: {"description": "Index out of range"},
        404: {"description": "No profile has been created"},
    },
)
async def delete_work(
    index: int,
    service: WorkService = Depends(get_work_service),
) -> WorkDeletedResponse:
    removed, entries = await service.delete(index)
    return WorkDeletedResponse(
        message="Work experience deleted successfully",
        deleted_work=WorkResponse.model_validate(removed),
        work_list=[WorkResponse.model_validate(w) for w in entries],
    )
