"""Pydantic schemas for Work experience API."""

from datetime import date
from uuid import UUID

from pydantic import Field, field_validator

from api.v1.schemas.common import ApiModel, blank_to_none
from domain.entities.work import WorkExperience


class WorkIn(ApiModel):
    """Schema for adding or replacing a work-experience entry."""

    company: str = Field(..., min_length=2)
    title: str = Field(..., min_length=2)
    duration: str = Field(..., min_length=3)
    description: str = Field(..., min_length=10)
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    current: bool | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def empty_date_is_none(cls, v: object) -> object:
        return blank_to_none(v)

    def to_entity(self) -> WorkExperience:
        return WorkExperience(
            company=self.company,
            title=self.title,
            duration=self.duration,
            description=self.description,
            location=self.location,
            start_date=self.start_date,
            end_date=self.end_date,
            current=bool(self.current),
        )


class WorkResponse(ApiModel):
    """Schema for WorkExperience response."""

    id: UUID
    company: str
    title: str
    duration: str
    description: str
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    current: bool


class WorkSavedResponse(ApiModel):
    """A created or replaced entry plus the full refreshed list."""

    message: str
    work: WorkResponse
    work_list: list[WorkResponse]


class WorkDeletedResponse(ApiModel):
    """The removed entry plus the full refreshed list."""

    message: str
    deleted_work: WorkResponse
    work_list: list[WorkResponse]
