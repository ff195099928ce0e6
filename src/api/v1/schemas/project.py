"""Pydantic schemas for Project API."""

from datetime import date
from uuid import UUID

from pydantic import Field, field_validator

from api.v1.schemas.common import ApiModel, blank_to_none
from domain.entities.project import Project, ProjectLinks, ProjectStatus


class ProjectLinksSchema(ApiModel):
    repo: str | None = None
    demo: str | None = None
    live: str | None = None


class ProjectIn(ApiModel):
    """Schema for adding or replacing a project."""

    title: str = Field(..., min_length=3)
    description: str = Field(..., min_length=10)
    links: ProjectLinksSchema | None = None
    skills: list[str] | None = None
    status: ProjectStatus | None = None
    start_date: date | None = None
    end_date: date | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def empty_date_is_none(cls, v: object) -> object:
        return blank_to_none(v)

    def to_entity(self) -> Project:
        links = self.links or ProjectLinksSchema()
        return Project(
            title=self.title,
            description=self.description,
            links=ProjectLinks(repo=links.repo, demo=links.demo, live=links.live),
            skills=[skill for skill in self.skills or [] if skill],
            status=self.status or ProjectStatus.COMPLETED,
            start_date=self.start_date,
            end_date=self.end_date,
        )


class ProjectResponse(ApiModel):
    """Schema for Project response."""

    id: UUID
    title: str
    description: str
    links: ProjectLinksSchema
    skills: list[str]
    status: ProjectStatus
    start_date: date | None = None
    end_date: date | None = None


class ProjectSavedResponse(ApiModel):
    """A created or replaced project plus the full refreshed list."""

    message: str
    project: ProjectResponse
    projects: list[ProjectResponse]


class ProjectDeletedResponse(ApiModel):
    """The removed project plus the full refreshed list."""

    message: str
    deleted_project: ProjectResponse
    projects: list[ProjectResponse]
