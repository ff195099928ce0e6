"""Pydantic schemas for Profile API."""

from datetime import datetime

from pydantic import Field, field_validator

from api.v1.schemas.common import ApiModel
from api.v1.schemas.project import ProjectResponse
from api.v1.schemas.work import WorkResponse

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class ProfileLinksSchema(ApiModel):
    """Profile links. Omitted keys keep their stored value on update."""

    github: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None
    twitter: str | None = None
    website: str | None = None


class ProfilePreferencesPatch(ApiModel):
    """Preference flags. Omitted or null keys keep their stored value."""

    public_profile: bool | None = None
    show_email: bool | None = None
    show_phone: bool | None = None


class ProfileUpsert(ApiModel):
    """Schema for creating or updating the profile."""

    name: str = Field(..., min_length=2, max_length=255)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    phone: str | None = Field(None, max_length=50)
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    education: str | None = None
    links: ProfileLinksSchema | None = None
    preferences: ProfilePreferencesPatch | None = None

    def changes(self) -> dict:
        """Fields the client actually sent, nested objects included."""
        return self.model_dump(exclude_unset=True)


class ProfilePreferencesResponse(ApiModel):
    public_profile: bool
    show_email: bool
    show_phone: bool


class ProfileResponse(ApiModel):
    """Schema for the full profile aggregate."""

    name: str
    email: str
    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    education: str | None = None
    links: ProfileLinksSchema
    preferences: ProfilePreferencesResponse
    skills: list[str]
    projects: list[ProjectResponse]
    work: list[WorkResponse]
    created_at: datetime
    updated_at: datetime

    @field_validator("skills")
    @classmethod
    def sort_skills(cls, v: list[str]) -> list[str]:
        return sorted(v)


class ProfileSavedResponse(ApiModel):
    """Schema for the result of a create-or-update."""

    message: str
    profile: ProfileResponse
