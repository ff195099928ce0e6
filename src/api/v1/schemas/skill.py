"""Pydantic schemas for Skills API."""

from pydantic import Field

from api.v1.schemas.common import ApiModel


class SkillCreate(ApiModel):
    """Schema for adding a single skill."""

    skill: str = Field(..., min_length=2)


class SkillsReplace(ApiModel):
    """Schema for replacing the whole skill list.

    Items are not length-checked here; short and duplicate entries are
    dropped by the domain instead of failing the request.
    """

    skills: list[str]


class SkillAddedResponse(ApiModel):
    message: str
    skill: str
    skills: list[str]


class SkillDeletedResponse(ApiModel):
    message: str
    deleted_skill: str
    skills: list[str]


class SkillsUpdatedResponse(ApiModel):
    message: str
    skills: list[str]
