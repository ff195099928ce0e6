"""SQLAlchemy implementation of Profile repository."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ConcurrentUpdateError, ProfileNotFoundError
from domain.entities.profile import Profile, ProfileLinks, ProfilePreferences
from domain.entities.project import Project, ProjectLinks, ProjectStatus
from domain.entities.work import WorkExperience
from infrastructure.database.errors import translate_store_errors
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, key: str) -> Profile | None:
        """Get the profile stored under ``key``."""
        with translate_store_errors("load profile"):
            model = await self._session.get(ProfileModel, key)
        return self._to_entity(model) if model else None

    async def add(self, profile: Profile) -> Profile:
        """Insert a new profile."""
        model = ProfileModel(key=profile.key, created_at=profile.created_at)
        self._apply(model, profile)
        with translate_store_errors("create profile"):
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        return self._to_entity(model)

    async def save(self, profile: Profile) -> Profile:
        """Write every field of ``profile`` onto its stored row.

        Raises ConcurrentUpdateError when the row changed since ``profile``
        was loaded.
        """
        with translate_store_errors("save profile"):
            model = await self._session.get(ProfileModel, profile.key)
            if not model:
                raise ProfileNotFoundError()
            if model.version != profile.version:
                raise ConcurrentUpdateError()
            self._apply(model, profile)
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, key: str) -> bool:
        """Delete the profile row."""
        with translate_store_errors("delete profile"):
            model = await self._session.get(ProfileModel, key)
            if not model:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True

    def _apply(self, model: ProfileModel, entity: Profile) -> None:
        """Copy entity state onto the ORM model."""
        model.name = entity.name
        model.email = entity.email
        model.phone = entity.phone
        model.location = entity.location
        model.bio = entity.bio
        model.education = entity.education
        model.links = {
            "github": entity.links.github,
            "linkedin": entity.links.linkedin,
            "portfolio": entity.links.portfolio,
            "twitter": entity.links.twitter,
            "website": entity.links.website,
        }
        model.preferences = {
            "public_profile": entity.preferences.public_profile,
            "show_email": entity.preferences.show_email,
            "show_phone": entity.preferences.show_phone,
        }
        model.skills = list(entity.skills)
        model.projects = [_project_to_json(p) for p in entity.projects]
        model.work = [_work_to_json(w) for w in entity.work]
        model.updated_at = entity.updated_at

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            key=model.key,
            name=model.name,
            email=model.email,
            phone=model.phone,
            location=model.location,
            bio=model.bio,
            education=model.education,
            links=ProfileLinks(**(model.links or {})),
            preferences=ProfilePreferences(**(model.preferences or {})),
            skills=list(model.skills or []),
            projects=[_project_from_json(p) for p in model.projects or []],
            work=[_work_from_json(w) for w in model.work or []],
            version=model.version,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


def _date_to_json(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _date_from_json(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _project_to_json(project: Project) -> dict[str, Any]:
    return {
        "id": str(project.id),
        "title": project.title,
        "description": project.description,
        "links": {
            "repo": project.links.repo,
            "demo": project.links.demo,
            "live": project.links.live,
        },
        "skills": list(project.skills),
        "status": project.status.value,
        "start_date": _date_to_json(project.start_date),
        "end_date": _date_to_json(project.end_date),
    }


def _project_from_json(data: dict[str, Any]) -> Project:
    return Project(
        id=UUID(data["id"]),
        title=data["title"],
        description=data["description"],
        links=ProjectLinks(**(data.get("links") or {})),
        skills=list(data.get("skills") or []),
        status=ProjectStatus(data.get("status") or ProjectStatus.COMPLETED),
        start_date=_date_from_json(data.get("start_date")),
        end_date=_date_from_json(data.get("end_date")),
    )


def _work_to_json(entry: WorkExperience) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "company": entry.company,
        "title": entry.title,
        "duration": entry.duration,
        "description": entry.description,
        "location": entry.location,
        "start_date": _date_to_json(entry.start_date),
        "end_date": _date_to_json(entry.end_date),
        "current": entry.current,
    }


def _work_from_json(data: dict[str, Any]) -> WorkExperience:
    return WorkExperience(
        id=UUID(data["id"]),
        company=data["company"],
        title=data["title"],
        duration=data["duration"],
        description=data["description"],
        location=data.get("location"),
        start_date=_date_from_json(data.get("start_date")),
        end_date=_date_from_json(data.get("end_date")),
        current=bool(data.get("current", False)),
    )
