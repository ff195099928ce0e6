"""Project service layer."""

from collections.abc import Callable

import structlog

from domain.entities.project import Project
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_service import require_profile

logger = structlog.get_logger()


class ProjectService:
    """Service layer for projects embedded in the profile."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self, skill: str | None = None) -> list[Project]:
        """All projects, or those using a skill matching ``skill`` as a substring."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            return profile.projects_with_skill(skill)

    async def search(self, query: str | None) -> list[Project]:
        """Free-text search over project titles and descriptions.

        A blank query matches nothing and does not require a profile.
        """
        if not query or not query.strip():
            return []
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            return profile.search_projects(query)

    async def add(self, project: Project) -> tuple[Project, list[Project]]:
        """Append a project. Returns the project and the refreshed list."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            profile.add_project(project)
            saved = await uow.profiles.save(profile)
            await uow.commit()
            logger.info("project_added", index=len(saved.projects) - 1)
            return saved.projects[-1], saved.projects

    async def update(self, index: int, project: Project) -> tuple[Project, list[Project]]:
        """Replace the project at ``index``."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            profile.replace_project_at(index, project)
            saved = await uow.profiles.save(profile)
            await uow.commit()
            logger.info("project_updated", index=index)
            return saved.projects[index], saved.projects

    async def delete(self, index: int) -> tuple[Project, list[Project]]:
        """Remove the project at ``index``. Returns the removed project."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            removed = profile.remove_project_at(index)
            saved = await uow.profiles.save(profile)
            await uow.commit()
            logger.info("project_deleted", index=index)
            return removed, saved.projects
