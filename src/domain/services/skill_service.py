"""Skill service layer."""

from collections.abc import Callable, Iterable

import structlog

from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_service import require_profile

logger = structlog.get_logger()


class SkillService:
    """Service layer for the profile's skill list.

    Every method returns skills sorted ascending regardless of storage order.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> list[str]:
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            return profile.sorted_skills

    async def add(self, skill: str) -> list[str]:
        """Add one skill. Raises DuplicateSkillError on a case-insensitive match."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            profile.add_skill(skill)
            saved = await uow.profiles.save(profile)
            await uow.commit()
            logger.info("skill_added", skill=skill)
            return saved.sorted_skills

    async def delete(self, skill: str) -> tuple[str, list[str]]:
        """Remove a skill matched case-insensitively. Returns the removed spelling."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            removed = profile.remove_skill(skill)
            saved = await uow.profiles.save(profile)
            await uow.commit()
            logger.info("skill_deleted", skill=removed)
            return removed, saved.sorted_skills

    async def replace(self, skills: Iterable[str]) -> list[str]:
        """Replace the whole skill list after trimming, filtering and de-duplicating."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            profile.replace_skills(skills)
            saved = await uow.profiles.save(profile)
            await uow.commit()
            logger.info("skills_replaced", count=len(saved.skills))
            return saved.sorted_skills
