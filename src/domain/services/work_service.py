"""Work experience service layer."""

from collections.abc import Callable

import structlog

from domain.entities.work import WorkExperience
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_service import require_profile

logger = structlog.get_logger()


class WorkService:
    """Service layer for work-experience entries embedded in the profile."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> list[WorkExperience]:
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            return list(profile.work)

    async def add(self, entry: WorkExperience) -> tuple[WorkExperience, list[WorkExperience]]:
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            profile.add_work(entry)
            saved = await uow.profiles.save(profile)
            await uow.commit()
            logger.info("work_added", index=len(saved.work) - 1)
            return saved.work[-1], saved.work

    async def update(
        self, index: int, entry: WorkExperience
    ) -> tuple[WorkExperience, list[WorkExperience]]:
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            profile.replace_work_at(index, entry)
            saved = await uow.profiles.save(profile)
            await uow.commit()
            logger.info("work_updated", index=index)
            return saved.work[index], saved.work

    async def delete(self, index: int) -> tuple[WorkExperience, list[WorkExperience]]:
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            removed = profile.remove_work_at(index)
            saved = await uow.profiles.save(profile)
            await uow.commit()
            logger.info("work_deleted", index=index)
            return removed, saved.work
