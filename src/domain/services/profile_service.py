"""Profile service layer with business logic."""

from collections.abc import Callable, Mapping
from typing import Any

import structlog

from core.exceptions import ProfileNotFoundError
from domain.entities.profile import DEFAULT_PROFILE_KEY, Profile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


async def require_profile(uow: IUnitOfWork) -> Profile:
    """Load the single profile or raise ProfileNotFoundError."""
    profile = await uow.profiles.get(DEFAULT_PROFILE_KEY)
    if not profile:
        raise ProfileNotFoundError()
    return profile


class ProfileService:
    """Service layer for the Profile aggregate itself."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get(self) -> Profile:
        """Get the profile."""
        async with self._uow_factory() as uow:
            return await require_profile(uow)

    async def upsert(self, changes: Mapping[str, Any]) -> tuple[Profile, bool]:
        """Create the profile if absent, otherwise merge ``changes`` into it.

        Returns the stored profile and whether it was created.
        """
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(DEFAULT_PROFILE_KEY)
            if profile is None:
                created = await uow.profiles.add(Profile.create(changes))
                await uow.commit()
                logger.info("profile_created")
                return created, True

            profile.apply_update(changes)
            updated = await uow.profiles.save(profile)
            await uow.commit()
            logger.info("profile_updated", fields=sorted(changes))
            return updated, False

    async def delete(self) -> Profile:
        """Delete the profile together with all embedded lists."""
        async with self._uow_factory() as uow:
            profile = await require_profile(uow)
            await uow.profiles.delete(profile.key)
            await uow.commit()
            logger.info("profile_deleted")
            return profile
