"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.profile_service import ProfileService
from domain.services.project_service import ProjectService
from domain.services.skill_service import SkillService
from domain.services.work_service import WorkService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory())


@lru_cache
def get_project_service() -> ProjectService:
    """Get Project service instance."""
    return ProjectService(get_uow_factory())


@lru_cache
def get_work_service() -> WorkService:
    """Get Work service instance."""
    return WorkService(get_uow_factory())


@lru_cache
def get_skill_service() -> SkillService:
    """Get Skill service instance."""
    return SkillService(get_uow_factory())
