"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.profile import Profile
from domain.entities.project import Project
from domain.entities.work import WorkExperience


class FakeUnitOfWork:
    """Fake Unit of Work with a mocked profile repository for unit testing.

    ``save`` and ``add`` echo back the entity they receive, like the real
    repository does after a flush.
    """

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.profiles.save.side_effect = lambda profile: profile
        self.profiles.add.side_effect = lambda profile: profile
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def profile() -> Profile:
    """A stored profile with a few entries in every embedded list."""
    return Profile(
        name="Jo Tester",
        email="jo@example.com",
        skills=["Python", "go", "React"],
        projects=[
            Project(
                title="Portfolio API",
                description="Profile management service",
                skills=["Python", "FastAPI"],
            ),
            Project(
                title="Shop Frontend",
                description="Storefront written in React",
                skills=["React", "TypeScript"],
            ),
        ],
        work=[
            WorkExperience(
                company="Acme",
                title="Engineer",
                duration="2 years",
                description="Built internal tools",
            ),
        ],
    )
