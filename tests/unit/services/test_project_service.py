"""Unit tests for ProjectService."""

import pytest

from core.exceptions import InvalidIndexError, ProfileNotFoundError
from domain.entities.profile import Profile
from domain.entities.project import Project
from domain.services.project_service import ProjectService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ProjectService:
    return ProjectService(lambda: uow)


def _new_project() -> Project:
    return Project(title="CLI Tool", description="Command line helper", skills=["Go"])


class TestGetAll:
    @pytest.mark.asyncio
    async def test_returns_all_without_filter(
        self, service: ProjectService, uow: FakeUnitOfWork, profile: Profile
    ):
        uow.profiles.get.return_value = profile

        result = await service.get_all()

        assert [p.title for p in result] == ["Portfolio API", "Shop Frontend"]

    @pytest.mark.asyncio
    async def test_filters_by_skill(
        self, service: ProjectService, uow: FakeUnitOfWork, profile: Profile
    ):
        uow.profiles.get.return_value = profile

        result = await service.get_all("react")

        assert [p.title for p in result] == ["Shop Frontend"]

    @pytest.mark.asyncio
    async def test_raises_not_found_without_profile(
        self, service: ProjectService, uow: FakeUnitOfWork
    ):
        uow.profiles.get.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.get_all()


class TestSearch:
    @pytest.mark.asyncio
    async def test_matches_description(
        self, service: ProjectService, uow: FakeUnitOfWork, profile: Profile
    ):
        uow.profiles.get.return_value = profile

        result = await service.search("storefront")

        assert [p.title for p in result] == ["Shop Frontend"]

    @pytest.mark.asyncio
    async def test_blank_query_skips_store(self, service: ProjectService, uow: FakeUnitOfWork):
        assert await service.search("") == []
        assert await service.search(None) == []
        uow.profiles.get.assert_not_called()


class TestAdd:
    @pytest.mark.asyncio
    async def test_appends_and_returns_list(
        self, service: ProjectService, uow: FakeUnitOfWork, profile: Profile
    ):
        uow.profiles.get.return_value = profile

        project, projects = await service.add(_new_project())

        assert project.title == "CLI Tool"
        assert len(projects) == 3
        assert projects[-1] is project
        assert uow.committed


class TestUpdate:
    @pytest.mark.asyncio
    async def test_replaces_at_index(
        self, service: ProjectService, uow: FakeUnitOfWork, profile: Profile
    ):
        uow.profiles.get.return_value = profile
        original_id = profile.projects[1].id

        project, projects = await service.update(1, _new_project())

        assert projects[1].title == "CLI Tool"
        assert project.id == original_id
        assert uow.committed

    @pytest.mark.asyncio
    async def test_invalid_index_does_not_save(
        self, service: ProjectService, uow: FakeUnitOfWork, profile: Profile
    ):
        uow.profiles.get.return_value = profile

        with pytest.raises(InvalidIndexError):
            await service.update(2, _new_project())

        uow.profiles.save.assert_not_called()
        assert not uow.committed


class TestDelete:
    @pytest.mark.asyncio
    async def test_removes_at_index(
        self, service: ProjectService, uow: FakeUnitOfWork, profile: Profile
    ):
        uow.profiles.get.return_value = profile

        removed, projects = await service.delete(0)

        assert removed.title == "Portfolio API"
        assert [p.title for p in projects] == ["Shop Frontend"]
        assert uow.committed

    @pytest.mark.asyncio
    async def test_negative_index(
        self, service: ProjectService, uow: FakeUnitOfWork, profile: Profile
    ):
        uow.profiles.get.return_value = profile

        with pytest.raises(InvalidIndexError):
            await service.delete(-1)

        assert len(profile.projects) == 2
