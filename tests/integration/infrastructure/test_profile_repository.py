"""Integration tests for the SQLAlchemy profile repository."""

from datetime import date

import pytest

from core.exceptions import ConcurrentUpdateError, ErrorCode, ProfileNotFoundError
from domain.entities.profile import DEFAULT_PROFILE_KEY, Profile, ProfileLinks
from domain.entities.project import Project, ProjectLinks, ProjectStatus
from domain.entities.work import WorkExperience
from infrastructure.database.seed import sample_profile, seed


def _profile() -> Profile:
    return Profile(
        name="Jo Tester",
        email="jo@example.com",
        links=ProfileLinks(github="https://github.com/jo"),
        skills=["Go", "Python"],
        projects=[
            Project(
                title="Portfolio API",
                description="Profile management service",
                links=ProjectLinks(repo="https://github.com/jo/api"),
                skills=["Python"],
                status=ProjectStatus.IN_PROGRESS,
                start_date=date(2024, 1, 1),
            )
        ],
        work=[
            WorkExperience(
                company="Acme",
                title="Engineer",
                duration="2 years",
                description="Built internal tools",
                current=True,
            )
        ],
    )


class TestSQLAlchemyProfileRepository:
    @pytest.mark.asyncio
    async def test_add_and_get_round_trip(self, uow_factory):
        original = _profile()
        async with uow_factory() as uow:
            created = await uow.profiles.add(original)
            await uow.commit()

        assert created.version == 1

        async with uow_factory() as uow:
            loaded = await uow.profiles.get(DEFAULT_PROFILE_KEY)

        assert loaded is not None
        assert loaded.links.github == "https://github.com/jo"
        assert loaded.skills == ["Go", "Python"]
        project = loaded.projects[0]
        assert project.id == original.projects[0].id
        assert project.status is ProjectStatus.IN_PROGRESS
        assert project.start_date == date(2024, 1, 1)
        assert project.end_date is None
        assert loaded.work[0].current is True

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, uow_factory):
        async with uow_factory() as uow:
            assert await uow.profiles.get(DEFAULT_PROFILE_KEY) is None

    @pytest.mark.asyncio
    async def test_save_bumps_version(self, uow_factory):
        async with uow_factory() as uow:
            await uow.profiles.add(_profile())
            await uow.commit()

        async with uow_factory() as uow:
            profile = await uow.profiles.get(DEFAULT_PROFILE_KEY)
            profile.add_skill("Rust")
            saved = await uow.profiles.save(profile)
            await uow.commit()

        assert saved.version == 2
        assert "Rust" in saved.skills

    @pytest.mark.asyncio
    async def test_uncommitted_changes_are_rolled_back(self, uow_factory):
        async with uow_factory() as uow:
            await uow.profiles.add(_profile())
            await uow.commit()

        with pytest.raises(RuntimeError):
            async with uow_factory() as uow:
                profile = await uow.profiles.get(DEFAULT_PROFILE_KEY)
                profile.remove_project_at(0)
                await uow.profiles.save(profile)
                raise RuntimeError("abort")

        async with uow_factory() as uow:
            profile = await uow.profiles.get(DEFAULT_PROFILE_KEY)

        assert len(profile.projects) == 1

    @pytest.mark.asyncio
    async def test_interleaved_save_is_rejected(self, uow_factory):
        async with uow_factory() as uow:
            await uow.profiles.add(_profile())
            await uow.commit()

        with pytest.raises(ConcurrentUpdateError) as exc_info:
            async with uow_factory() as first, uow_factory() as second:
                first_copy = await first.profiles.get(DEFAULT_PROFILE_KEY)
                second_copy = await second.profiles.get(DEFAULT_PROFILE_KEY)

                first_copy.add_skill("Rust")
                await first.profiles.save(first_copy)
                await first.commit()

                second_copy.add_skill("Haskell")
                await second.profiles.save(second_copy)
                await second.commit()

        assert exc_info.value.status_code == 409
        assert exc_info.value.error_code == ErrorCode.CONCURRENT_UPDATE

        async with uow_factory() as uow:
            stored = await uow.profiles.get(DEFAULT_PROFILE_KEY)

        assert "Rust" in stored.skills
        assert "Haskell" not in stored.skills
        assert stored.version == 2

    @pytest.mark.asyncio
    async def test_save_with_stale_version_is_rejected(self, uow_factory):
        async with uow_factory() as uow:
            await uow.profiles.add(_profile())
            await uow.commit()

        async with uow_factory() as uow:
            stale = await uow.profiles.get(DEFAULT_PROFILE_KEY)
        async with uow_factory() as uow:
            fresh = await uow.profiles.get(DEFAULT_PROFILE_KEY)
            fresh.add_skill("Rust")
            await uow.profiles.save(fresh)
            await uow.commit()

        stale.add_skill("Haskell")
        async with uow_factory() as uow:
            with pytest.raises(ConcurrentUpdateError):
                await uow.profiles.save(stale)

    @pytest.mark.asyncio
    async def test_save_missing_raises(self, uow_factory):
        async with uow_factory() as uow:
            with pytest.raises(ProfileNotFoundError):
                await uow.profiles.save(_profile())

    @pytest.mark.asyncio
    async def test_delete(self, uow_factory):
        async with uow_factory() as uow:
            await uow.profiles.add(_profile())
            await uow.commit()

        async with uow_factory() as uow:
            assert await uow.profiles.delete(DEFAULT_PROFILE_KEY) is True
            await uow.commit()

        async with uow_factory() as uow:
            assert await uow.profiles.delete(DEFAULT_PROFILE_KEY) is False


class TestSeed:
    @pytest.mark.asyncio
    async def test_seed_replaces_existing_profile(self, uow_factory):
        async with uow_factory() as uow:
            await uow.profiles.add(_profile())
            await uow.commit()

        created = await seed(uow_factory)

        expected = sample_profile()
        assert created.name == expected.name
        assert len(created.skills) == len(expected.skills)
        assert len(created.projects) == 3
        assert len(created.work) == 2

        async with uow_factory() as uow:
            loaded = await uow.profiles.get(DEFAULT_PROFILE_KEY)
        assert loaded.email == expected.email
