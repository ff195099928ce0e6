"""Reset the store and load a sample profile.

Run from ``src/``::

    python -m infrastructure.database.seed
"""

import asyncio
from collections.abc import Callable
from datetime import date

import structlog

from core.logging import setup_logging
from domain.entities.profile import DEFAULT_PROFILE_KEY, Profile, ProfileLinks
from domain.entities.project import Project, ProjectLinks, ProjectStatus
from domain.entities.work import WorkExperience
from domain.repositories.unit_of_work import IUnitOfWork
from infrastructure.database.models import Base
from infrastructure.database.session import async_session_factory, engine
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

logger = structlog.get_logger()


def sample_profile() -> Profile:
    """A fully populated profile for local development and demos."""
    return Profile(
        name="Alex Morgan",
        email="alex.morgan@example.com",
        phone="+1 (555) 010-2030",
        location="San Francisco, CA",
        bio=(
            "Full-stack developer who enjoys building scalable web applications "
            "and learning new technologies."
        ),
        education="BSc in Computer Science",
        links=ProfileLinks(
            github="https://github.com/alexmorgan",
            linkedin="https://www.linkedin.com/in/alexmorgan",
            portfolio="https://alexmorgan.dev",
        ),
        skills=[
            "JavaScript",
            "React",
            "Node.js",
            "TypeScript",
            "Python",
            "FastAPI",
            "PostgreSQL",
            "SQL",
            "Git",
            "AWS",
        ],
        projects=[
            Project(
                title="Portfolio API",
                description=(
                    "Profile management service with CRUD operations for projects, "
                    "work experience and skills, plus project search."
                ),
                skills=["Python", "FastAPI", "PostgreSQL", "React"],
                links=ProjectLinks(repo="https://github.com/alexmorgan/portfolio-api"),
                start_date=date(2024, 1, 1),
                end_date=date(2024, 2, 15),
            ),
            Project(
                title="E-commerce Platform",
                description=(
                    "Online store with product catalog, shopping cart, payment "
                    "integration and order management."
                ),
                skills=["React", "Node.js", "Stripe API"],
                links=ProjectLinks(
                    repo="https://github.com/alexmorgan/shop",
                    demo="https://shop-demo.example.com",
                ),
                start_date=date(2023, 9, 1),
                end_date=date(2023, 12, 20),
            ),
            Project(
                title="Task Management App",
                description=(
                    "Collaborative task tracker with real-time updates, file sharing "
                    "and progress reporting."
                ),
                skills=["TypeScript", "React", "Socket.io", "PostgreSQL"],
                status=ProjectStatus.IN_PROGRESS,
                start_date=date(2024, 3, 1),
            ),
        ],
        work=[
            WorkExperience(
                company="Acme Software",
                title="Software Engineer",
                duration="Jun 2023 - Present",
                description=(
                    "Building internal tooling and customer-facing APIs with Python "
                    "and TypeScript."
                ),
                location="Remote",
                start_date=date(2023, 6, 1),
                current=True,
            ),
            WorkExperience(
                company="Startup Labs",
                title="Software Engineering Intern",
                duration="Jan 2023 - May 2023",
                description="Developed React components and REST endpoints for an MVP.",
                location="San Francisco, CA",
                start_date=date(2023, 1, 1),
                end_date=date(2023, 5, 31),
            ),
        ],
    )


async def seed(uow_factory: Callable[[], IUnitOfWork]) -> Profile:
    """Replace whatever profile is stored with the sample profile."""
    async with uow_factory() as uow:
        if await uow.profiles.delete(DEFAULT_PROFILE_KEY):
            logger.info("seed_cleared_existing_profile")
        created = await uow.profiles.add(sample_profile())
        await uow.commit()

    logger.info(
        "seed_completed",
        skills=len(created.skills),
        projects=len(created.projects),
        work=len(created.work),
    )
    return created


async def main() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await seed(lambda: SQLAlchemyUnitOfWork(async_session_factory))
    await engine.dispose()


if __name__ == "__main__":
    setup_logging()
    asyncio.run(main())
