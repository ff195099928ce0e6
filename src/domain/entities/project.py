"""Project domain entity."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from uuid import UUID, uuid4


class ProjectStatus(StrEnum):
    """Lifecycle state of a portfolio project."""

    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    PLANNED = "planned"


@dataclass
class ProjectLinks:
    """External links for a project."""

    repo: str | None = None
    demo: str | None = None
    live: str | None = None


@dataclass
class Project:
    """Domain entity for a project embedded in a profile.

    Projects are addressed by position through the API. The ``id`` is an
    internal stable identifier that survives updates at the same index.
    """

    title: str
    description: str
    id: UUID = field(default_factory=uuid4)
    links: ProjectLinks = field(default_factory=ProjectLinks)
    skills: list[str] = field(default_factory=list)
    status: ProjectStatus = ProjectStatus.COMPLETED
    start_date: date | None = None
    end_date: date | None = None

    def uses_skill(self, fragment: str) -> bool:
        """True if any project skill contains ``fragment`` (case-insensitive)."""
        needle = fragment.lower()
        return any(needle in skill.lower() for skill in self.skills)

    def matches_text(self, query: str) -> bool:
        """True if title or description contains ``query`` (case-insensitive)."""
        needle = query.lower()
        return needle in self.title.lower() or needle in self.description.lower()
