"""Profile aggregate root."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any, ClassVar, TypeVar

from core.exceptions import (
    DuplicateSkillError,
    InvalidIndexError,
    SkillNotFoundError,
    ValidationError,
)
from domain.entities.project import Project
from domain.entities.work import WorkExperience

DEFAULT_PROFILE_KEY = "default"
MIN_SKILL_LENGTH = 2

_T = TypeVar("_T")


@dataclass
class ProfileLinks:
    """Public links shown on the portfolio."""

    github: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None
    twitter: str | None = None
    website: str | None = None

    def merged(self, patch: Mapping[str, Any] | None) -> "ProfileLinks":
        """Return a copy with the keys present in ``patch`` overridden."""
        if not patch:
            return replace(self)
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in patch.items() if k in known})


@dataclass
class ProfilePreferences:
    """Visibility preferences for the public profile."""

    public_profile: bool = True
    show_email: bool = True
    show_phone: bool = False

    def merged(self, patch: Mapping[str, Any] | None) -> "ProfilePreferences":
        """Return a copy with the non-null keys present in ``patch`` overridden."""
        if not patch:
            return replace(self)
        known = {f.name for f in fields(self)}
        return replace(
            self, **{k: v for k, v in patch.items() if k in known and v is not None}
        )


@dataclass
class Profile:
    """Domain entity for the single portfolio profile.

    The profile owns three embedded lists (skills, projects, work) that have
    no existence outside of it. All list mutation rules live here so the
    services only load, mutate and persist.
    """

    SCALAR_FIELDS: ClassVar[tuple[str, ...]] = (
        "name",
        "email",
        "phone",
        "location",
        "bio",
        "education",
    )

    name: str
    email: str
    key: str = DEFAULT_PROFILE_KEY
    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    education: str | None = None
    links: ProfileLinks = field(default_factory=ProfileLinks)
    preferences: ProfilePreferences = field(default_factory=ProfilePreferences)
    skills: list[str] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    work: list[WorkExperience] = field(default_factory=list)
    version: int = 0
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    @classmethod
    def create(cls, changes: Mapping[str, Any]) -> "Profile":
        """Build a new profile from request fields. ``name`` and ``email`` are required."""
        for required in ("name", "email"):
            if not changes.get(required):
                raise ValidationError(required, f"Field '{required}' is required")

        scalars = {k: changes[k] for k in cls.SCALAR_FIELDS if k in changes}
        return cls(
            **scalars,
            links=ProfileLinks().merged(changes.get("links")),
            preferences=ProfilePreferences().merged(changes.get("preferences")),
        )

    def apply_update(self, changes: Mapping[str, Any]) -> None:
        """Merge provided fields into the profile. Embedded lists are never touched."""
        for name in self.SCALAR_FIELDS:
            if name in changes:
                setattr(self, name, changes[name])
        if "links" in changes:
            self.links = self.links.merged(changes["links"])
        if "preferences" in changes:
            self.preferences = self.preferences.merged(changes["preferences"])
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()

    # --- skills ---

    @property
    def sorted_skills(self) -> list[str]:
        return sorted(self.skills)

    def find_skill(self, name: str) -> int | None:
        """Index of the skill equal to ``name`` ignoring case, or None."""
        needle = name.lower()
        for index, skill in enumerate(self.skills):
            if skill.lower() == needle:
                return index
        return None

    def add_skill(self, name: str) -> None:
        if self.find_skill(name) is not None:
            raise DuplicateSkillError(name)
        self.skills.append(name)
        self.touch()

    def remove_skill(self, name: str) -> str:
        """Remove a skill matched case-insensitively and return the stored spelling."""
        index = self.find_skill(name)
        if index is None:
            raise SkillNotFoundError(name)
        removed = self.skills.pop(index)
        self.touch()
        return removed

    def replace_skills(self, names: Iterable[str]) -> None:
        """Replace all skills.

        Candidates are trimmed, entries shorter than two characters are
        dropped and case-insensitive duplicates collapse to the first
        occurrence.
        """
        cleaned: list[str] = []
        seen: set[str] = set()
        for raw in names:
            name = raw.strip()
            if len(name) < MIN_SKILL_LENGTH or name.lower() in seen:
                continue
            seen.add(name.lower())
            cleaned.append(name)
        self.skills = cleaned
        self.touch()

    # --- projects ---

    def projects_with_skill(self, fragment: str | None = None) -> list[Project]:
        if not fragment:
            return list(self.projects)
        return [project for project in self.projects if project.uses_skill(fragment)]

    def search_projects(self, query: str | None) -> list[Project]:
        """Projects whose title or description contains ``query``. Blank query matches nothing."""
        if not query or not query.strip():
            return []
        return [project for project in self.projects if project.matches_text(query)]

    def add_project(self, project: Project) -> Project:
        self.projects.append(project)
        self.touch()
        return project

    def replace_project_at(self, index: int, project: Project) -> Project:
        current = _item_at(self.projects, index, "project")
        project.id = current.id
        self.projects[index] = project
        self.touch()
        return project

    def remove_project_at(self, index: int) -> Project:
        _item_at(self.projects, index, "project")
        removed = self.projects.pop(index)
        self.touch()
        return removed

    # --- work experience ---

    def add_work(self, entry: WorkExperience) -> WorkExperience:
        self.work.append(entry)
        self.touch()
        return entry

    def replace_work_at(self, index: int, entry: WorkExperience) -> WorkExperience:
        current = _item_at(self.work, index, "work experience")
        entry.id = current.id
        self.work[index] = entry
        self.touch()
        return entry

    def remove_work_at(self, index: int) -> WorkExperience:
        _item_at(self.work, index, "work experience")
        removed = self.work.pop(index)
        self.touch()
        return removed


def _item_at(items: list[_T], index: int, collection: str) -> _T:
    """Return ``items[index]`` for an index in ``[0, len)``; negative indices are rejected."""
    if index < 0 or index >= len(items):
        raise InvalidIndexError(collection, index, len(items))
    return items[index]
