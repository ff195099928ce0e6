"""Work experience domain entity."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4


@dataclass
class WorkExperience:
    """Domain entity for a work-experience entry embedded in a profile."""

    company: str
    title: str
    duration: str
    description: str
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    current: bool = False
