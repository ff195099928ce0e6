"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for the Profile aggregate.

    The aggregate is stored as one record under a well-known key, so every
    call persists or loads the whole profile including its embedded lists.
    """

    async def get(self, key: str) -> Profile | None:
        """Get the profile stored under ``key``."""
        ...

    async def add(self, profile: Profile) -> Profile:
        """Insert a new profile."""
        ...

    async def save(self, profile: Profile) -> Profile:
        """Persist all fields of an existing profile."""
        ...

    async def delete(self, key: str) -> bool:
        """Delete the profile and return success status."""
        ...
