"""Port interface for actor profile lookup."""

from abc import ABC, abstractmethod

from app.domain.entities.profile import Profile


class ProfileDirectory(ABC):
    @abstractmethod
    async def get_by_id(self, actor_id: str) -> Profile | None:
        """Return the actor's profile, or None when no profile exists.

        Transport failures are raised to the caller.
        """
        ...
