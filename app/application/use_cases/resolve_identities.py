"""ResolveIdentitiesUseCase — fill missing display fields from profiles."""

from __future__ import annotations

import asyncio
import logging

from app.application.ports.profile_directory import ProfileDirectory
from app.domain.entities.assignment_candidate import AssignmentCandidate

logger = logging.getLogger(__name__)


class ResolveIdentitiesUseCase:
    """Looks up unresolved candidates concurrently; failures leave them as-is."""

    def __init__(self, profiles: ProfileDirectory):
        self._profiles = profiles

    async def execute(
        self, candidates: list[AssignmentCandidate]
    ) -> list[AssignmentCandidate]:
        return list(await asyncio.gather(*(self._resolve(c) for c in candidates)))

    async def _resolve(self, candidate: AssignmentCandidate) -> AssignmentCandidate:
        if not candidate.needs_profile_lookup():
            return candidate
        try:
            profile = await self._profiles.get_by_id(candidate.actor_id)
        except Exception as e:
            logger.warning("Profile lookup failed for %s: %s", candidate.actor_id, e)
            return candidate
        if profile is None:
            logger.debug("No profile for %s", candidate.actor_id)
            return candidate
        return candidate.with_profile(profile)
