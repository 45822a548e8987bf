"""HTTP profile directory adapter — implements ProfileDirectory."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from app.application.ports.profile_directory import ProfileDirectory
from app.config import settings
from app.domain.entities.profile import Profile

logger = logging.getLogger(__name__)


class HttpProfileDirectory(ProfileDirectory):
    """Reads profiles from an external service at ``GET {base_url}/profiles/{id}``."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.profile_service_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.profile_service_timeout
        self._transport = transport

    async def get_by_id(self, actor_id: str) -> Profile | None:
        async with httpx.AsyncClient(
            base_url=self._base_url, timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.get(f"/profiles/{quote(actor_id, safe='')}")
            if response.status_code == 404:
                logger.debug("Profile service has no profile for %s", actor_id)
                return None
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, dict):
            logger.warning("Unexpected profile payload for %s: %r", actor_id, data)
            return None

        return Profile(
            id=str(data.get("id") or actor_id),
            name=data.get("name"),
            email=data.get("email"),
            role=data.get("role"),
        )
