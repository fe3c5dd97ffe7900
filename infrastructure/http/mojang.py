"""Mojang profile API client (username -> UUID)."""

from __future__ import annotations

import asyncio
import logging
from urllib.parse import quote

import aiohttp

from domain.errors import PlayerNotFound, UpstreamUnavailable
from domain.lookups import IdentityResolver
from domain.models import ResolvedPlayer
from infrastructure.config import DEFAULT_MOJANG_API_URL

from .common import raise_for_lookup_status


logger = logging.getLogger(__name__)

SERVICE = "Mojang"


class MojangIdentityResolver(IdentityResolver):
    """
    Resolves a Minecraft username through
    `GET /users/profiles/minecraft/{username}`.

    The session is owned by the caller so both API clients can share one
    connection pool.
    """

    def __init__(self, session: aiohttp.ClientSession, base_url: str = DEFAULT_MOJANG_API_URL) -> None:
        self._session = session
        self._base_url = base_url.rstrip("/")

    async def resolve(self, username: str) -> ResolvedPlayer:
        url = f"{self._base_url}/users/profiles/minecraft/{quote(username, safe='')}"
        try:
            async with self._session.get(url) as response:
                # Older API versions answer unknown names with 204 and no body.
                if response.status == 204:
                    raise PlayerNotFound(SERVICE, username)
                raise_for_lookup_status(response, SERVICE, username)
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise UpstreamUnavailable(SERVICE, f"{SERVICE}: {exc!r}") from exc

        player_id = (data or {}).get("id")
        if not player_id:
            raise PlayerNotFound(SERVICE, username)

        logger.debug("Resolved %s to %s", username, player_id)
        return ResolvedPlayer(player_id=player_id)
