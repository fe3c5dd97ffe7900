"""Hypixel player API client (UUID -> linked Discord tag)."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

import aiohttp

from domain.errors import UpstreamUnavailable
from domain.lookups import SocialLinkChecker
from domain.models import SocialProfile
from infrastructure.config import DEFAULT_HYPIXEL_API_URL

from .common import raise_for_lookup_status


SERVICE = "Hypixel"


def _linked_discord(payload: Optional[Dict[str, Any]]) -> Optional[str]:
    player = (payload or {}).get("player") or {}
    links = (player.get("socialMedia") or {}).get("links") or {}
    return links.get("DISCORD") or None


class HypixelSocialLinkChecker(SocialLinkChecker):
    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: str,
        base_url: str = DEFAULT_HYPIXEL_API_URL,
    ) -> None:
        self._session = session
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    async def fetch_profile(self, player_id: str) -> SocialProfile:
        try:
            async with self._session.get(
                f"{self._base_url}/player",
                params={"key": self._api_key, "uuid": player_id},
            ) as response:
                raise_for_lookup_status(response, SERVICE, player_id)
                payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise UpstreamUnavailable(SERVICE, f"{SERVICE}: {exc!r}") from exc

        return SocialProfile(linked_account_tag=_linked_discord(payload))
