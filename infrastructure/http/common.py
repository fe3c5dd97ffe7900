"""Shared HTTP status handling for the Mojang and Hypixel clients."""

from __future__ import annotations

import aiohttp

from domain.errors import PlayerNotFound, RateLimited, UpstreamError


def raise_for_lookup_status(response: aiohttp.ClientResponse, service: str, subject: str = "") -> None:
    """Translate a non-200 response into the lookup failure taxonomy."""

    if response.status == 200:
        return
    if response.status == 404:
        raise PlayerNotFound(service, subject)
    if response.status == 429:
        raise RateLimited(service)
    raise UpstreamError(service, response.status)
