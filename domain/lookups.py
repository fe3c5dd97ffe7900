from __future__ import annotations

from typing import Protocol

from .models import ResolvedPlayer, SocialProfile


class IdentityResolver(Protocol):
    """
    Maps a Minecraft display name to a stable player identifier.

    Implementations raise `PlayerNotFound` when the name does not exist,
    `RateLimited` on HTTP 429 and `UpstreamError` / `UpstreamUnavailable`
    for anything else. A single attempt is made per call.
    """

    async def resolve(self, username: str) -> ResolvedPlayer:
        ...


class SocialLinkChecker(Protocol):
    """
    Fetches a player's public profile and extracts the linked Discord tag.

    A missing link is a normal value (`SocialProfile(None)`), not an error.
    """

    async def fetch_profile(self, player_id: str) -> SocialProfile:
        ...


class MemberActions(Protocol):
    """
    Side effects on the requesting guild member.

    The workflow only sees this small interface and never depends on
    concrete Discord types.
    """

    async def add_role(self, role_id: int) -> bool:
        """
        Grant the role with the given ID.

        Return False if the guild has no such role. Granting a role the
        member already holds is a no-op that returns True.
        """

        ...

    async def set_nickname(self, nickname: str) -> None:
        """Set the member's guild nickname; raise on any failure."""

        ...
