from __future__ import annotations

from typing import Optional


class LookupFailure(Exception):
    """Base class for failures talking to Mojang or Hypixel."""

    def __init__(self, service: str, status: Optional[int] = None, message: str = "") -> None:
        self.service = service
        self.status = status
        super().__init__(message or f"{service} lookup failed (status={status})")


class PlayerNotFound(LookupFailure):
    def __init__(self, service: str, username: str = "") -> None:
        self.username = username
        super().__init__(service, 404, f"{service}: player {username!r} not found")


class RateLimited(LookupFailure):
    def __init__(self, service: str) -> None:
        super().__init__(service, 429, f"{service}: rate limited")


class UpstreamError(LookupFailure):
    """Any other non-success HTTP status."""


class UpstreamUnavailable(LookupFailure):
    """Network-level failure; no HTTP status was received."""

    def __init__(self, service: str, message: str = "") -> None:
        super().__init__(service, None, message or f"{service} is unreachable")


class ConfigError(Exception):
    """Required configuration is missing or malformed."""
