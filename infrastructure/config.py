from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from domain.errors import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_MOJANG_API_URL = "https://api.mojang.com"
DEFAULT_HYPIXEL_API_URL = "https://api.hypixel.net"


@dataclass(frozen=True)
class BotConfig:
    """
    Process-wide settings, read once at startup and passed explicitly to
    the dispatcher and the workflow.
    """

    discord_token: str
    hypixel_api_key: str
    member_role_id: Optional[int] = None
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    mojang_api_url: str = DEFAULT_MOJANG_API_URL
    hypixel_api_url: str = DEFAULT_HYPIXEL_API_URL


def _required(env: Mapping[str, str], name: str) -> str:
    value = (env.get(name) or "").strip()
    if not value:
        raise ConfigError(f"{name} is missing in environment variables!")
    return value


def _role_id(env: Mapping[str, str]) -> Optional[int]:
    raw = (env.get("MEMBER_ROLE_ID") or "").strip()
    if not raw:
        logger.warning("MEMBER_ROLE_ID is not set; role features will not work")
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("MEMBER_ROLE_ID %r is not a valid ID; role features will not work", raw)
        return None


def _port(env: Mapping[str, str]) -> int:
    raw = (env.get("PORT") or "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw!r}") from None


def _log_level(env: Mapping[str, str]) -> str:
    level = (env.get("LOG_LEVEL") or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"LOG_LEVEL {level!r} is not a logging level")
    return level


def load_config(environ: Optional[Mapping[str, str]] = None) -> BotConfig:
    """
    Build a `BotConfig` from the process environment.

    DISCORD_TOKEN and HYPIXEL_API_KEY are required; MEMBER_ROLE_ID is
    optional and only disables role granting when absent.
    """

    env = os.environ if environ is None else environ

    return BotConfig(
        discord_token=_required(env, "DISCORD_TOKEN"),
        hypixel_api_key=_required(env, "HYPIXEL_API_KEY"),
        member_role_id=_role_id(env),
        port=_port(env),
        log_level=_log_level(env),
        mojang_api_url=(env.get("MOJANG_API_URL") or DEFAULT_MOJANG_API_URL).rstrip("/"),
        hypixel_api_url=(env.get("HYPIXEL_API_URL") or DEFAULT_HYPIXEL_API_URL).rstrip("/"),
    )
