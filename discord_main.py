import asyncio
import logging

import aiohttp
import discord
from dotenv import load_dotenv

from domain.errors import ConfigError
from infrastructure.config import BotConfig, load_config
from infrastructure.http.hypixel import HypixelSocialLinkChecker
from infrastructure.http.mojang import MojangIdentityResolver
from infrastructure.web.keepalive import start_keepalive_server
from interfaces.discord.handlers import create_discord_bot


load_dotenv()

logger = logging.getLogger("discord_main")


async def run(config: BotConfig) -> None:
    runner = await start_keepalive_server(config.host, config.port)
    try:
        async with aiohttp.ClientSession() as session:
            resolver = MojangIdentityResolver(session, config.mojang_api_url)
            checker = HypixelSocialLinkChecker(session, config.hypixel_api_key, config.hypixel_api_url)

            bot = create_discord_bot(config, resolver, checker)
            async with bot:
                await bot.start(config.discord_token)
    finally:
        await runner.cleanup()


def main() -> None:
    discord.utils.setup_logging(level=logging.INFO)

    try:
        config = load_config()
    except ConfigError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    logging.getLogger().setLevel(config.log_level)

    try:
        asyncio.run(run(config))
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
