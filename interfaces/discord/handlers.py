from __future__ import annotations

import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from application.services import verify_account
from domain.lookups import IdentityResolver, SocialLinkChecker
from domain.models import VerificationRequest
from infrastructure.config import BotConfig

from .embeds import build_outcome_embed
from .member import DiscordMemberActions


logger = logging.getLogger(__name__)

MISSING_USERNAME_MESSAGE = "Missing username!"


def account_tag(user: discord.abc.User) -> str:
    """
    Return the caller's tag in the form Hypixel stores it.

    Legacy accounts keep `name#1234`; migrated accounts have discriminator
    "0" and are identified by their bare username.
    """

    discriminator = getattr(user, "discriminator", "0") or "0"
    if discriminator == "0":
        return user.name
    return f"{user.name}#{discriminator}"


async def handle_ping(interaction: discord.Interaction) -> None:
    await interaction.response.send_message("Pong!")


async def handle_verify(
    interaction: discord.Interaction,
    username: Optional[str],
    config: BotConfig,
    resolver: IdentityResolver,
    checker: SocialLinkChecker,
) -> None:
    """
    Run one verification and send exactly one ephemeral reply.

    The lookups can outlast Discord's three second acknowledgement window,
    so the interaction is deferred and the result sent as a follow-up.
    """

    username = (username or "").strip()
    if not username:
        await interaction.response.send_message(MISSING_USERNAME_MESSAGE, ephemeral=True)
        return

    await interaction.response.defer(ephemeral=True, thinking=True)

    request = VerificationRequest(
        requested_username=username,
        requesting_identity=account_tag(interaction.user),
    )
    outcome = await verify_account(
        request,
        resolver,
        checker,
        DiscordMemberActions(interaction.user),
        config.member_role_id,
    )
    logger.info("Verification of %s finished: %s", username, outcome.kind.value)

    await interaction.followup.send(embed=build_outcome_embed(outcome), ephemeral=True)


def create_discord_bot(
    config: BotConfig,
    resolver: IdentityResolver,
    checker: SocialLinkChecker,
) -> commands.Bot:
    """
    Configure and return the verification bot with its `/ping` and
    `/verify` application commands. Command registration with Discord is
    handled outside this process.
    """

    # Slash-command interactions carry the member; the guilds intent in the
    # defaults keeps the role cache populated.
    intents = discord.Intents.default()
    bot = commands.Bot(command_prefix="!", intents=intents, help_command=None)

    @bot.event
    async def on_ready():
        logger.info("Ready! Logged in as %s (id=%s)", bot.user, bot.user.id)

    @bot.tree.command(name="ping", description="Check that the bot is responding.")
    async def ping_cmd(interaction: discord.Interaction):
        await handle_ping(interaction)

    @bot.tree.command(name="verify", description="Link your Minecraft account via Hypixel.")
    @app_commands.guild_only()
    @app_commands.describe(username="Your Minecraft username")
    async def verify_cmd(interaction: discord.Interaction, username: Optional[str] = None):
        await handle_verify(interaction, username, config, resolver, checker)

    @bot.tree.error
    async def on_app_command_error(
        interaction: discord.Interaction,
        error: app_commands.AppCommandError,
    ):
        logger.error("Command %s failed", interaction.command, exc_info=error)
        message = "Something went wrong during verification."
        if interaction.response.is_done():
            await interaction.followup.send(message, ephemeral=True)
        else:
            await interaction.response.send_message(message, ephemeral=True)

    return bot
