from __future__ import annotations

import discord

from domain.models import ErrorKind, OutcomeKind, VerificationOutcome


FAILURE_COLOUR = discord.Colour(0xFC3A3A)
SUCCESS_COLOUR = discord.Colour(0x3AFC6E)
PARTIAL_COLOUR = discord.Colour.blue()

UNSUCCESSFUL_TITLE = "Verification unsuccessful!"


def _error_message(outcome: VerificationOutcome) -> str:
    if outcome.error_kind is ErrorKind.PLAYER_NOT_FOUND:
        return f"Minecraft player **{outcome.username}** not found."
    if outcome.error_kind is ErrorKind.RATE_LIMITED:
        return "Rate limited, try again later."
    return "Something went wrong during verification."


def build_outcome_embed(outcome: VerificationOutcome) -> discord.Embed:
    """Render a verification outcome as the single reply embed."""

    if outcome.kind is OutcomeKind.NO_LINK:
        return discord.Embed(
            colour=FAILURE_COLOUR,
            title=UNSUCCESSFUL_TITLE,
            description=(
                "Your Discord and Minecraft accounts are not linked properly!\n"
                "Please link your Discord in your Hypixel social settings."
            ),
        )

    if outcome.kind is OutcomeKind.MISMATCH:
        return discord.Embed(
            colour=FAILURE_COLOUR,
            title=UNSUCCESSFUL_TITLE,
            description=(
                f"Your linked Discord is **{outcome.linked}**, "
                f"but you're using **{outcome.actual}**.\n"
                "Please update your Hypixel Discord link."
            ),
        )

    if outcome.kind is OutcomeKind.PARTIAL_SUCCESS:
        return discord.Embed(
            colour=PARTIAL_COLOUR,
            title="Partially verified!",
            description="Accounts linked, but nickname could not be changed (missing permissions?).",
        )

    if outcome.kind is OutcomeKind.SUCCESS:
        lines = ["Your accounts are linked correctly!"]
        if outcome.role_granted:
            lines.append("Role added.")
        if outcome.nickname_updated:
            lines.append("Nickname updated.")
        return discord.Embed(colour=SUCCESS_COLOUR, title="Verified!", description="\n".join(lines))

    return discord.Embed(colour=FAILURE_COLOUR, title="Error", description=_error_message(outcome))
