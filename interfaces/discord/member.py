from __future__ import annotations

import discord

from domain.lookups import MemberActions


class DiscordMemberActions(MemberActions):
    """`MemberActions` backed by a `discord.Member` of the interaction's guild."""

    def __init__(self, member: discord.Member) -> None:
        self._member = member

    async def add_role(self, role_id: int) -> bool:
        role = self._member.guild.get_role(role_id)
        if role is None:
            return False
        if role in self._member.roles:
            return True
        await self._member.add_roles(role, reason="Hypixel verification")
        return True

    async def set_nickname(self, nickname: str) -> None:
        # Raises discord.Forbidden when the bot ranks below the member.
        await self._member.edit(nick=nickname, reason="Hypixel verification")
