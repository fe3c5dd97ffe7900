from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional

from domain.errors import LookupFailure
from domain.lookups import IdentityResolver, MemberActions, SocialLinkChecker
from domain.models import ErrorKind, VerificationOutcome, VerificationRequest


logger = logging.getLogger(__name__)

NICKNAME_FAILURE_REASON = "nickname update failed"


@dataclass
class SideEffectStep:
    """
    One best-effort action run after a successful identity match.

    `degrades_outcome` marks whether a failure of this step turns a success
    into a partial success. Steps never abort the ones after them.
    """

    name: str
    action: Callable[[], Awaitable[bool]]
    degrades_outcome: bool
    failure_reason: str = ""


@dataclass
class StepReport:
    """Running classification collected while the side-effect steps execute."""

    applied: List[str] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)


def _error_kind_for(failure: LookupFailure) -> ErrorKind:
    if failure.status == 404:
        return ErrorKind.PLAYER_NOT_FOUND
    if failure.status == 429:
        return ErrorKind.RATE_LIMITED
    return ErrorKind.UNKNOWN


def build_side_effect_steps(
    request: VerificationRequest,
    member: MemberActions,
    role_id: Optional[int],
) -> List[SideEffectStep]:
    """
    Return the ordered side effects for a verified member:
    - grant the configured member role (skipped if none is configured);
    - set the guild nickname to the verified Minecraft name.
    """

    steps: List[SideEffectStep] = []

    if role_id is not None:

        async def grant_role() -> bool:
            if await member.add_role(role_id):
                return True
            # Role configured but missing from the guild: log and carry on.
            logger.warning("Role ID %s not found in guild", role_id)
            return False

        steps.append(SideEffectStep(name="role", action=grant_role, degrades_outcome=False))

    async def set_nickname() -> bool:
        await member.set_nickname(request.requested_username)
        return True

    steps.append(
        SideEffectStep(
            name="nickname",
            action=set_nickname,
            degrades_outcome=True,
            failure_reason=NICKNAME_FAILURE_REASON,
        )
    )
    return steps


async def run_side_effects(steps: List[SideEffectStep]) -> StepReport:
    report = StepReport()
    for step in steps:
        try:
            applied = await step.action()
        except Exception:
            logger.exception("Side effect %r failed", step.name)
            if step.degrades_outcome:
                report.failures.append(step.failure_reason or f"{step.name} failed")
            continue
        if applied:
            report.applied.append(step.name)
    return report


async def verify_account(
    request: VerificationRequest,
    resolver: IdentityResolver,
    checker: SocialLinkChecker,
    member: MemberActions,
    role_id: Optional[int],
) -> VerificationOutcome:
    """
    Verify that the Minecraft account `request.requested_username` is linked
    on Hypixel to the caller's Discord tag.

    Exactly one outcome is returned; lookup failures are classified into an
    error outcome and never propagate to the caller.
    """

    username = request.requested_username
    logger.info("Verifying %s for %s", username, request.requesting_identity)

    try:
        player = await resolver.resolve(username)
        profile = await checker.fetch_profile(player.player_id)
    except LookupFailure as exc:
        logger.warning("Verification lookup failed for %s: %s", username, exc)
        return VerificationOutcome.error(username, _error_kind_for(exc), str(exc))
    except Exception as exc:
        logger.exception("Unexpected error while verifying %s", username)
        return VerificationOutcome.error(username, ErrorKind.UNKNOWN, str(exc))

    linked = profile.linked_account_tag
    if not linked:
        return VerificationOutcome.no_link(username)

    if linked != request.requesting_identity:
        return VerificationOutcome.mismatch(username, linked, request.requesting_identity)

    steps = build_side_effect_steps(request, member, role_id)
    report = await run_side_effects(steps)
    role_granted = "role" in report.applied

    if report.failures:
        return VerificationOutcome.partial_success(
            username,
            linked,
            request.requesting_identity,
            reason=report.failures[0],
            role_granted=role_granted,
        )

    return VerificationOutcome.success(
        username,
        linked,
        request.requesting_identity,
        role_granted=role_granted,
        nickname_updated="nickname" in report.applied,
    )
