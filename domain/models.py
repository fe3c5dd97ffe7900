from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class VerificationRequest:
    """
    A single `/verify` invocation.

    `requesting_identity` is the caller's own Discord account tag, exactly as
    the gateway reports it. It is compared against Hypixel's linked tag.
    """

    requested_username: str
    requesting_identity: str


@dataclass(frozen=True)
class ResolvedPlayer:
    """Stable Minecraft player identifier (dashless UUID)."""

    player_id: str


@dataclass(frozen=True)
class SocialProfile:
    """Public Hypixel social data; `None` means no Discord link is set."""

    linked_account_tag: Optional[str] = None


class OutcomeKind(Enum):
    NO_LINK = "no_link"
    MISMATCH = "mismatch"
    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"
    ERROR = "error"


class ErrorKind(Enum):
    PLAYER_NOT_FOUND = "player_not_found"
    RATE_LIMITED = "rate_limited"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class VerificationOutcome:
    """
    Classified result of one verification attempt.

    Use the named constructors below rather than instantiating directly; the
    success constructors refuse to build an outcome unless the linked tag and
    the caller's tag match exactly.
    """

    kind: OutcomeKind
    username: str
    linked: Optional[str] = None
    actual: Optional[str] = None
    reason: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    detail: Optional[str] = None
    role_granted: bool = False
    nickname_updated: bool = False

    @property
    def verified(self) -> bool:
        return self.kind in (OutcomeKind.SUCCESS, OutcomeKind.PARTIAL_SUCCESS)

    @classmethod
    def no_link(cls, username: str) -> "VerificationOutcome":
        return cls(kind=OutcomeKind.NO_LINK, username=username)

    @classmethod
    def mismatch(cls, username: str, linked: str, actual: str) -> "VerificationOutcome":
        return cls(kind=OutcomeKind.MISMATCH, username=username, linked=linked, actual=actual)

    @classmethod
    def success(
        cls,
        username: str,
        linked: str,
        actual: str,
        role_granted: bool = False,
        nickname_updated: bool = False,
    ) -> "VerificationOutcome":
        _require_match(linked, actual)
        return cls(
            kind=OutcomeKind.SUCCESS,
            username=username,
            linked=linked,
            actual=actual,
            role_granted=role_granted,
            nickname_updated=nickname_updated,
        )

    @classmethod
    def partial_success(
        cls,
        username: str,
        linked: str,
        actual: str,
        reason: str,
        role_granted: bool = False,
    ) -> "VerificationOutcome":
        _require_match(linked, actual)
        return cls(
            kind=OutcomeKind.PARTIAL_SUCCESS,
            username=username,
            linked=linked,
            actual=actual,
            reason=reason,
            role_granted=role_granted,
        )

    @classmethod
    def error(cls, username: str, error_kind: ErrorKind, detail: str = "") -> "VerificationOutcome":
        return cls(kind=OutcomeKind.ERROR, username=username, error_kind=error_kind, detail=detail)


def _require_match(linked: str, actual: str) -> None:
    if linked != actual:
        raise ValueError(f"linked tag {linked!r} does not match caller tag {actual!r}")
