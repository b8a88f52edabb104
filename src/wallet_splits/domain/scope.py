"""Netting scope: one group, or every group that contains a user."""

from __future__ import annotations

from dataclasses import dataclass

from wallet_splits.domain.wallet import normalize_wallet


@dataclass(frozen=True, slots=True)
class SingleGroup:
    """Net only the splits of one group."""

    group_id: str


@dataclass(frozen=True, slots=True)
class AllGroupsFor:
    """Net the union of all groups the user belongs to as one scope."""

    user: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "user", normalize_wallet(self.user))


Scope = SingleGroup | AllGroupsFor


def describe_scope(scope: Scope) -> str:
    """Return a compact label used in logs and error details."""

    if isinstance(scope, SingleGroup):
        return f"group:{scope.group_id}"
    return f"user:{scope.user}"
