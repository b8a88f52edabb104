"""Derived settlement values: balances, transactions, plans and summaries."""

from __future__ import annotations

from dataclasses import dataclass, field

from wallet_splits.domain.money import Money, format_money, sum_money
from wallet_splits.domain.scope import Scope
from wallet_splits.domain.wallet import short_wallet


@dataclass(frozen=True, slots=True)
class PairwiseBalance:
    """Directed debt: ``debtor`` owes ``creditor`` ``amount``."""

    debtor: str
    creditor: str
    amount: Money


@dataclass(frozen=True, slots=True)
class SettlementTransaction:
    """A transfer that moves ``amount`` from ``sender`` to ``receiver``."""

    sender: str
    receiver: str
    amount: Money

    def describe(self) -> str:
        return (
            f"{short_wallet(self.sender)} pays {format_money(self.amount)} "
            f"to {short_wallet(self.receiver)}"
        )


@dataclass(frozen=True, slots=True)
class SettlementPlan:
    """Net positions of a scope and the transfers that zero them."""

    scope: Scope
    net_positions: dict[str, Money]
    transactions: list[SettlementTransaction]

    @property
    def total_debt(self) -> Money:
        amounts = self.net_positions.values()
        return sum_money([abs(amount) for amount in amounts if amount.is_negative()])

    @property
    def total_credit(self) -> Money:
        amounts = self.net_positions.values()
        return sum_money([amount for amount in amounts if amount.is_positive()])

    @property
    def participant_count(self) -> int:
        return len(self.net_positions)

    @property
    def is_balanced(self) -> bool:
        return self.total_debt == self.total_credit


@dataclass(frozen=True, slots=True)
class GroupDue:
    """One group's contribution to a user's settlement summary."""

    group_id: str
    name: str
    net_position: Money
    amount_owed: Money
    amount_owed_to_user: Money
    transactions: list[SettlementTransaction] = field(default_factory=list)

    def has_stake(self) -> bool:
        """True while the user owes or is owed something inside the group."""
        return not (self.amount_owed.is_zero() and self.amount_owed_to_user.is_zero())


@dataclass(frozen=True, slots=True)
class SettlementSummary:
    """Everything a user owes and is owed across their groups."""

    user_wallet: str
    total_owed: Money
    total_owed_to_user: Money
    net_balance: Money
    pending_groups: list[GroupDue] = field(default_factory=list)
    global_transactions: list[SettlementTransaction] = field(default_factory=list)

    @classmethod
    def empty(cls, user_wallet: str) -> SettlementSummary:
        """Summary for a user with no groups or no ledger records."""
        return cls(
            user_wallet=user_wallet,
            total_owed=Money.zero(),
            total_owed_to_user=Money.zero(),
            net_balance=Money.zero(),
        )
