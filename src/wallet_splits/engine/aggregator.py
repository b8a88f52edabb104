"""Per-group and cross-group settlement for one user's social graph."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from wallet_splits.domain.errors import LedgerIntegrityError
from wallet_splits.domain.money import Money, sum_money
from wallet_splits.domain.records import GroupRecord, PaymentRecord, SplitRecord
from wallet_splits.domain.scope import (
    AllGroupsFor,
    Scope,
    SingleGroup,
    describe_scope,
)
from wallet_splits.domain.settlement import (
    GroupDue,
    PairwiseBalance,
    SettlementPlan,
    SettlementSummary,
)
from wallet_splits.domain.wallet import normalize_wallet
from wallet_splits.engine.balance_reducer import pairwise_net_for, reduce_balances
from wallet_splits.engine.ledger_builder import LedgerBuilder, involved_participants
from wallet_splits.engine.netting import apply_transactions, settle


@dataclass(frozen=True, slots=True)
class ScopeResult:
    """Pairwise balances of a scope alongside its settlement plan."""

    balances: list[PairwiseBalance]
    plan: SettlementPlan


def compute_scope(
    builder: LedgerBuilder,
    scope: Scope,
    splits: Sequence[SplitRecord],
    payments: Sequence[PaymentRecord],
) -> ScopeResult:
    """Run builder, reducer and netting over one scope snapshot."""

    balances = builder.build(splits, payments)
    net_positions = reduce_balances(balances, involved_participants(splits))
    plan = SettlementPlan(
        scope=scope,
        net_positions=net_positions,
        transactions=settle(net_positions),
    )
    _ensure_plan_settles(plan)
    return ScopeResult(balances=balances, plan=plan)


def _ensure_plan_settles(plan: SettlementPlan) -> None:
    remaining = apply_transactions(plan.net_positions, plan.transactions)
    leftovers = {
        wallet: amount.minor
        for wallet, amount in remaining.items()
        if not amount.is_zero()
    }
    if not plan.is_balanced or leftovers:
        raise LedgerIntegrityError(
            details={"scope": describe_scope(plan.scope), "leftovers": leftovers}
        )


def _split_signed(per_counterparty: dict[str, Money]) -> tuple[Money, Money]:
    """Return (owed by the user, owed to the user) magnitudes."""

    amounts = list(per_counterparty.values())
    owed = sum_money([abs(amount) for amount in amounts if amount.is_negative()])
    owed_to = sum_money([amount for amount in amounts if amount.is_positive()])
    return owed, owed_to


@dataclass(slots=True)
class GlobalAggregator:
    """Builds a user's settlement summary from a multi-group snapshot."""

    builder: LedgerBuilder = field(default_factory=LedgerBuilder)

    def aggregate(
        self,
        user: str,
        groups: Iterable[GroupRecord],
        splits: Iterable[SplitRecord],
        payments: Iterable[PaymentRecord],
    ) -> SettlementSummary:
        wallet = normalize_wallet(user)
        user_groups = sorted(
            (group for group in groups if wallet in group.members),
            key=lambda group: group.id,
        )
        if not user_groups:
            return SettlementSummary.empty(wallet)

        group_ids = {group.id for group in user_groups}
        splits_by_group: dict[str, list[SplitRecord]] = defaultdict(list)
        for split in splits:
            if split.group_id in group_ids:
                splits_by_group[split.group_id].append(split)
        payments_by_split: dict[str, list[PaymentRecord]] = defaultdict(list)
        for payment in payments:
            payments_by_split[payment.split_id].append(payment)

        pending_groups: list[GroupDue] = []
        for group in user_groups:
            due = self._group_due(
                wallet, group, splits_by_group[group.id], payments_by_split
            )
            if due.has_stake():
                pending_groups.append(due)

        union_splits = [
            split for group in user_groups for split in splits_by_group[group.id]
        ]
        union_payments = [
            payment for split in union_splits for payment in payments_by_split[split.id]
        ]
        union = compute_scope(
            self.builder, AllGroupsFor(user=wallet), union_splits, union_payments
        )
        total_owed, total_owed_to_user = _split_signed(
            pairwise_net_for(union.balances, wallet)
        )
        net_balance = total_owed_to_user - total_owed
        union_position = union.plan.net_positions.get(wallet, Money.zero())
        if net_balance != union_position:
            raise LedgerIntegrityError(
                details={
                    "user": wallet,
                    "net_balance": net_balance.minor,
                    "net_position": union_position.minor,
                }
            )

        return SettlementSummary(
            user_wallet=wallet,
            total_owed=total_owed,
            total_owed_to_user=total_owed_to_user,
            net_balance=net_balance,
            pending_groups=pending_groups,
            global_transactions=union.plan.transactions,
        )

    def _group_due(
        self,
        wallet: str,
        group: GroupRecord,
        group_splits: list[SplitRecord],
        payments_by_split: dict[str, list[PaymentRecord]],
    ) -> GroupDue:
        group_payments = [
            payment for split in group_splits for payment in payments_by_split[split.id]
        ]
        result = compute_scope(
            self.builder, SingleGroup(group_id=group.id), group_splits, group_payments
        )
        amount_owed, amount_owed_to_user = _split_signed(
            pairwise_net_for(result.balances, wallet)
        )
        return GroupDue(
            group_id=group.id,
            name=group.name,
            net_position=result.plan.net_positions.get(wallet, Money.zero()),
            amount_owed=amount_owed,
            amount_owed_to_user=amount_owed_to_user,
            transactions=result.plan.transactions,
        )
