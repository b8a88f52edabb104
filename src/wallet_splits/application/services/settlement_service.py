"""Settlement use cases over the ledger store port."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wallet_splits.application.ports.ledger_store import LedgerStore
from wallet_splits.core.settings import Settings
from wallet_splits.domain.errors import GroupNotFoundError
from wallet_splits.domain.records import GroupRecord
from wallet_splits.domain.scope import AllGroupsFor, SingleGroup, describe_scope
from wallet_splits.domain.settlement import SettlementPlan, SettlementSummary
from wallet_splits.domain.wallet import normalize_wallet
from wallet_splits.engine.aggregator import GlobalAggregator, compute_scope
from wallet_splits.engine.ledger_builder import LedgerBuilder

logger = logging.getLogger(__name__)


def build_ledger_builder(settings: Settings) -> LedgerBuilder:
    """Create a ledger builder configured from runtime settings."""

    return LedgerBuilder(
        overpayment_policy=settings.overpayment_policy,
        share_sum_tolerance_minor=settings.share_sum_tolerance_minor,
    )


@dataclass(frozen=True, slots=True)
class GroupSettlement:
    """Settlement plan for one group together with the group itself."""

    group: GroupRecord
    plan: SettlementPlan


class SettlementService:
    """Computes settlement plans and user dues from a ledger snapshot."""

    def __init__(
        self,
        *,
        ledger_store: LedgerStore,
        builder: LedgerBuilder | None = None,
    ) -> None:
        self._ledger_store = ledger_store
        self._builder = builder or LedgerBuilder()

    def settle_group(self, group_id: str) -> GroupSettlement:
        group = self._ledger_store.fetch_group(group_id)
        if group is None:
            raise GroupNotFoundError(details={"group_id": group_id})

        scope = SingleGroup(group_id=group.id)
        splits = self._ledger_store.fetch_splits(scope)
        payments = self._ledger_store.fetch_payments([split.id for split in splits])
        result = compute_scope(self._builder, scope, splits, payments)

        logger.info(
            "group_settlement_computed",
            extra={
                "scope": describe_scope(scope),
                "splits": len(splits),
                "payments": len(payments),
                "transactions": len(result.plan.transactions),
            },
        )
        return GroupSettlement(group=group, plan=result.plan)

    def get_user_dues(self, wallet_address: str) -> SettlementSummary:
        wallet = normalize_wallet(wallet_address)
        groups = self._ledger_store.fetch_groups_for_user(wallet)
        if not groups:
            logger.info("user_dues_empty", extra={"user": wallet})
            return SettlementSummary.empty(wallet)

        scope = AllGroupsFor(user=wallet)
        splits = self._ledger_store.fetch_splits(scope)
        payments = self._ledger_store.fetch_payments([split.id for split in splits])
        summary = GlobalAggregator(builder=self._builder).aggregate(
            wallet, groups, splits, payments
        )

        logger.info(
            "user_dues_computed",
            extra={
                "scope": describe_scope(scope),
                "groups": len(groups),
                "pending_groups": len(summary.pending_groups),
                "global_transactions": len(summary.global_transactions),
                "net_balance": summary.net_balance.minor,
            },
        )
        return summary
