"""Response schemas for settlement endpoints; amounts are integer minor units."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wallet_splits.domain.records import GroupRecord
from wallet_splits.domain.settlement import (
    GroupDue,
    SettlementPlan,
    SettlementSummary,
    SettlementTransaction,
)


class CamelModel(BaseModel):
    """Base schema serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransactionResponse(CamelModel):
    """One transfer of a settlement plan."""

    sender: str = Field(alias="from")
    receiver: str = Field(alias="to")
    amount: int = Field(gt=0)

    @classmethod
    def from_transaction(
        cls, transaction: SettlementTransaction
    ) -> TransactionResponse:
        return cls(
            sender=transaction.sender,
            receiver=transaction.receiver,
            amount=transaction.amount.minor,
        )


def _transactions(items: list[SettlementTransaction]) -> list[TransactionResponse]:
    return [TransactionResponse.from_transaction(item) for item in items]


class GroupDueResponse(CamelModel):
    """A group where the user still has something pending."""

    group_id: str
    name: str
    net_position: int
    amount_owed: int = Field(ge=0)
    amount_owed_to_user: int = Field(ge=0)
    transactions: list[TransactionResponse]

    @classmethod
    def from_due(cls, due: GroupDue) -> GroupDueResponse:
        return cls(
            group_id=due.group_id,
            name=due.name,
            net_position=due.net_position.minor,
            amount_owed=due.amount_owed.minor,
            amount_owed_to_user=due.amount_owed_to_user.minor,
            transactions=_transactions(due.transactions),
        )


class SettlementSummaryResponse(CamelModel):
    """Consolidated dues of one wallet across all of its groups."""

    user_wallet: str
    total_owed: int = Field(ge=0)
    total_owed_to_user: int = Field(ge=0)
    net_balance: int
    pending_groups: list[GroupDueResponse]
    global_optimal_transactions: list[TransactionResponse]

    @classmethod
    def from_summary(cls, summary: SettlementSummary) -> SettlementSummaryResponse:
        return cls(
            user_wallet=summary.user_wallet,
            total_owed=summary.total_owed.minor,
            total_owed_to_user=summary.total_owed_to_user.minor,
            net_balance=summary.net_balance.minor,
            pending_groups=[
                GroupDueResponse.from_due(due) for due in summary.pending_groups
            ],
            global_optimal_transactions=_transactions(summary.global_transactions),
        )


class NetPositionResponse(CamelModel):
    """Signed position of one participant; positive means it is owed."""

    wallet: str
    net_position: int


class GroupSettlementResponse(CamelModel):
    """Group-local settlement plan."""

    group_id: str
    name: str
    positions: list[NetPositionResponse]
    transactions: list[TransactionResponse]
    total_debt: int = Field(ge=0)
    total_credit: int = Field(ge=0)

    @classmethod
    def from_plan(
        cls, group: GroupRecord, plan: SettlementPlan
    ) -> GroupSettlementResponse:
        return cls(
            group_id=group.id,
            name=group.name,
            positions=[
                NetPositionResponse(wallet=wallet, net_position=amount.minor)
                for wallet, amount in plan.net_positions.items()
            ],
            transactions=_transactions(plan.transactions),
            total_debt=plan.total_debt.minor,
            total_credit=plan.total_credit.minor,
        )
