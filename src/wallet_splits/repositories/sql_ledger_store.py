"""Read-only ledger queries over the relational ledger store."""

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from wallet_splits.db.models.group import Group, GroupMember
from wallet_splits.db.models.payment import Payment
from wallet_splits.db.models.split import Split, SplitMember
from wallet_splits.db.models.user import User
from wallet_splits.domain.money import Money
from wallet_splits.domain.records import (
    GroupRecord,
    PaymentRecord,
    ShareRecord,
    SplitRecord,
)
from wallet_splits.domain.scope import Scope, SingleGroup
from wallet_splits.domain.wallet import normalize_wallet


def _to_money(value: Decimal | int | float | str) -> Money:
    return Money.from_decimal(Decimal(str(value)))


class SqlLedgerStore:
    """Builds ledger records with explicit batched queries, no lazy loading."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def fetch_group(self, group_id: str) -> GroupRecord | None:
        groups = self._load_groups([group_id])
        return groups[0] if groups else None

    def fetch_groups_for_user(self, user: str) -> list[GroupRecord]:
        statement = (
            select(GroupMember.group_id)
            .join(User, User.id == GroupMember.user_id)
            .where(User.wallet_address == normalize_wallet(user))
        )
        group_ids = list(self._session.scalars(statement).all())
        return self._load_groups(group_ids)

    def fetch_splits(self, scope: Scope) -> list[SplitRecord]:
        if isinstance(scope, SingleGroup):
            group_ids = [scope.group_id]
        else:
            group_ids = [group.id for group in self.fetch_groups_for_user(scope.user)]
        if not group_ids:
            return []

        splits = list(
            self._session.scalars(
                select(Split).where(Split.group_id.in_(group_ids)).order_by(Split.id)
            ).all()
        )
        shares_by_split: dict[str, list[ShareRecord]] = defaultdict(list)
        share_rows = self._session.execute(
            select(
                SplitMember.split_id,
                User.wallet_address,
                SplitMember.amount,
                SplitMember.is_paid,
            )
            .join(User, User.id == SplitMember.user_id)
            .where(SplitMember.split_id.in_([split.id for split in splits]))
            .order_by(SplitMember.split_id, User.wallet_address)
        ).all()
        for split_id, wallet_address, amount, is_paid in share_rows:
            shares_by_split[split_id].append(
                ShareRecord(
                    participant=wallet_address,
                    amount=_to_money(amount),
                    is_paid=is_paid,
                )
            )

        return [
            SplitRecord(
                id=split.id,
                group_id=split.group_id,
                payer=split.paid_by,
                total=_to_money(split.total_amount),
                shares=tuple(shares_by_split[split.id]),
                currency=split.currency,
                status=split.status,
                title=split.title,
            )
            for split in splits
        ]

    def fetch_payments(self, split_ids: list[str]) -> list[PaymentRecord]:
        if not split_ids:
            return []
        rows = self._session.execute(
            select(Payment, User.wallet_address)
            .join(User, User.id == Payment.from_user_id)
            .where(Payment.split_id.in_(split_ids))
            .order_by(Payment.created_at, Payment.id)
        ).all()
        return [
            PaymentRecord(
                id=payment.id,
                split_id=payment.split_id,
                payer=wallet_address,
                amount=_to_money(payment.amount),
                status=payment.status,
                method=payment.method,
            )
            for payment, wallet_address in rows
        ]

    def _load_groups(self, group_ids: list[str]) -> list[GroupRecord]:
        if not group_ids:
            return []
        group_rows = self._session.execute(
            select(Group, User.wallet_address)
            .join(User, User.id == Group.creator_id)
            .where(Group.id.in_(group_ids))
            .order_by(Group.id)
        ).all()
        members_by_group: dict[str, set[str]] = defaultdict(set)
        member_rows = self._session.execute(
            select(GroupMember.group_id, User.wallet_address)
            .join(User, User.id == GroupMember.user_id)
            .where(GroupMember.group_id.in_(group_ids))
        ).all()
        for group_id, wallet_address in member_rows:
            members_by_group[group_id].add(wallet_address)

        return [
            GroupRecord(
                id=group.id,
                name=group.name,
                creator=creator_wallet,
                members=frozenset(members_by_group[group.id]),
            )
            for group, creator_wallet in group_rows
        ]
