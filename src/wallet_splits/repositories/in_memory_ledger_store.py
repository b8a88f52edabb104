"""Ledger store backed by an immutable in-memory snapshot."""

from __future__ import annotations

from collections.abc import Iterable

from wallet_splits.application.schemas.ledger_snapshot import LedgerSnapshot
from wallet_splits.domain.records import GroupRecord, PaymentRecord, SplitRecord
from wallet_splits.domain.scope import Scope, SingleGroup
from wallet_splits.domain.wallet import normalize_wallet


class InMemoryLedgerStore:
    """Serves ledger lookups from records indexed once at construction."""

    def __init__(
        self,
        *,
        groups: Iterable[GroupRecord] = (),
        splits: Iterable[SplitRecord] = (),
        payments: Iterable[PaymentRecord] = (),
    ) -> None:
        self._groups = {group.id: group for group in groups}
        self._splits = list(splits)
        self._payments = list(payments)

    @classmethod
    def from_snapshot(cls, snapshot: LedgerSnapshot) -> InMemoryLedgerStore:
        return cls(
            groups=[group.to_record() for group in snapshot.groups],
            splits=[split.to_record() for split in snapshot.splits],
            payments=[payment.to_record() for payment in snapshot.payments],
        )

    def fetch_group(self, group_id: str) -> GroupRecord | None:
        return self._groups.get(group_id)

    def fetch_groups_for_user(self, user: str) -> list[GroupRecord]:
        wallet = normalize_wallet(user)
        return sorted(
            (group for group in self._groups.values() if wallet in group.members),
            key=lambda group: group.id,
        )

    def fetch_splits(self, scope: Scope) -> list[SplitRecord]:
        if isinstance(scope, SingleGroup):
            group_ids = {scope.group_id}
        else:
            group_ids = {group.id for group in self.fetch_groups_for_user(scope.user)}
        return [split for split in self._splits if split.group_id in group_ids]

    def fetch_payments(self, split_ids: list[str]) -> list[PaymentRecord]:
        wanted = set(split_ids)
        return [payment for payment in self._payments if payment.split_id in wanted]
