"""Read-only port to the ledger store that owns groups, splits and payments."""

from __future__ import annotations

from typing import Protocol

from wallet_splits.domain.records import GroupRecord, PaymentRecord, SplitRecord
from wallet_splits.domain.scope import Scope


class LedgerStore(Protocol):
    """Port for ledger lookups; implementations must read committed data."""

    def fetch_group(self, group_id: str) -> GroupRecord | None:
        """Return one group, or None when it does not exist."""

    def fetch_groups_for_user(self, user: str) -> list[GroupRecord]:
        """Return every group the normalized wallet is a member of."""

    def fetch_splits(self, scope: Scope) -> list[SplitRecord]:
        """Return all splits of the groups covered by scope."""

    def fetch_payments(self, split_ids: list[str]) -> list[PaymentRecord]:
        """Return payments recorded against the given splits."""
