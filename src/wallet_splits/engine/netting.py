"""Minimal settlement of a zero-sum set of net positions.

Greedy extremal matching: the largest debtor always pays the largest
creditor as much as both can absorb. Every step retires at least one party
and the final step retires two, so ``n`` non-zero participants settle in at
most ``n - 1`` transfers. Ties are broken by ascending wallet address, which
makes the output a pure function of its input.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Mapping

from wallet_splits.domain.errors import LedgerIntegrityError
from wallet_splits.domain.money import Money
from wallet_splits.domain.settlement import SettlementTransaction


def ensure_zero_sum(net_positions: Mapping[str, Money]) -> None:
    """Raise ``LedgerIntegrityError`` unless positions sum to exactly zero."""

    total = sum(amount.minor for amount in net_positions.values())
    if total != 0:
        raise LedgerIntegrityError(
            details={
                "imbalance": total,
                "participants": len(net_positions),
            }
        )


def settle(net_positions: Mapping[str, Money]) -> list[SettlementTransaction]:
    """Return the transfers that drive every position to zero."""

    ensure_zero_sum(net_positions)

    # Max-heaps via negated magnitude; the wallet breaks ties ascending.
    creditors: list[tuple[int, str]] = []
    debtors: list[tuple[int, str]] = []
    for wallet, amount in net_positions.items():
        if amount.is_positive():
            creditors.append((-amount.minor, wallet))
        elif amount.is_negative():
            debtors.append((amount.minor, wallet))
    heapq.heapify(creditors)
    heapq.heapify(debtors)

    transactions: list[SettlementTransaction] = []
    while creditors and debtors:
        credit, creditor = heapq.heappop(creditors)
        debt, debtor = heapq.heappop(debtors)
        credit_left, debt_left = -credit, -debt
        amount = min(credit_left, debt_left)
        transactions.append(
            SettlementTransaction(
                sender=debtor,
                receiver=creditor,
                amount=Money(minor=amount),
            )
        )
        if credit_left > amount:
            heapq.heappush(creditors, (-(credit_left - amount), creditor))
        if debt_left > amount:
            heapq.heappush(debtors, (-(debt_left - amount), debtor))

    if creditors or debtors:
        raise LedgerIntegrityError(
            details={"unsettled_participants": len(creditors) + len(debtors)}
        )
    return transactions


def apply_transactions(
    net_positions: Mapping[str, Money],
    transactions: Iterable[SettlementTransaction],
) -> dict[str, Money]:
    """Return positions after every transaction has been executed."""

    remaining = {wallet: amount.minor for wallet, amount in net_positions.items()}
    for transaction in transactions:
        remaining[transaction.sender] = (
            remaining.get(transaction.sender, 0) + transaction.amount.minor
        )
        remaining[transaction.receiver] = (
            remaining.get(transaction.receiver, 0) - transaction.amount.minor
        )
    return {wallet: Money(minor=amount) for wallet, amount in remaining.items()}
