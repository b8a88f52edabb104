"""Collapse pairwise balances into one signed position per participant."""

from __future__ import annotations

from collections.abc import Iterable

from wallet_splits.domain.money import Money
from wallet_splits.domain.settlement import PairwiseBalance


def reduce_balances(
    balances: Iterable[PairwiseBalance],
    participants: Iterable[str] = (),
) -> dict[str, Money]:
    """Return net positions keyed by wallet, sorted by wallet.

    Positive means the participant is owed money, negative means they owe.
    ``participants`` seeds explicit zero positions so settled participants
    stay distinguishable from ones that never took part.
    """

    accumulator: dict[str, int] = {participant: 0 for participant in participants}
    for balance in balances:
        amount = balance.amount.minor
        accumulator[balance.debtor] = accumulator.get(balance.debtor, 0) - amount
        accumulator[balance.creditor] = accumulator.get(balance.creditor, 0) + amount
    return {wallet: Money(minor=accumulator[wallet]) for wallet in sorted(accumulator)}


def pairwise_net_for(
    balances: Iterable[PairwiseBalance], participant: str
) -> dict[str, Money]:
    """Net every balance touching ``participant`` per counterparty.

    Positive values are owed to ``participant`` by that counterparty.
    """

    per_counterparty: dict[str, int] = {}
    for balance in balances:
        if balance.creditor == participant and balance.debtor != participant:
            counterparty, signed = balance.debtor, balance.amount.minor
        elif balance.debtor == participant and balance.creditor != participant:
            counterparty, signed = balance.creditor, -balance.amount.minor
        else:
            continue
        per_counterparty[counterparty] = per_counterparty.get(counterparty, 0) + signed
    return {
        counterparty: Money(minor=per_counterparty[counterparty])
        for counterparty in sorted(per_counterparty)
    }
