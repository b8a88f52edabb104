from wallet_splits.domain.money import Money
from wallet_splits.domain.settlement import PairwiseBalance
from wallet_splits.engine.balance_reducer import pairwise_net_for, reduce_balances


def test_reduce_balances_moves_amount_from_debtor_to_creditor() -> None:
    positions = reduce_balances(
        [
            PairwiseBalance(debtor="0xbbb", creditor="0xaaa", amount=Money(minor=100)),
            PairwiseBalance(debtor="0xccc", creditor="0xaaa", amount=Money(minor=100)),
        ]
    )

    assert positions == {
        "0xaaa": Money(minor=200),
        "0xbbb": Money(minor=-100),
        "0xccc": Money(minor=-100),
    }
    assert sum(amount.minor for amount in positions.values()) == 0


def test_reduce_balances_keeps_settled_participants_as_zero() -> None:
    positions = reduce_balances(
        [
            PairwiseBalance(debtor="0xbbb", creditor="0xaaa", amount=Money(minor=50)),
            PairwiseBalance(debtor="0xaaa", creditor="0xbbb", amount=Money(minor=50)),
        ],
        participants=["0xccc"],
    )

    assert positions == {
        "0xaaa": Money.zero(),
        "0xbbb": Money.zero(),
        "0xccc": Money.zero(),
    }


def test_reduce_balances_orders_wallets_ascending() -> None:
    positions = reduce_balances(
        [PairwiseBalance(debtor="0xzzz", creditor="0xaaa", amount=Money(minor=1))]
    )

    assert list(positions) == ["0xaaa", "0xzzz"]


def test_pairwise_net_for_nets_each_counterparty() -> None:
    balances = [
        PairwiseBalance(debtor="0xu", creditor="0xv", amount=Money(minor=50)),
        PairwiseBalance(debtor="0xv", creditor="0xu", amount=Money(minor=80)),
        PairwiseBalance(debtor="0xu", creditor="0xw", amount=Money(minor=20)),
        PairwiseBalance(debtor="0xv", creditor="0xw", amount=Money(minor=99)),
    ]

    assert pairwise_net_for(balances, "0xu") == {
        "0xv": Money(minor=30),
        "0xw": Money(minor=-20),
    }
