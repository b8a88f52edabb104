from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from wallet_splits.application.services.settlement_service import SettlementService
from wallet_splits.domain.money import Money
from wallet_splits.domain.records import PaymentStatus, SplitStatus
from wallet_splits.domain.scope import AllGroupsFor, SingleGroup
from wallet_splits.repositories.sql_ledger_store import SqlLedgerStore


def test_fetch_group_returns_members_and_creator(
    seeded_session_factory: sessionmaker[Session],
) -> None:
    with seeded_session_factory() as session:
        group = SqlLedgerStore(session).fetch_group("g1")

    assert group is not None
    assert group.name == "Trip"
    assert group.creator == "0xaaa"
    assert group.members == frozenset({"0xaaa", "0xbbb", "0xccc"})


def test_fetch_group_returns_none_for_unknown_id(
    seeded_session_factory: sessionmaker[Session],
) -> None:
    with seeded_session_factory() as session:
        assert SqlLedgerStore(session).fetch_group("nope") is None


def test_fetch_groups_for_user_normalizes_wallet(
    seeded_session_factory: sessionmaker[Session],
) -> None:
    with seeded_session_factory() as session:
        groups = SqlLedgerStore(session).fetch_groups_for_user("0xUUU")

    assert [group.id for group in groups] == ["g2", "g3"]


def test_fetch_splits_converts_amounts_to_minor_units(
    seeded_session_factory: sessionmaker[Session],
) -> None:
    with seeded_session_factory() as session:
        splits = SqlLedgerStore(session).fetch_splits(SingleGroup(group_id="g1"))

    (split,) = splits
    assert split.payer == "0xaaa"
    assert split.total == Money(minor=300)
    assert [(share.participant, share.amount.minor) for share in split.shares] == [
        ("0xaaa", 100),
        ("0xbbb", 100),
        ("0xccc", 100),
    ]


def test_fetch_splits_for_user_scope_spans_all_groups(
    seeded_session_factory: sessionmaker[Session],
) -> None:
    with seeded_session_factory() as session:
        splits = SqlLedgerStore(session).fetch_splits(AllGroupsFor(user="0xuuu"))

    assert [split.id for split in splits] == ["s2", "s3", "s4"]
    assert splits[-1].status == SplitStatus.SETTLED


def test_fetch_payments_resolves_payer_wallets(
    seeded_session_factory: sessionmaker[Session],
) -> None:
    with seeded_session_factory() as session:
        store = SqlLedgerStore(session)
        payments = store.fetch_payments(["s1"])
        assert store.fetch_payments([]) == []

    by_id = {payment.id: payment for payment in payments}
    assert by_id["p1"].payer == "0xbbb"
    assert by_id["p1"].amount == Money(minor=60)
    assert by_id["p2"].status == PaymentStatus.FAILED


def test_settlement_service_over_sql_store(
    seeded_session_factory: sessionmaker[Session],
) -> None:
    with seeded_session_factory() as session:
        service = SettlementService(ledger_store=SqlLedgerStore(session))
        plan = service.settle_group("g1").plan
        summary = service.get_user_dues("0xuuu")

    assert plan.net_positions == {
        "0xaaa": Money(minor=140),
        "0xbbb": Money(minor=-40),
        "0xccc": Money(minor=-100),
    }
    assert summary.net_balance == Money(minor=30)
    assert [
        (tx.sender, tx.receiver, tx.amount.minor) for tx in summary.global_transactions
    ] == [("0xvvv", "0xuuu", 30)]
