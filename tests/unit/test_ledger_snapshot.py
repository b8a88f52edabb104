from __future__ import annotations

import pytest
from pydantic import ValidationError

from wallet_splits.application.schemas.ledger_snapshot import LedgerSnapshot, SplitInput
from wallet_splits.domain.money import Money


def _split_payload(*shares: dict[str, str]) -> dict[str, object]:
    return {
        "id": "s1",
        "group_id": "g1",
        "paid_by": "0xaaa",
        "total_amount": "10.00",
        "shares": list(shares),
    }


def test_shares_without_amounts_divide_the_total_equally() -> None:
    split = SplitInput.model_validate(
        _split_payload({"wallet": "0xaaa"}, {"wallet": "0xbbb"}, {"wallet": "0xccc"})
    ).to_record()

    assert [share.amount for share in split.shares] == [
        Money(minor=334),
        Money(minor=333),
        Money(minor=333),
    ]
    assert split.shares_total == split.total


def test_explicit_share_amounts_are_kept() -> None:
    split = SplitInput.model_validate(
        _split_payload(
            {"wallet": "0xaaa", "amount": "2.50"},
            {"wallet": "0xbbb", "amount": "7.50"},
        )
    ).to_record()

    assert [share.amount.minor for share in split.shares] == [250, 750]


def test_mixing_explicit_and_missing_amounts_is_rejected() -> None:
    with pytest.raises(ValidationError):
        SplitInput.model_validate(
            _split_payload({"wallet": "0xaaa", "amount": "5.00"}, {"wallet": "0xbbb"})
        )


def test_snapshot_defaults_to_empty_collections() -> None:
    snapshot = LedgerSnapshot.model_validate({})

    assert snapshot.groups == []
    assert snapshot.splits == []
    assert snapshot.payments == []
