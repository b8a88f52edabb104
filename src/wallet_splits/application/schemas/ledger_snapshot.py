"""Ledger snapshot documents accepted by the CLI and in-memory store."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from wallet_splits.domain.money import Money, parse_money, split_evenly
from wallet_splits.domain.records import (
    GroupRecord,
    PaymentMethod,
    PaymentRecord,
    PaymentStatus,
    ShareRecord,
    SplitRecord,
    SplitStatus,
)

AMOUNT_PATTERN = r"^[0-9]+(\.[0-9]{1,2})?$"


class GroupInput(BaseModel):
    """Group payload: members are wallet addresses."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    creator: str = Field(min_length=1)
    members: list[str] = Field(default_factory=list)

    def to_record(self) -> GroupRecord:
        return GroupRecord(
            id=self.id,
            name=self.name,
            creator=self.creator,
            members=frozenset(self.members),
        )


class ShareInput(BaseModel):
    """One participant's share of a split, in major units.

    Leaving ``amount`` out on every share of a split divides the total equally.
    """

    wallet: str = Field(min_length=1)
    amount: str | None = Field(default=None, pattern=AMOUNT_PATTERN)
    is_paid: bool = False

    def to_record(self, amount: Money | None = None) -> ShareRecord:
        return ShareRecord(
            participant=self.wallet,
            amount=amount if amount is not None else parse_money(self.amount or "0"),
            is_paid=self.is_paid,
        )


class SplitInput(BaseModel):
    """Expense fronted by ``paid_by`` and divided into shares."""

    id: str = Field(min_length=1)
    group_id: str = Field(min_length=1)
    title: str = ""
    paid_by: str = Field(min_length=1)
    total_amount: str = Field(pattern=AMOUNT_PATTERN)
    currency: str = Field(default="USD", min_length=3, max_length=8)
    status: SplitStatus = SplitStatus.ACTIVE
    shares: list[ShareInput] = Field(min_length=1)

    @model_validator(mode="after")
    def validate_share_amounts(self) -> SplitInput:
        given = [share.amount is not None for share in self.shares]
        if any(given) and not all(given):
            raise ValueError("Either every share has an amount or none does.")
        return self

    @property
    def is_equal_split(self) -> bool:
        return all(share.amount is None for share in self.shares)

    def to_record(self) -> SplitRecord:
        total = parse_money(self.total_amount)
        if self.is_equal_split:
            amounts = split_evenly(total, len(self.shares))
            shares = tuple(
                share.to_record(amount) for share, amount in zip(self.shares, amounts)
            )
        else:
            shares = tuple(share.to_record() for share in self.shares)
        return SplitRecord(
            id=self.id,
            group_id=self.group_id,
            payer=self.paid_by,
            total=total,
            shares=shares,
            currency=self.currency,
            status=self.status,
            title=self.title,
        )


class PaymentInput(BaseModel):
    """Payment sent by ``from_wallet`` toward its share of ``split_id``."""

    id: str = Field(min_length=1)
    split_id: str = Field(min_length=1)
    from_wallet: str = Field(min_length=1)
    amount: str = Field(pattern=AMOUNT_PATTERN)
    status: PaymentStatus = PaymentStatus.COMPLETED
    method: PaymentMethod = PaymentMethod.MANUAL

    def to_record(self) -> PaymentRecord:
        return PaymentRecord(
            id=self.id,
            split_id=self.split_id,
            payer=self.from_wallet,
            amount=parse_money(self.amount),
            status=self.status,
            method=self.method,
        )


class LedgerSnapshot(BaseModel):
    """Complete, consistent read of the ledger store."""

    groups: list[GroupInput] = Field(default_factory=list)
    splits: list[SplitInput] = Field(default_factory=list)
    payments: list[PaymentInput] = Field(default_factory=list)
