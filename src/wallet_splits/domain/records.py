"""Ledger records supplied by the external ledger store."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from wallet_splits.domain.errors import LedgerValidationError
from wallet_splits.domain.money import Money, sum_money
from wallet_splits.domain.wallet import normalize_wallet


class SplitStatus(enum.StrEnum):
    """Lifecycle of a split; settled splits no longer take part in netting."""

    ACTIVE = "ACTIVE"
    SETTLED = "SETTLED"


class PaymentStatus(enum.StrEnum):
    """Payment states; only completed payments reduce a share."""

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class PaymentMethod(enum.StrEnum):
    """How a payment was executed outside the engine."""

    MANUAL = "MANUAL"
    ONCHAIN = "ONCHAIN"
    BRIDGE = "BRIDGE"


@dataclass(frozen=True, slots=True)
class GroupRecord:
    """A set of participants netted together; the creator is always a member."""

    id: str
    name: str
    creator: str
    members: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        creator = normalize_wallet(self.creator)
        members = {normalize_wallet(member) for member in self.members}
        members.add(creator)
        object.__setattr__(self, "creator", creator)
        object.__setattr__(self, "members", frozenset(members))


@dataclass(frozen=True, slots=True)
class ShareRecord:
    """One participant's portion of a split."""

    participant: str
    amount: Money
    is_paid: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "participant", normalize_wallet(self.participant))
        if self.amount.is_negative():
            raise LedgerValidationError(
                message="Share amount cannot be negative.",
                details={
                    "participant": self.participant,
                    "amount": self.amount.minor,
                },
            )


@dataclass(frozen=True, slots=True)
class SplitRecord:
    """A shared expense fronted by ``payer`` and divided into shares."""

    id: str
    group_id: str
    payer: str
    total: Money
    shares: tuple[ShareRecord, ...] = field(default_factory=tuple)
    currency: str = "USD"
    status: SplitStatus = SplitStatus.ACTIVE
    title: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "payer", normalize_wallet(self.payer))
        object.__setattr__(self, "shares", tuple(self.shares))
        object.__setattr__(self, "currency", self.currency.upper())
        if not self.total.is_positive():
            raise LedgerValidationError(
                message="Split total must be positive.",
                details={"split_id": self.id, "total": self.total.minor},
            )
        participants = [share.participant for share in self.shares]
        if len(participants) != len(set(participants)):
            raise LedgerValidationError(
                message="A participant appears more than once in a split.",
                details={"split_id": self.id},
            )

    @property
    def shares_total(self) -> Money:
        return sum_money([share.amount for share in self.shares])

    def share_for(self, participant: str) -> ShareRecord | None:
        for share in self.shares:
            if share.participant == participant:
                return share
        return None


@dataclass(frozen=True, slots=True)
class PaymentRecord:
    """Append-only record of money sent toward a participant's share."""

    id: str
    split_id: str
    payer: str
    amount: Money
    status: PaymentStatus = PaymentStatus.COMPLETED
    method: PaymentMethod = PaymentMethod.MANUAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "payer", normalize_wallet(self.payer))
        if not self.amount.is_positive():
            raise LedgerValidationError(
                message="Payment amount must be positive.",
                details={"payment_id": self.id, "amount": self.amount.minor},
            )

    @property
    def is_completed(self) -> bool:
        return self.status == PaymentStatus.COMPLETED
