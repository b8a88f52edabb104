"""Turn raw splits and payments into directed pairwise balances."""

from __future__ import annotations

import enum
import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from wallet_splits.domain.errors import (
    LedgerValidationError,
    OverpaymentError,
    compose_error_message,
)
from wallet_splits.domain.money import Money
from wallet_splits.domain.records import PaymentRecord, SplitRecord, SplitStatus
from wallet_splits.domain.settlement import PairwiseBalance

logger = logging.getLogger(__name__)


class OverpaymentPolicy(enum.StrEnum):
    """What to do when payments exceed a participant's share."""

    REJECT = "reject"
    CREDIT = "credit"


def active_splits(splits: Iterable[SplitRecord]) -> list[SplitRecord]:
    """Return splits that still take part in netting, ordered by id."""

    return sorted(
        (split for split in splits if split.status != SplitStatus.SETTLED),
        key=lambda split: split.id,
    )


def involved_participants(splits: Iterable[SplitRecord]) -> set[str]:
    """Every payer and share owner appearing in the active splits."""

    participants: set[str] = set()
    for split in active_splits(splits):
        participants.add(split.payer)
        participants.update(share.participant for share in split.shares)
    return participants


@dataclass(frozen=True, slots=True)
class LedgerBuilder:
    """Builds pairwise balances for one scope snapshot."""

    overpayment_policy: OverpaymentPolicy = OverpaymentPolicy.REJECT
    share_sum_tolerance_minor: int = 1

    def build(
        self,
        splits: Iterable[SplitRecord],
        payments: Iterable[PaymentRecord],
    ) -> list[PairwiseBalance]:
        scoped_splits = active_splits(splits)
        self._ensure_single_currency(scoped_splits)
        paid_by_share = self._index_payments(scoped_splits, payments)

        balances: list[PairwiseBalance] = []
        for split in scoped_splits:
            self._ensure_shares_match_total(split)
            for share in split.shares:
                if share.participant == split.payer:
                    continue
                paid = paid_by_share.get((split.id, share.participant), 0)
                outstanding = share.amount.minor - paid
                if outstanding < 0:
                    balances.append(
                        self._handle_overpayment(split, share.participant, -outstanding)
                    )
                elif outstanding > 0 and not share.is_paid:
                    balances.append(
                        PairwiseBalance(
                            debtor=share.participant,
                            creditor=split.payer,
                            amount=Money(minor=outstanding),
                        )
                    )
        return balances

    def _index_payments(
        self,
        splits: list[SplitRecord],
        payments: Iterable[PaymentRecord],
    ) -> dict[tuple[str, str], int]:
        splits_by_id = {split.id: split for split in splits}
        paid_by_share: dict[tuple[str, str], int] = defaultdict(int)
        for payment in payments:
            split = splits_by_id.get(payment.split_id)
            if split is None or not payment.is_completed:
                continue
            if payment.payer == split.payer or split.share_for(payment.payer) is None:
                raise LedgerValidationError(
                    message=compose_error_message(
                        cause="A payment does not match any share of its split.",
                        action="Record payments only from share owners.",
                    ),
                    details={
                        "split_id": split.id,
                        "payment_id": payment.id,
                        "payer": payment.payer,
                    },
                )
            paid_by_share[(split.id, payment.payer)] += payment.amount.minor
        return paid_by_share

    def _ensure_shares_match_total(self, split: SplitRecord) -> None:
        drift = abs(split.shares_total.minor - split.total.minor)
        if drift > self.share_sum_tolerance_minor:
            raise LedgerValidationError(
                message=compose_error_message(
                    cause="Split shares do not add up to the split total.",
                    action="Recompute the shares so they match the total.",
                ),
                details={
                    "split_id": split.id,
                    "total": split.total.minor,
                    "shares_total": split.shares_total.minor,
                },
            )

    @staticmethod
    def _ensure_single_currency(splits: list[SplitRecord]) -> None:
        currencies = sorted({split.currency for split in splits})
        if len(currencies) > 1:
            raise LedgerValidationError(
                message=compose_error_message(
                    cause="Splits in one scope use different currencies.",
                    action="Net each currency separately.",
                ),
                details={"currencies": currencies},
            )

    def _handle_overpayment(
        self, split: SplitRecord, participant: str, excess: int
    ) -> PairwiseBalance:
        details = {
            "split_id": split.id,
            "participant": participant,
            "excess": excess,
        }
        if self.overpayment_policy == OverpaymentPolicy.REJECT:
            raise OverpaymentError(details=details)

        logger.warning("overpayment_credited", extra=details)
        return PairwiseBalance(
            debtor=split.payer,
            creditor=participant,
            amount=Money(minor=excess),
        )
