"""Wallet address helpers: participants are identified by address only."""

from __future__ import annotations

from wallet_splits.domain.errors import LedgerValidationError, compose_error_message


def normalize_wallet(address: str) -> str:
    """Return the canonical lower-case form of a wallet address."""

    normalized = address.strip().lower()
    if not normalized:
        raise LedgerValidationError(
            message=compose_error_message(
                cause="A wallet address is empty.",
                action="Provide a non-empty wallet address for every participant.",
            ),
        )
    return normalized


def short_wallet(address: str) -> str:
    """Abbreviate long addresses as ``0x1234...abcd`` for display."""

    if len(address) <= 12:
        return address
    return f"{address[:6]}...{address[-4:]}"
