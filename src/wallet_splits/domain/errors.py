"""Domain exceptions used across API, CLI and the settlement engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a user-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable domain failures."""

    code: str
    message: str
    status_code: int
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class LedgerValidationError(DomainError):
    """Raised when ledger records in a scope are inconsistent.

    Typical causes are split shares that do not add up to the split total or
    payments that cannot be attributed to a share. The computation for the
    whole scope aborts; no partial plan is produced.
    """

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        *,
        code: str = "LEDGER_VALIDATION_ERROR",
    ) -> None:
        super().__init__(
            code=code,
            message=message
            or compose_error_message(
                cause="Ledger records for this scope are inconsistent.",
                action="Fix the split or payment records and retry.",
            ),
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details=details or {},
        )


class OverpaymentError(LedgerValidationError):
    """Raised when completed payments exceed a participant's share."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message
            or compose_error_message(
                cause="Payments recorded for a share exceed the share amount.",
                action="Reject the excess payment or enable the credit policy.",
            ),
            details=details,
            code="OVERPAYMENT",
        )


class LedgerIntegrityError(DomainError):
    """Raised when net positions of a closed scope do not add up to zero."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="LEDGER_INTEGRITY_ERROR",
            message=message
            or compose_error_message(
                cause="Net positions for this scope do not sum to zero.",
                action="Report this failure; the ledger data must be inspected.",
            ),
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            details=details or {},
        )


class GroupNotFoundError(DomainError):
    """Raised when a single-group settlement targets an unknown group."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="GROUP_NOT_FOUND",
            message=message
            or compose_error_message(
                cause="The requested group does not exist.",
                action="Check the group id and try again.",
            ),
            status_code=HTTPStatus.NOT_FOUND,
            details=details or {},
        )
