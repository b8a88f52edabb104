"""API response schemas."""

from wallet_splits.api.schemas.settlement import (
    GroupSettlementResponse,
    SettlementSummaryResponse,
)

__all__ = [
    "GroupSettlementResponse",
    "SettlementSummaryResponse",
]
