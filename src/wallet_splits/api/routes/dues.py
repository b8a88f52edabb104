"""User dues across every group the wallet belongs to."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from wallet_splits.api.dependencies import get_settlement_service
from wallet_splits.api.schemas.settlement import SettlementSummaryResponse
from wallet_splits.application.services.settlement_service import SettlementService

router = APIRouter(prefix="/dues", tags=["Dues"])


@router.get("/{wallet_address}", response_model=SettlementSummaryResponse)
def get_user_dues(
    wallet_address: Annotated[str, Path(min_length=1, max_length=128)],
    service: Annotated[SettlementService, Depends(get_settlement_service)],
) -> SettlementSummaryResponse:
    """Return totals, pending groups and globally optimal transactions."""

    summary = service.get_user_dues(wallet_address)
    return SettlementSummaryResponse.from_summary(summary)
