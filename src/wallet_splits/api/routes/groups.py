"""Group-local settlement routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from wallet_splits.api.dependencies import get_settlement_service
from wallet_splits.api.schemas.settlement import GroupSettlementResponse
from wallet_splits.application.services.settlement_service import SettlementService

router = APIRouter(prefix="/groups", tags=["Groups"])


@router.get("/{group_id}/settlement", response_model=GroupSettlementResponse)
def get_group_settlement(
    group_id: Annotated[str, Path(min_length=1, max_length=64)],
    service: Annotated[SettlementService, Depends(get_settlement_service)],
) -> GroupSettlementResponse:
    """Return net positions and the settle-up plan of one group."""

    settlement = service.settle_group(group_id)
    return GroupSettlementResponse.from_plan(settlement.group, settlement.plan)
