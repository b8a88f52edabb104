"""API dependency providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from wallet_splits.application.services.settlement_service import (
    SettlementService,
    build_ledger_builder,
)
from wallet_splits.core.settings import Settings, get_settings
from wallet_splits.db.session import get_db_session
from wallet_splits.repositories.sql_ledger_store import SqlLedgerStore


def get_settlement_service(
    session: Annotated[Session, Depends(get_db_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SettlementService:
    """Build settlement service over a per-request ledger snapshot."""

    return SettlementService(
        ledger_store=SqlLedgerStore(session),
        builder=build_ledger_builder(settings),
    )
