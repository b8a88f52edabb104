"""CLI bootstrap for wallet-splits."""

import json
from pathlib import Path

import typer

from wallet_splits.application.schemas.ledger_snapshot import LedgerSnapshot
from wallet_splits.application.services.settlement_service import (
    SettlementService,
    build_ledger_builder,
)
from wallet_splits.core.logging_setup import configure_logging
from wallet_splits.core.settings import get_settings
from wallet_splits.domain.errors import DomainError
from wallet_splits.domain.money import format_money
from wallet_splits.domain.settlement import SettlementTransaction
from wallet_splits.repositories.in_memory_ledger_store import InMemoryLedgerStore

app = typer.Typer(help="CLI for shared-expense netting and settlement plans.")
INPUT_FILE_OPTION = typer.Option(..., exists=True, dir_okay=False)
WALLET_OPTION = typer.Option(..., help="Wallet address of the user.")
GROUP_OPTION = typer.Option(..., help="Identifier of the group to settle.")


def _load_service(input: Path) -> SettlementService:
    settings = get_settings()
    configure_logging(settings.log_level)
    payload = json.loads(input.read_text(encoding="utf-8"))
    snapshot = LedgerSnapshot.model_validate(payload)
    return SettlementService(
        ledger_store=InMemoryLedgerStore.from_snapshot(snapshot),
        builder=build_ledger_builder(settings),
    )


def _echo_transactions(transactions: list[SettlementTransaction]) -> None:
    if not transactions:
        typer.echo("  Nothing pending")
        return
    for transaction in transactions:
        typer.echo(f"  {transaction.describe()}")


@app.command("healthcheck")
def healthcheck() -> None:
    """Verify that the CLI entrypoint is available."""
    typer.echo("wallet-splits is ready")


@app.command("dues")
def dues(input: Path = INPUT_FILE_OPTION, wallet: str = WALLET_OPTION) -> None:
    """Print what a wallet owes and is owed across all of its groups."""
    try:
        summary = _load_service(input).get_user_dues(wallet)
    except DomainError as exc:
        typer.echo(f"{exc.code}: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Wallet: {summary.user_wallet}")
    typer.echo(f"Owes: {format_money(summary.total_owed)}")
    typer.echo(f"Owed to wallet: {format_money(summary.total_owed_to_user)}")
    typer.echo(f"Net balance: {format_money(summary.net_balance)}")
    for due in summary.pending_groups:
        position = format_money(due.net_position)
        typer.echo(f"Group {due.name} ({due.group_id}): {position}")
        _echo_transactions(due.transactions)
    typer.echo("Global settlement:")
    _echo_transactions(summary.global_transactions)


@app.command("settle-group")
def settle_group(
    input: Path = INPUT_FILE_OPTION, group_id: str = GROUP_OPTION
) -> None:
    """Print net positions and the settle-up plan of one group."""
    try:
        settlement = _load_service(input).settle_group(group_id)
    except DomainError as exc:
        typer.echo(f"{exc.code}: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc

    plan = settlement.plan
    typer.echo(f"Group {settlement.group.name} ({settlement.group.id})")
    for wallet, amount in plan.net_positions.items():
        typer.echo(f"  {wallet}: {format_money(amount)}")
    typer.echo(
        f"Total debt: {format_money(plan.total_debt)} | "
        f"Total credit: {format_money(plan.total_credit)} | "
        f"Participants: {plan.participant_count}"
    )
    typer.echo("Transactions:")
    _echo_transactions(plan.transactions)


def main() -> None:
    """Run the wallet-splits CLI application."""
    app()


if __name__ == "__main__":
    main()
