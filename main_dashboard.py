"""Mini README: Entry point CLI for the PubliFinance dashboard.

Commands:
    * run - serve the FastAPI dashboard with uvicorn.
    * summary - print totals and the expense breakdown of a seeded ledger.

Both commands configure logging from settings, so ``PUBLIFINANCE_LOG_LEVEL``
and the other ``PUBLIFINANCE_*`` variables apply here too.
"""

from __future__ import annotations

import typer
import uvicorn

from publifinance.configuration import get_settings
from publifinance.interface.formatting import format_currency
from publifinance.ledger import LedgerState
from publifinance.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch and inspect the PubliFinance dashboard.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False,
        help="Use production server settings (disable auto-reload). Implied when"
        " PUBLIFINANCE_ENVIRONMENT is \"production\".",
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)
    reload = not (production or settings.environment.lower() == "production")

    # Browsers cannot open the 0.0.0.0 / :: wildcard, so point at loopback instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting PubliFinance on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "publifinance.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=reload,
    )


@cli.command()
def summary() -> None:
    """Print income, expense and balance plus expenses per category."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    ledger = LedgerState(seed_demo_data=settings.seed_demo_data)
    totals = ledger.summary()
    symbol = settings.currency_symbol
    typer.echo(f"Receita Total: {format_currency(totals.total_income, symbol)}")
    typer.echo(f"Despesa Total: {format_currency(totals.total_expense, symbol)}")
    typer.echo(f"Saldo Total:   {format_currency(totals.balance, symbol)}")
    for entry in ledger.expense_by_category():
        typer.echo(f"  {entry.name}: {format_currency(entry.value, symbol)}")


if __name__ == "__main__":
    cli()
