"""Salesdash CLI application using Typer.

Command-line utilities for running the API and seeding the catalog
outside of the HTTP surface.
"""

import asyncio
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from salesdash.application.commands import InitializeDatabaseCommand, SeedResult
from salesdash.domain.catalog import SeedSourceError
from salesdash.infrastructure.persistence.sqlalchemy.engine import (
    create_engine,
    create_session_maker,
    create_tables,
)
from salesdash.infrastructure.persistence.sqlalchemy.repositories import (
    SqlAlchemyTransactionCatalog,
)
from salesdash.infrastructure.seed import HttpSeedSource
from salesdash_config.settings import Settings, get_settings

app = typer.Typer(
    name="salesdash",
    help="Salesdash - product transaction dashboard backend",
    no_args_is_help=True,
)
console = Console()


async def _initialize_database(settings: Settings) -> SeedResult:
    engine = create_engine(settings.sqlalchemy_url, echo=settings.database_echo)
    try:
        await create_tables(engine)
        command = InitializeDatabaseCommand(
            catalog=SqlAlchemyTransactionCatalog(create_session_maker(engine)),
            seed_source=HttpSeedSource(
                url=settings.seed_source_url,
                timeout=settings.seed_source_timeout,
            ),
        )
        return await command.execute()
    finally:
        await engine.dispose()


@app.command("init-db")
def init_db() -> None:
    """Create missing tables and seed the catalog from the remote dataset.

    Records are appended; running this twice stores the dataset twice.
    """
    settings = get_settings()
    console.print(
        f"\n[bold green]{settings.app_name} database initialization[/bold green]"
    )
    console.print(f"[dim]Database: {settings.database_type}[/dim]")
    console.print(f"[dim]Source:   {settings.seed_source_url}[/dim]\n")

    try:
        result = asyncio.run(_initialize_database(settings))
    except SeedSourceError as e:
        console.print(f"[red]{e.message}[/red] [dim]({e.details['reason']})[/dim]")
        raise typer.Exit(code=1) from e

    console.print(
        f"Inserted [cyan]{result.inserted}[/cyan] of "
        f"[cyan]{result.fetched}[/cyan] fetched records."
    )


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "salesdash.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_config=None,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
