"""Portal Link CLI application using Typer.

Commands for running the API server, managing the database schema and
generating deployment secrets.
"""

import asyncio
import secrets
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from portal_link.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_tables,
    drop_tables,
)
from portal_link_config.settings import Settings, get_settings

app = typer.Typer(
    name="portal-link",
    help="Portal Link - link-in-bio pages CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)

secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "portal_link.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


async def _create_schema(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await create_tables(engine, settings.database_schema)
    finally:
        await engine.dispose()


async def _drop_schema(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await drop_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create missing tables. Existing tables and data are left untouched."""
    settings = get_settings()
    asyncio.run(_create_schema(settings))
    console.print("[bold green]Database schema is up to date.[/bold green]")


@db_app.command("drop")
def db_drop(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Drop all tables, deleting every user, page and link."""
    if not yes:
        typer.confirm("This deletes ALL data. Continue?", abort=True)
    settings = get_settings()
    asyncio.run(_drop_schema(settings))
    console.print("[yellow]All tables dropped.[/yellow]")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Portal Link configuration.

    Generates two secrets:
    - JWT_SECRET_KEY: Secret for signing access tokens
    - DB_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Portal Link Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes for a strong HS256 key
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]DB_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env or "
        "config/.env.dev file.[/dim]\n"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
