from __future__ import annotations

import logging

import typer
import uvicorn

from itemcounter.config import Settings, load_settings
from itemcounter.console import render_result, run_menu
from itemcounter.counting.engine import count

app = typer.Typer(help="Count occurrences of items across several data types.")


def _settings_or_exit() -> Settings:
    try:
        return load_settings()
    except ValueError as exc:
        typer.secho(f"Invalid configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc


def _configure_logging() -> None:
    settings = _settings_or_exit()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Interactive menu when no command is given."""
    _configure_logging()
    if ctx.invoked_subcommand is None:
        run_menu()


@app.command()
def menu() -> None:
    """Run the interactive counting menu."""
    run_menu()


@app.command("count")
def count_command(
    data_type: str = typer.Argument(..., help="text, integer, decimal, character, boolean or date"),
    items: list[str] = typer.Argument(None, help="Items to count"),
) -> None:
    """Count ITEMS once and print one line per distinct value.

    For the character kind the items are joined first, so
    ``itemcounter count character ab ba`` counts the characters of "abba".
    """
    result = count(items or [], data_type)
    lines = render_result(result)
    if not result.ok:
        typer.secho(lines[0], fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    for line in lines:
        typer.echo(line)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default ITEMCOUNTER_HOST)"),
    port: int | None = typer.Option(None, "--port", min=1, max=65535, help="Port (default ITEMCOUNTER_PORT)"),
) -> None:
    """Run the HTTP API."""
    settings = _settings_or_exit()
    uvicorn.run(
        "itemcounter.main:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
