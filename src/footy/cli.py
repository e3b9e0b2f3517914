"""Main football CLI."""

import logging
from typing import Annotated

import typer
from rich.console import Console

from .client import UpstreamClient
from .colors import COLORS, ColorTable
from .commands import CommandKind, err_console, run_command
from .completion import complete_team_names
from .config import Settings
from .errors import ConfigError, FootyError, TransportError
from .logging_utils import set_level
from .render import Renderer
from .roster import RosterStore, prompt_add, prompt_remove

console = Console()
app = typer.Typer(help="Global Football CLI", invoke_without_command=True)


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ConfigError as e:
        err_console.print(f"[{COLORS['error']}]✗ {e}[/{COLORS['error']}]")
        raise typer.Exit(1)


def _run(kind: CommandKind):
    settings = _load_settings()
    code = run_command(kind, settings, console=console)
    if code:
        raise typer.Exit(code)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log every request")] = False,
):
    """Fixtures, live scores and standings from API-Football."""
    if debug:
        set_level(logging.DEBUG)
    elif verbose:
        set_level(logging.INFO)

    if ctx.invoked_subcommand is None:
        console.print(f"\n[{COLORS['header']}]Global Football CLI[/{COLORS['header']}]")
        console.rule(style=COLORS['border'])
        settings = _load_settings()
        try:
            kind = CommandKind(settings.default_command)
        except ValueError:
            err_console.print(f"[{COLORS['error']}]✗ Invalid default command: {settings.default_command}[/{COLORS['error']}]")
            raise typer.Exit(1)
        code = run_command(kind, settings, console=console)
        if code:
            raise typer.Exit(code)


@app.command()
def schedule():
    """Today's fixtures in your preferred leagues."""
    _run(CommandKind.SCHEDULE)


@app.command()
def live():
    """Matches in progress right now."""
    _run(CommandKind.LIVE)


@app.command()
def scores():
    """Recent results for your favorite teams."""
    _run(CommandKind.SCORES)


@app.command()
def standings():
    """League tables for your preferred leagues."""
    _run(CommandKind.STANDINGS)


@app.command()
def teams(
    add: Annotated[str | None, typer.Option(
        "--add", "-a",
        help="Look up a team by name and add it to your favorites"
    )] = None,
    remove: Annotated[str | None, typer.Option(
        "--remove", "-r",
        help="Remove a team from your favorites",
        autocompletion=complete_team_names,
    )] = None,
):
    """Add or remove favorite teams."""
    if add is None and remove is None:
        _run(CommandKind.TEAMS)
        return

    settings = _load_settings()
    store = RosterStore(settings.roster_file)

    try:
        if add is not None:
            prompt_add(store, UpstreamClient.from_settings(settings), add, console)
        if remove is not None:
            prompt_remove(store, remove, console)
    except TransportError as e:
        err_console.print(f"[{COLORS['error']}]Error from the API:[/{COLORS['error']}] {e}")
        raise typer.Exit(1)
    except FootyError as e:
        err_console.print(f"[{COLORS['error']}]Error:[/{COLORS['error']}] {e}")
        raise typer.Exit(1)


@app.command(name="list")
def list_teams():
    """Show your favorite teams."""
    settings = _load_settings()
    try:
        renderer = Renderer(ColorTable.load(settings.colors_file), console=console)
        renderer.header("Favorite Teams")
        renderer.render_roster(RosterStore(settings.roster_file).read_all())
    except FootyError as e:
        err_console.print(f"[{COLORS['error']}]Error:[/{COLORS['error']}] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
