"""Favorite teams roster persisted as a flat CSV file."""

import csv
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .client import UpstreamClient, team_search_url
from .colors import COLORS
from .config import DEFAULT_TEAMS_FILE, TEAMS_FILE_ENV
from .errors import NotFoundError, RosterFileError
from .logging_utils import get_logger
from .models import Team
from .normalize import normalize_teams
from .render import Renderer

logger = get_logger(__name__)


class RosterStore:
    """
    Read and edit the favorite teams file.

    Rows are ``name,id`` with no header. Without an explicit path the
    location comes from ``FOOTY_TEAMS_FILE``, looked up on every call.
    """

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return Path(os.environ.get(TEAMS_FILE_ENV, DEFAULT_TEAMS_FILE))

    def read_all(self) -> dict[str, int]:
        """All saved teams by name. Later rows win on duplicate names."""
        path = self.path

        roster = {}
        try:
            with path.open('r', encoding='utf-8', newline='') as f:
                for row in csv.reader(f):
                    if len(row) < 2 or not row[0].strip():
                        continue
                    try:
                        roster[row[0].strip()] = int(row[1])
                    except ValueError:
                        raise RosterFileError(f"invalid team id {row[1]!r} in {path}") from None
        except FileNotFoundError:
            raise RosterFileError(f"favorite teams file not found: {path}") from None
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise RosterFileError(f"could not read {path}: {e}") from e

        return roster

    def append(self, name: str, team_id: int):
        """Add a team, creating the file if needed. Existing rows are untouched."""
        path = self.path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open('a', encoding='utf-8', newline='') as f:
                csv.writer(f).writerow([name, team_id])
        except OSError as e:
            raise RosterFileError(f"could not write {path}: {e}") from e

        logger.info("Added %s (%d) to %s", name, team_id, path)

    def remove_by_name(self, name: str):
        """Drop every row whose name matches, ignoring case, and rewrite the file."""
        roster = self.read_all()
        target = name.strip().casefold()
        kept = {n: i for n, i in roster.items() if n.casefold() != target}

        path = self.path
        try:
            with path.open('w', encoding='utf-8', newline='') as f:
                writer = csv.writer(f)
                for team_name, team_id in kept.items():
                    writer.writerow([team_name, team_id])
        except OSError as e:
            raise RosterFileError(f"could not write {path}: {e}") from e

        logger.info("Removed %s from %s (%d teams left)", name, path, len(kept))


def add_team(store: RosterStore, client: UpstreamClient, query: str) -> Team:
    """Look a team up by name and save the first match."""
    team = normalize_teams(client.fetch(team_search_url(query)))[0]
    store.append(team.name, team.id)
    return team


def edit_roster(
    store: RosterStore,
    client: UpstreamClient,
    renderer: Renderer,
    console: Optional[Console] = None,
):
    """Ask whether to add or remove a team, then do it once."""
    console = console or renderer.console

    choice = Prompt.ask("[bold]Add or remove a team?[/bold] (a/r)", console=console).strip()

    if choice.startswith('a'):
        query = Prompt.ask("Team name", console=console)
        prompt_add(store, client, query, console)
    elif choice.startswith('r'):
        console.print(f"\n[{COLORS['header']}]Favorite Teams[/{COLORS['header']}]")
        renderer.render_roster(store.read_all())
        name = Prompt.ask("\nTeam to remove", console=console)
        prompt_remove(store, name, console)
    else:
        console.print(f"[{COLORS['error']}]✗[/{COLORS['error']}] Invalid input, enter 'a' or 'r'")


def prompt_add(store: RosterStore, client: UpstreamClient, query: str, console: Console):
    try:
        team = add_team(store, client, query)
    except NotFoundError:
        console.print(f"[{COLORS['error']}]✗[/{COLORS['error']}] [bold]{escape(query)}[/bold] is not a valid team")
        return

    console.print(f"[{COLORS['success']}]✓[/{COLORS['success']}] Added [bold]{escape(team.name)}[/bold]")


def prompt_remove(store: RosterStore, name: str, console: Console):
    # No not-found branch: removing an unknown name still reports success
    store.remove_by_name(name)
    console.print(f"[{COLORS['success']}]✓[/{COLORS['success']}] Removed [bold]{escape(name.strip())}[/bold]")
