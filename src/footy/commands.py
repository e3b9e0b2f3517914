"""Command dispatch: each command kind fetches, normalizes and renders."""

from datetime import date
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape

from .client import UpstreamClient, live_url, schedule_urls, standings_urls, team_fixture_urls
from .colors import COLORS, ColorTable
from .config import Settings
from .errors import (
    ColorParseError,
    ColorTableError,
    DeserializationError,
    NormalizationError,
    RosterFileError,
    TransportError,
)
from .logging_utils import get_logger
from .normalize import is_empty_result, normalize_fixtures, normalize_leagues
from .render import Renderer
from .roster import RosterStore, edit_roster

logger = get_logger(__name__)

err_console = Console(stderr=True)


class CommandKind(str, Enum):
    SCHEDULE = 'schedule'
    LIVE = 'live'
    SCORES = 'scores'
    TEAMS = 'teams'
    STANDINGS = 'standings'


class Operation:
    """
    One command: a fetch step, a normalize step and a render step.

    ``run`` chains them; every HTTP call happens in ``fetch`` so a failure
    there leaves nothing half rendered.
    """

    kind: CommandKind
    parses = 'fixtures'

    def __init__(self, settings: Settings, client: UpstreamClient, renderer: Renderer, store: RosterStore):
        self.settings = settings
        self.client = client
        self.renderer = renderer
        self.store = store

    def fetch(self) -> list[str]:
        raise NotImplementedError

    def normalize(self, raw_bodies: list[str]) -> Any:
        return normalize_fixtures(raw_bodies)

    def render(self, records: Any):
        raise NotImplementedError

    def run(self):
        raw_bodies = self.fetch()
        records = self.normalize(raw_bodies)
        self.render(records)


class ScheduleOperation(Operation):
    """Today's fixtures in the preferred leagues."""

    kind = CommandKind.SCHEDULE

    def fetch(self) -> list[str]:
        # one date for the whole batch so every league sees the same day
        today = date.today()
        return self.client.fetch_all(schedule_urls(self.settings.preferred_leagues, today))

    def render(self, records):
        if is_empty_result(records):
            self.renderer.muted("No fixtures to show")
            return
        self.renderer.render_schedule(records)


class LiveOperation(Operation):
    """Fixtures in progress across every known league."""

    kind = CommandKind.LIVE

    def fetch(self) -> list[str]:
        return self.client.fetch_all([live_url(self.settings.all_leagues)])

    def normalize(self, raw_bodies):
        batches = normalize_fixtures(raw_bodies)
        for batch in batches:
            for fixture in batch:
                if not fixture.is_live_complete:
                    raise DeserializationError(
                        f"live fixture {fixture.fixture.id} has no score or elapsed time"
                    )
        return batches

    def render(self, records):
        if is_empty_result(records):
            self.renderer.muted("No live fixtures right now")
            return
        self.renderer.render_live(records)


class ScoresOperation(Operation):
    """
    Recent fixtures for every favorite team.

    All fixtures returned for each team are shown; there is no selection
    of the match closest to today.
    """

    kind = CommandKind.SCORES

    roster: dict[str, int] = {}

    def fetch(self) -> list[str]:
        self.roster = self.store.read_all()
        if not self.roster:
            return []
        urls = team_fixture_urls(self.roster.values(), self.settings.season, self.settings.last_fixtures)
        return self.client.fetch_all(urls)

    def render(self, records):
        if not self.roster:
            self.renderer.muted("No favorite teams saved")
            return
        if is_empty_result(records):
            self.renderer.muted("No fixtures to show")
            return
        self.renderer.render_scores(records)


class TeamsOperation(Operation):
    """Interactive add/remove of a favorite team. Nothing is rendered."""

    kind = CommandKind.TEAMS
    parses = 'teams'

    def run(self):
        edit_roster(self.store, self.client, self.renderer)


class StandingsOperation(Operation):
    """League tables for the preferred leagues."""

    kind = CommandKind.STANDINGS
    parses = 'standings'

    def fetch(self) -> list[str]:
        urls = standings_urls(self.settings.preferred_leagues, self.settings.season)
        return self.client.fetch_all(urls)

    def normalize(self, raw_bodies):
        return normalize_leagues(raw_bodies)

    def render(self, records):
        self.renderer.render_standings(records)


OPERATIONS: dict[CommandKind, type[Operation]] = {
    op.kind: op
    for op in (ScheduleOperation, LiveOperation, ScoresOperation, TeamsOperation, StandingsOperation)
}


def _error(message: str, detail: Exception):
    err_console.print(f"[{COLORS['error']}]{message}:[/{COLORS['error']}] {escape(str(detail))}")


def run_command(
    kind: CommandKind,
    settings: Settings,
    console: Optional[Console] = None,
    client: Optional[UpstreamClient] = None,
    store: Optional[RosterStore] = None,
) -> int:
    """Run one command and return the process exit code."""
    client = client or UpstreamClient.from_settings(settings)
    store = store or RosterStore(settings.roster_file)
    operation = None

    try:
        colors = ColorTable.load(settings.colors_file)
        renderer = Renderer(colors, console=console)
        operation = OPERATIONS[kind](settings, client, renderer, store)
        logger.info("Running %s", kind.value)
        operation.run()
    except TransportError as e:
        _error("Error from the API", e)
        return 1
    except NormalizationError as e:
        _error(f"Error parsing {operation.parses if operation else 'fixtures'}", e)
        return 1
    except RosterFileError as e:
        _error("Error reading favorite teams", e)
        return 1
    except (ColorParseError, ColorTableError) as e:
        _error("Error reading team colors", e)
        return 1

    return 0
