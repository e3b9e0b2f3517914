"""Text rendering of fixtures, standings and the roster."""

from datetime import datetime, tzinfo
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from .colors import COLORS, ColorTable
from .models import IDLE_STATUSES, Fixture, LeagueStandings, Team, TeamStanding

# Display width of a team name column
NAME_WIDTH = 27

IN_PROGRESS = '| In Progress'


def format_time(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """Local kick-off time as ``HH:MM``."""
    return datetime.fromtimestamp(timestamp, tz).strftime('%H:%M')


def format_date(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """
    Local match day as ``MM-DD``.

    Scores rows slice the API date string instead; this is the timestamp
    based equivalent for callers that only hold a timestamp.
    """
    return datetime.fromtimestamp(timestamp, tz).strftime('%m-%d')


def progress_suffix(short_status: str) -> str:
    """``'| In Progress'`` for live status codes, empty otherwise."""
    if short_status in IDLE_STATUSES:
        return ''
    return IN_PROGRESS


def _goals(value: Optional[int]) -> str:
    return '-' if value is None else str(value)


class Renderer:
    """
    Writes fixture and standings rows to a console.

    Team names are colored from the color table and padded by hand to
    ``NAME_WIDTH`` using the plain name length, so color codes never
    shift the columns.
    """

    def __init__(self, colors: ColorTable, console: Optional[Console] = None, tz: Optional[tzinfo] = None):
        self.colors = colors
        self.console = console or Console()
        self.tz = tz

    def pad_name(self, team: Team) -> Text:
        """Colored team name followed by padding to the column width."""
        padding = max(NAME_WIDTH - len(team.name), 0)
        return Text.assemble((team.name, self.colors.style_for(team.id)), ' ' * padding)

    def header(self, title: str):
        self.console.print(f"\n[{COLORS['header']}]{title}[/{COLORS['header']}]")

    def muted(self, message: str):
        self.console.print(f"[{COLORS['muted']}]{message}[/{COLORS['muted']}]")

    # Fixture rows

    def schedule_row(self, fixture: Fixture) -> Text:
        row = Text.assemble(
            self.pad_name(fixture.away),
            ' at ',
            self.pad_name(fixture.home),
            ' at ',
            (format_time(fixture.fixture.timestamp, self.tz), COLORS['time']),
        )
        suffix = progress_suffix(fixture.status.short)
        if suffix:
            row.append(' ')
            row.append(suffix, style=COLORS['live'])
        return row

    def live_row(self, fixture: Fixture) -> Text:
        return Text.assemble(
            self.pad_name(fixture.away),
            ' ',
            self.pad_name(fixture.home),
            ': ',
            (f"{_goals(fixture.goals.away)} - {_goals(fixture.goals.home)}", COLORS['score']),
            f" in {fixture.status.elapsed}'",
        )

    def scores_row(self, fixture: Fixture) -> Text:
        return Text.assemble(
            self.pad_name(fixture.away),
            ' ',
            self.pad_name(fixture.home),
            ': ',
            (f"{_goals(fixture.goals.away)} - {_goals(fixture.goals.home)}", COLORS['score']),
            f" on {fixture.fixture.date[5:10]}",
        )

    def standing_row(self, standing: TeamStanding) -> Text:
        return Text.assemble(
            (str(standing.rank), COLORS['rank']),
            ' ',
            self.pad_name(standing.team),
            ' ',
            (str(standing.points), COLORS['points']),
            ' ',
            (standing.form or 'na', COLORS['form']),
        )

    # Whole outputs

    def render_schedule(self, batches: Sequence[Sequence[Fixture]]):
        self.header("Today's Schedule")
        for batch in batches:
            if not batch:
                continue
            self._league_heading(batch[0].league.name, batch[0].league.country)
            for fixture in batch:
                self.console.print(self.schedule_row(fixture), soft_wrap=True)

    def render_live(self, batches: Sequence[Sequence[Fixture]]):
        self.header("Live Fixtures")
        for batch in batches:
            for fixture in batch:
                self.console.print(self.live_row(fixture), soft_wrap=True)

    def render_scores(self, batches: Sequence[Sequence[Fixture]]):
        self.header("Favorite Teams")
        for batch in batches:
            for fixture in batch:
                self.console.print(self.scores_row(fixture), soft_wrap=True)

    def render_standings(self, leagues: Sequence[LeagueStandings]):
        self.header("Standings")
        for league in leagues:
            self._league_heading(league.name, league.country)
            for group in league.standings:
                for standing in group:
                    if standing.rank == 1 and standing.group:
                        self.console.print(f"\n[{COLORS['league']}]{escape(standing.group)}[/{COLORS['league']}]")
                    self.console.print(self.standing_row(standing), soft_wrap=True)

    def render_roster(self, roster: dict[str, int]):
        """Saved favorite teams, each name in its team color."""
        if not roster:
            self.muted("No favorite teams saved")
            return
        for name, team_id in roster.items():
            self.console.print(Text(name, style=self.colors.style_for(team_id)))

    def _league_heading(self, name: str, country: str):
        self.console.print(f"\n[{COLORS['league']}]{escape(name)}[/{COLORS['league']}] [{COLORS['muted']}]{escape(country)}[/{COLORS['muted']}]")
