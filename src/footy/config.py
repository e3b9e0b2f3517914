"""Runtime settings for the football CLI."""

import os
from pathlib import Path
from typing import Iterable, Optional

from .errors import ConfigError

API_HOST = "api-football-v1.p.rapidapi.com"
FIXTURES_URL = f"https://{API_HOST}/v3/fixtures?"
STANDINGS_URL = f"https://{API_HOST}/v3/standings?"
TEAMS_URL = f"https://{API_HOST}/v3/teams?"

API_KEY_ENV = "FOOTY_API_KEY"
TEAMS_FILE_ENV = "FOOTY_TEAMS_FILE"
COLORS_FILE_ENV = "FOOTY_COLORS_FILE"
SEASON_ENV = "FOOTY_SEASON"
DEFAULT_COMMAND_ENV = "FOOTY_DEFAULT_COMMAND"

DEFAULT_TEAMS_FILE = Path("data/teams.csv")
DEFAULT_COLORS_FILE = Path("data/team_colors.csv")
DEFAULT_SEASON = 2023

# Premier League, La Liga, Serie A, Bundesliga, Ligue 1, MLS
PREFERRED_LEAGUES = [39, 140, 135, 78, 61, 253]

# Preferred leagues plus the European cups, Championship, Primeira Liga,
# Eredivisie, Brasileirao and Liga MX
ALL_LEAGUES = PREFERRED_LEAGUES + [2, 3, 848, 40, 94, 88, 71, 262]


class Settings:
    """
    Settings for one CLI invocation.

    Built once at startup and handed to every operation, so league lists
    and the season can be overridden without touching module state.
    """

    def __init__(
        self,
        api_key: str,
        preferred_leagues: Optional[Iterable[int]] = None,
        all_leagues: Optional[Iterable[int]] = None,
        season: int = DEFAULT_SEASON,
        default_command: str = "schedule",
        last_fixtures: int = 2,
        roster_file: str | Path | None = None,
        colors_file: str | Path = DEFAULT_COLORS_FILE,
        request_timeout: Optional[float] = None,
    ):
        if not api_key:
            raise ConfigError(f"{API_KEY_ENV} is not set")

        self.api_key = api_key
        self.preferred_leagues: list[int] = list(
            PREFERRED_LEAGUES if preferred_leagues is None else preferred_leagues
        )
        self.all_leagues: list[int] = list(
            ALL_LEAGUES if all_leagues is None else all_leagues
        )
        # live queries must cover every preferred league
        for league_id in self.preferred_leagues:
            if league_id not in self.all_leagues:
                self.all_leagues.append(league_id)

        self.season = season
        self.default_command = default_command
        self.last_fixtures = last_fixtures
        self.roster_file = Path(roster_file) if roster_file is not None else None
        self.colors_file = Path(colors_file)
        self.request_timeout = request_timeout

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        """Build settings from environment variables; keyword overrides win."""
        values = {
            'api_key': os.environ.get(API_KEY_ENV, ''),
            'colors_file': os.environ.get(COLORS_FILE_ENV, DEFAULT_COLORS_FILE),
            'default_command': os.environ.get(DEFAULT_COMMAND_ENV, 'schedule'),
        }

        season = os.environ.get(SEASON_ENV)
        if season:
            try:
                values['season'] = int(season)
            except ValueError:
                raise ConfigError(f"{SEASON_ENV} must be a year, got {season!r}") from None

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def __repr__(self) -> str:
        return (
            f"Settings(preferred_leagues={self.preferred_leagues}, "
            f"all_leagues={self.all_leagues}, season={self.season}, "
            f"default_command={self.default_command!r})"
        )
