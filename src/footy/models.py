"""Typed records for the football API payloads."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, ValidationError, field_validator

from .errors import DeserializationError

FINISHED = 'FT'
NOT_STARTED = 'NS'
TO_BE_DEFINED = 'TBD'

# Status codes that are not shown as in progress
IDLE_STATUSES = {FINISHED, TO_BE_DEFINED, NOT_STARTED}


def describe_errors(error: ValidationError) -> str:
    """One line per failed field, e.g. ``fixture.id: Input should be a valid integer``."""
    return '; '.join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def _empty_if_null(value: Any) -> Any:
    return {} if value is None else value


class ApiModel(BaseModel):
    """Base for every API record; unknown keys are ignored."""

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_dict(cls, data: Any):
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise DeserializationError(describe_errors(e)) from e


class Venue(ApiModel):
    id: Optional[StrictInt] = None
    name: Optional[StrictStr] = None
    city: Optional[StrictStr] = None


class Status(ApiModel):
    long: StrictStr
    short: StrictStr
    elapsed: Optional[StrictInt] = None

    @property
    def in_progress(self) -> bool:
        """Anything other than finished, undecided or not started is live."""
        return self.short not in IDLE_STATUSES


class Periods(ApiModel):
    first: Optional[StrictInt] = None
    second: Optional[StrictInt] = None


class FixtureInfo(ApiModel):
    """The ``fixture`` block of a fixture record."""

    id: StrictInt
    timezone: StrictStr
    date: StrictStr
    timestamp: StrictInt
    status: Status
    referee: Optional[StrictStr] = None
    periods: Periods = Field(default_factory=Periods)
    venue: Optional[Venue] = None

    null_periods = field_validator('periods', mode='before')(_empty_if_null)


class LeagueSummary(ApiModel):
    id: StrictInt
    name: StrictStr
    country: StrictStr
    logo: StrictStr
    season: StrictInt
    flag: Optional[StrictStr] = None
    round: Optional[StrictStr] = None


class Team(ApiModel):
    """
    A team reference.

    ``winner`` is True for the winning side, False for the losing side and
    None when the match is drawn or undecided.
    """

    id: StrictInt
    name: StrictStr
    logo: StrictStr
    winner: Optional[StrictBool] = None


class Teams(ApiModel):
    home: Team
    away: Team


class Goals(ApiModel):
    home: Optional[StrictInt] = None
    away: Optional[StrictInt] = None

    @property
    def complete(self) -> bool:
        return self.home is not None and self.away is not None


class Score(ApiModel):
    halftime: Goals = Field(default_factory=Goals)
    fulltime: Goals = Field(default_factory=Goals)
    extratime: Goals = Field(default_factory=Goals)
    penalty: Goals = Field(default_factory=Goals)

    null_parts = field_validator('halftime', 'fulltime', 'extratime', 'penalty', mode='before')(_empty_if_null)


class Fixture(ApiModel):
    """One scheduled, live or finished match."""

    fixture: FixtureInfo
    league: LeagueSummary
    teams: Teams
    goals: Goals = Field(default_factory=Goals)
    score: Optional[Score] = None

    null_goals = field_validator('goals', mode='before')(_empty_if_null)

    @property
    def home(self) -> Team:
        return self.teams.home

    @property
    def away(self) -> Team:
        return self.teams.away

    @property
    def status(self) -> Status:
        return self.fixture.status

    @property
    def is_live_complete(self) -> bool:
        """True when both goal counts and the elapsed minutes are reported."""
        return self.goals.complete and self.fixture.status.elapsed is not None


class StatGoals(ApiModel):
    for_: Optional[StrictInt] = Field(default=None, alias='for')
    against: Optional[StrictInt] = None


class Stats(ApiModel):
    played: Optional[StrictInt] = None
    win: Optional[StrictInt] = None
    draw: Optional[StrictInt] = None
    lose: Optional[StrictInt] = None
    goals: StatGoals = Field(default_factory=StatGoals)

    null_goals = field_validator('goals', mode='before')(_empty_if_null)

    @property
    def goals_for(self) -> Optional[int]:
        return self.goals.for_

    @property
    def goals_against(self) -> Optional[int]:
        return self.goals.against


class TeamStanding(ApiModel):
    """One row of a league table."""

    rank: StrictInt
    team: Team
    points: StrictInt
    goals_diff: StrictInt = Field(alias='goalsDiff')
    all: Stats
    home: Stats
    away: Stats
    group: Optional[StrictStr] = None
    form: Optional[StrictStr] = None
    status: Optional[StrictStr] = None
    description: Optional[StrictStr] = None


class LeagueStandings(ApiModel):
    """A league with its table, split into groups."""

    id: StrictInt
    name: StrictStr
    country: StrictStr
    season: StrictInt
    standings: list[list[TeamStanding]]
    logo: Optional[StrictStr] = None
    flag: Optional[StrictStr] = None
