"""Turn raw API envelopes into typed records."""

import json
from typing import Any, Sequence

from pydantic import TypeAdapter, ValidationError

from .errors import DeserializationError, MissingFieldError, NormalizationError, NotFoundError
from .logging_utils import get_logger
from .models import Fixture, LeagueStandings, Team, TeamStanding, describe_errors

logger = get_logger(__name__)

_fixtures = TypeAdapter(list[Fixture])
_league = TypeAdapter(LeagueStandings)
_teams = TypeAdapter(list[Team])


def _validate(adapter: TypeAdapter, value: Any) -> Any:
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        raise DeserializationError(describe_errors(e)) from e


def _unwrap(raw_body: str) -> Any:
    """Parse one envelope and return its ``response`` value."""
    try:
        document = json.loads(raw_body)
    except (TypeError, ValueError) as e:
        raise DeserializationError(f"invalid JSON: {e}") from e

    if not isinstance(document, dict):
        raise DeserializationError(f"expected a JSON object, got {type(document).__name__}")

    if 'response' not in document:
        raise MissingFieldError('response')

    return document['response']


def normalize_fixtures(raw_bodies: Sequence[str]) -> list[list[Fixture]]:
    """
    Deserialize fixture envelopes, one inner list per upstream call.

    An empty input yields ``[[]]``, the "nothing to show" sentinel, rather
    than an empty outer list. Any malformed record fails the whole batch.
    """
    if not raw_bodies:
        return [[]]

    batches = [_validate(_fixtures, _unwrap(raw_body)) for raw_body in raw_bodies]

    logger.debug("Normalized %d fixtures in %d batches", sum(len(b) for b in batches), len(batches))
    return batches


def is_empty_result(batches: Sequence[Sequence[Any]]) -> bool:
    """True for the sentinel and for batches that hold no records at all."""
    return all(len(batch) == 0 for batch in batches)


def normalize_standings(raw_bodies: Sequence[str]) -> list[list[list[TeamStanding]]]:
    """
    Deserialize standings envelopes into per-league lists of groups.

    Each envelope wraps a single-element ``response`` array whose ``league``
    holds the table. An empty ``response`` is an error.
    """
    return [league.standings for league in normalize_leagues(raw_bodies)]


def normalize_leagues(raw_bodies: Sequence[str]) -> list[LeagueStandings]:
    """Like :func:`normalize_standings` but keeps the league metadata."""
    leagues = []
    for raw_body in raw_bodies:
        response = _unwrap(raw_body)
        if not isinstance(response, list):
            raise DeserializationError(f"response should be an array, got {type(response).__name__}")
        if not response:
            raise NormalizationError("standings response is empty")

        first = response[0]
        if not isinstance(first, dict) or 'league' not in first:
            raise MissingFieldError('league')

        leagues.append(_validate(_league, first['league']))

    logger.debug("Normalized standings for %d leagues", len(leagues))
    return leagues


def normalize_teams(raw_body: str) -> list[Team]:
    """Deserialize a team search envelope; no matches raises NotFoundError."""
    response = _unwrap(raw_body)
    if not isinstance(response, list):
        raise DeserializationError(f"response should be an array, got {type(response).__name__}")

    found = []
    for item in response:
        if not isinstance(item, dict) or 'team' not in item:
            raise MissingFieldError('team')
        team = item['team']
        # search results carry no logo for some national sides
        if isinstance(team, dict) and team.get('logo') is None:
            team = {**team, 'logo': ''}
        found.append(team)

    teams = _validate(_teams, found)
    if not teams:
        raise NotFoundError("no team matched the search")

    return teams
