import json

import pytest

from footy.errors import DeserializationError, MissingFieldError, NormalizationError, NotFoundError
from footy.normalize import (
    is_empty_result,
    normalize_fixtures,
    normalize_leagues,
    normalize_standings,
    normalize_teams,
)

from conftest import envelope, make_fixture, make_standing, standings_envelope


def test_empty_input_gives_single_empty_batch():
    assert normalize_fixtures([]) == [[]]


def test_missing_response_is_an_error():
    body = json.dumps({"get": "fixtures", "errors": {"token": "bad key"}})

    with pytest.raises(MissingFieldError):
        normalize_fixtures([body])


def test_batches_follow_request_order():
    first = envelope([make_fixture(1), make_fixture(2)])
    second = envelope([])
    third = envelope([make_fixture(3)])

    batches = normalize_fixtures([first, second, third])

    assert [[f.fixture.id for f in batch] for batch in batches] == [[1, 2], [], [3]]


def test_one_bad_record_fails_the_batch():
    bad = make_fixture(2)
    del bad["teams"]["home"]

    with pytest.raises(DeserializationError):
        normalize_fixtures([envelope([make_fixture(1)]), envelope([bad])])


def test_invalid_json():
    with pytest.raises(DeserializationError):
        normalize_fixtures(["<html>Bad Gateway</html>"])


def test_response_must_be_a_list():
    with pytest.raises(DeserializationError):
        normalize_fixtures([json.dumps({"response": {"fixture": {}}})])


def test_is_empty_result():
    assert is_empty_result([[]])
    assert is_empty_result([[], []])
    assert not is_empty_result(normalize_fixtures([envelope([make_fixture()])]))


def test_standings_keep_groups():
    groups = [
        [make_standing(1, "Inter Miami", 9568, 40, group="Eastern Conference")],
        [make_standing(1, "LA Galaxy", 1605, 38, group="Western Conference"),
         make_standing(2, "LAFC", 1616, 36, group="Western Conference")],
    ]

    tables = normalize_standings([standings_envelope(groups, league_id=253, name="Major League Soccer")])

    assert len(tables) == 1
    assert [len(group) for group in tables[0]] == [1, 2]
    assert tables[0][1][1].team.name == "LAFC"


def test_standings_keep_league_metadata():
    leagues = normalize_leagues([standings_envelope([[make_standing(1, "Liverpool", 40, 28)]])])

    assert leagues[0].name == "Premier League"
    assert leagues[0].season == 2023


def test_standings_empty_input():
    assert normalize_standings([]) == []


def test_standings_empty_response_is_an_error():
    with pytest.raises(NormalizationError):
        normalize_standings([envelope([])])


def test_standings_missing_response():
    with pytest.raises(MissingFieldError):
        normalize_standings([json.dumps({"errors": []})])


def test_team_search():
    body = envelope([
        {"team": {"id": 40, "name": "Liverpool", "code": "LIV", "logo": "https://x/40.png"}, "venue": {}},
    ])

    teams = normalize_teams(body)

    assert teams[0].id == 40
    assert teams[0].name == "Liverpool"


def test_team_search_no_results():
    with pytest.raises(NotFoundError):
        normalize_teams(envelope([]))
