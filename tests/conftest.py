import io
import json
from datetime import timedelta, timezone

import pytest
import requests
from rich.console import Console

from footy.colors import ColorTable
from footy.render import Renderer

# Fixed UTC-6 zone so kick-off times do not depend on the test machine
CENTRAL = timezone(timedelta(hours=-6))

KICKOFF = 1700096621


def make_fixture(
    fixture_id=1001,
    home=("Liverpool", 40),
    away=("Arsenal", 42),
    short="NS",
    elapsed=None,
    goals=(None, None),
    timestamp=KICKOFF,
    date="2023-11-15T19:03:41-06:00",
    league=(39, "Premier League", "England"),
):
    return {
        "fixture": {
            "id": fixture_id,
            "referee": "M. Oliver",
            "timezone": "UTC",
            "date": date,
            "timestamp": timestamp,
            "periods": {"first": None, "second": None},
            "venue": {"id": 550, "name": "Anfield", "city": "Liverpool"},
            "status": {"long": "Not Started", "short": short, "elapsed": elapsed},
        },
        "league": {
            "id": league[0],
            "name": league[1],
            "country": league[2],
            "logo": f"https://media.api-sports.io/football/leagues/{league[0]}.png",
            "flag": "https://media.api-sports.io/flags/gb.svg",
            "season": 2023,
            "round": "Regular Season - 12",
        },
        "teams": {
            "home": {"id": home[1], "name": home[0], "logo": f"https://media.api-sports.io/football/teams/{home[1]}.png", "winner": None},
            "away": {"id": away[1], "name": away[0], "logo": f"https://media.api-sports.io/football/teams/{away[1]}.png", "winner": None},
        },
        "goals": {"home": goals[0], "away": goals[1]},
        "score": {
            "halftime": {"home": None, "away": None},
            "fulltime": {"home": None, "away": None},
            "extratime": {"home": None, "away": None},
            "penalty": {"home": None, "away": None},
        },
    }


def make_standing(rank, name, team_id, points, form="WWDLW", group="Premier League"):
    stats = {"played": 12, "win": 8, "draw": 3, "lose": 1, "goals": {"for": 27, "against": 10}}
    return {
        "rank": rank,
        "team": {"id": team_id, "name": name, "logo": f"https://media.api-sports.io/football/teams/{team_id}.png"},
        "points": points,
        "goalsDiff": 17,
        "group": group,
        "form": form,
        "status": "same",
        "description": "Promotion - Champions League (Group Stage)",
        "all": stats,
        "home": stats,
        "away": stats,
        "update": "2023-11-15T00:00:00+00:00",
    }


def envelope(response):
    return json.dumps({
        "get": "fixtures",
        "parameters": {},
        "errors": [],
        "results": len(response),
        "paging": {"current": 1, "total": 1},
        "response": response,
    })


def standings_envelope(groups, league_id=39, name="Premier League"):
    return envelope([{
        "league": {
            "id": league_id,
            "name": name,
            "country": "England",
            "logo": "https://media.api-sports.io/football/leagues/39.png",
            "flag": "https://media.api-sports.io/flags/gb.svg",
            "season": 2023,
            "standings": groups,
        }
    }])


class FakeClient:
    """Stands in for UpstreamClient; serves canned bodies in order."""

    def __init__(self, bodies=None, error=None):
        self.bodies = list(bodies or [])
        self.error = error
        self.urls = []

    def fetch(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.bodies.pop(0)

    def fetch_all(self, urls):
        return [self.fetch(url) for url in urls]


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def plain_console(output):
    return Console(file=output, color_system=None, width=200)


@pytest.fixture
def colors():
    return ColorTable({40: "(200, 16, 46)", 42: "(239, 1, 7)", 496: "none"})


@pytest.fixture
def renderer(colors, plain_console):
    return Renderer(colors, console=plain_console, tz=CENTRAL)


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "teams.csv"
    path.write_text("Liverpool,40\n")
    return path


def make_response(status_code, body="", url="https://api-football-v1.p.rapidapi.com/v3/fixtures"):
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Error"
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.url = url
    return response


class FakeGet:
    """Replaces requests.get; serves canned responses in order."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def __call__(self, url, headers=None, timeout=None):
        self.calls.append((url, headers))
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response
