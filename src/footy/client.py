"""HTTP client and URL builders for the football API."""

from datetime import date
from typing import Iterable, Optional, Sequence
from urllib.parse import quote

import requests

from .config import API_HOST, FIXTURES_URL, STANDINGS_URL, TEAMS_URL, Settings
from .errors import TransportError
from .logging_utils import get_logger

logger = get_logger(__name__)


class UpstreamClient:
    """Issues authenticated GET requests, one at a time."""

    def __init__(self, api_key: str, timeout: Optional[float] = None):
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "UpstreamClient":
        return cls(settings.api_key, timeout=settings.request_timeout)

    def fetch(self, url: str) -> str:
        """GET ``url`` and return the decoded body."""
        headers = {
            'X-RapidAPI-KEY': self.api_key,
            'X-RapidAPI-Host': API_HOST,
        }

        logger.debug("GET %s", url)

        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(str(e), url=url) from e

        return response.text

    def fetch_all(self, urls: Iterable[str]) -> list[str]:
        """
        Fetch each URL in order.

        The first failure propagates and the remaining URLs are never
        requested, so callers get every body or none.
        """
        return [self.fetch(url) for url in urls]


def schedule_urls(league_ids: Sequence[int], today: date) -> list[str]:
    """One fixtures query per league for ``today``."""
    day = today.strftime('%Y-%m-%d')
    return [
        f"{FIXTURES_URL}league={league_id}&season={today.year}&date={day}"
        for league_id in league_ids
    ]


def live_url(league_ids: Sequence[int]) -> str:
    """A single query for live fixtures across every listed league."""
    joined = ''.join(f"{league_id}-" for league_id in league_ids).rstrip('-')
    return f"{FIXTURES_URL}live={joined}"


def team_fixture_urls(team_ids: Iterable[int], season: int, last: int = 2) -> list[str]:
    """One query per team for its most recent fixtures."""
    return [
        f"{FIXTURES_URL}season={season}&team={team_id}&last={last}"
        for team_id in team_ids
    ]


def standings_urls(league_ids: Sequence[int], season: int) -> list[str]:
    return [f"{STANDINGS_URL}league={league_id}&season={season}" for league_id in league_ids]


def team_search_url(name: str) -> str:
    return f"{TEAMS_URL}name={quote(name.strip())}"
