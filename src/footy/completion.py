"""Tab completion for the football CLI."""

from .errors import RosterFileError
from .roster import RosterStore


def get_team_names() -> list[str]:
    """Saved favorite team names, or nothing if the roster is unreadable."""
    try:
        return sorted(RosterStore().read_all())
    except RosterFileError:
        return []


def complete_team_names(incomplete: str) -> list[str]:
    """Complete saved team names, ignoring case."""
    prefix = incomplete.casefold()
    return [name for name in get_team_names() if name.casefold().startswith(prefix)]
