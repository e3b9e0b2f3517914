"""Color scheme for the CLI and the per-team color table."""

import csv
from pathlib import Path

from rich.color import Color
from rich.style import Style

from .errors import ColorParseError, ColorTableError
from .logging_utils import get_logger

logger = get_logger(__name__)

COLORS = {
    # Status & Actions
    'success': 'green',
    'warning': 'yellow',
    'error': 'red',
    'info': 'cyan',

    # Fixtures
    'live': 'bold bright_red',
    'score': 'bold white',
    'time': 'cyan',

    # Standings
    'rank': 'bright_blue',
    'points': 'bold bright_green',
    'form': 'dim',

    # UI
    'header': 'bold white',
    'league': 'bold bright_yellow',
    'border': 'steel_blue',
    'muted': 'dim',
}

WHITE = (255, 255, 255)


def parse_rgb(value: str) -> tuple[int, int, int]:
    """
    Parse a stored color such as ``"(0, 35, 89)"``.

    Values that are not wrapped in parentheses mark teams without a
    distinct color and resolve to white. Inside the parentheses every
    component must be an integer from 0 to 255.
    """
    text = value.strip()
    if not (text.startswith('(') and text.endswith(')')):
        return WHITE

    parts = [p.strip() for p in text[1:-1].split(',')]
    if len(parts) != 3:
        raise ColorParseError(f"expected three components in {value!r}")

    rgb = []
    for part in parts:
        try:
            component = int(part)
        except ValueError:
            raise ColorParseError(f"invalid color component {part!r} in {value!r}") from None
        if not 0 <= component <= 255:
            raise ColorParseError(f"color component {component} out of range in {value!r}")
        rgb.append(component)

    return rgb[0], rgb[1], rgb[2]


class ColorTable:
    """Read-only mapping of team id to the stored color string."""

    def __init__(self, entries: dict[int, str] | None = None):
        self.entries: dict[int, str] = entries or {}

    @classmethod
    def load(cls, path: str | Path) -> "ColorTable":
        """Load ``id,"(r, g, b)"`` rows. A missing file gives an empty table."""
        color_path = Path(path)

        if not color_path.exists():
            logger.warning("Team colors file %s not found, using white for every team", color_path)
            return cls()

        entries = {}
        try:
            with color_path.open('r', encoding='utf-8', newline='') as f:
                for row in csv.reader(f):
                    if not row or not row[0].strip():
                        continue
                    try:
                        team_id = int(row[0])
                    except ValueError:
                        raise ColorParseError(f"invalid team id {row[0]!r} in {color_path}") from None
                    entries[team_id] = row[1] if len(row) > 1 else ''
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise ColorTableError(f"could not read {color_path}: {e}") from e

        logger.debug("Loaded %d team colors from %s", len(entries), color_path)
        return cls(entries)

    def rgb_for(self, team_id: int) -> tuple[int, int, int]:
        value = self.entries.get(team_id)
        if value is None:
            return WHITE
        return parse_rgb(value)

    def style_for(self, team_id: int) -> Style:
        """Rich style that paints a team name in its color."""
        r, g, b = self.rgb_for(team_id)
        return Style(color=Color.from_rgb(r, g, b))
