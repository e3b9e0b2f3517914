"""
Logging utilities for the football CLI.

Every module logs through a child of the ``footy`` logger. Records go to
stderr through a rich handler so they never mix with the rendered tables
on stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_ROOT_NAME = "footy"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under ``footy``, usually called with ``__name__``.

    The ``footy`` logger gets a single RichHandler the first time this is
    called; later calls reuse it.
    """
    root = logging.getLogger(_ROOT_NAME)

    if not root.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
        root.propagate = False

    return logging.getLogger(name if name is not None else _ROOT_NAME)


def set_level(level: int) -> None:
    """Set the level of every ``footy`` logger."""
    get_logger().setLevel(level)
