"""Error types raised by the football CLI."""

from typing import Optional


class FootyError(Exception):
    """Base class for every error the CLI reports to the user."""


class ConfigError(FootyError):
    """Required configuration is missing or invalid."""


class TransportError(FootyError):
    """An HTTP call to the football API failed."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class NormalizationError(FootyError):
    """An API envelope could not be turned into typed records."""


class MissingFieldError(NormalizationError):
    """A required key was absent from an API envelope."""

    def __init__(self, field: str):
        super().__init__(f"missing field '{field}'")
        self.field = field


class DeserializationError(NormalizationError):
    """A value inside an API envelope had the wrong shape or type."""


class NotFoundError(FootyError):
    """A lookup returned no results."""


class RosterFileError(FootyError):
    """The favorite teams file is missing or unreadable."""


class ColorTableError(FootyError):
    """The team colors file could not be read."""


class ColorParseError(FootyError):
    """A stored team color is not a valid RGB triple."""
