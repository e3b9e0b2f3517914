"""Football fixtures, live scores and standings in the terminal."""

__version__ = "0.1.0"
