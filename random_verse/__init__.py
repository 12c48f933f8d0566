"""Parse a flat scripture corpus and draw random verses from it."""

__version__ = "0.1.0"
