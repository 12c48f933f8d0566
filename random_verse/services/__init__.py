"""Parsing, selection, and formatting services."""

from __future__ import annotations

from .formatting import format_verse
from .hierarchy import build_corpus, parse_corpus
from .selection import SelectedVerse, select_random_verse

__all__ = [
    "SelectedVerse",
    "build_corpus",
    "format_verse",
    "parse_corpus",
    "select_random_verse",
]
