"""Line classification for the flat corpus format.

Each trimmed line of the corpus is one of:

- ``=== label ===``  chapter boundary
- ``== name ==``     book boundary
- ``<n> <text>``     verse record
- anything else      ignored

The chapter form is tested first because it also satisfies the book test.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

CHAPTER_DELIMITER = "==="
BOOK_DELIMITER = "=="
# Verse numbers are unsigned 32-bit values
MAX_VERSE_NUMBER = 2**32 - 1


@dataclass(frozen=True, slots=True)
class BookMarker:
    """Start of a new book."""

    name: str


@dataclass(frozen=True, slots=True)
class ChapterMarker:
    """Start of a new chapter within the current book."""

    label: str


@dataclass(frozen=True, slots=True)
class VerseRecord:
    """A verse belonging to the current chapter."""

    number: int
    text: str


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """A line with no structural meaning."""


LineTag = Union[BookMarker, ChapterMarker, VerseRecord, Unrecognized]


def _is_separator(char: str) -> bool:
    return char == "=" or char.isspace()


def _marker_payload(line: str, delimiter: str) -> str | None:
    """Return the payload of a ``<delim> payload <delim>`` line, or None.

    One separator character is dropped from each side of the payload when it
    is whitespace or ``=``, so ``== Name ==`` and ``==Name==`` both yield
    ``Name`` and runs of ``=`` match the fixed-offset slices.
    """
    width = len(delimiter)
    if len(line) <= 2 * width:
        return None
    if not (line.startswith(delimiter) and line.endswith(delimiter)):
        return None
    payload = line[width:-width]
    if _is_separator(payload[:1]):
        payload = payload[1:]
    if _is_separator(payload[-1:]):
        payload = payload[:-1]
    return payload


def _parse_verse(line: str) -> VerseRecord | None:
    number, sep, text = line.partition(" ")
    if not sep:
        return None
    digits = number[1:] if number.startswith("+") else number
    # ASCII digits only: int() would also accept "-", underscores and other scripts
    if not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    if value > MAX_VERSE_NUMBER:
        return None
    return VerseRecord(number=value, text=text)


def classify_line(line: str) -> LineTag:
    """Classify one trimmed corpus line. Never raises."""
    label = _marker_payload(line, CHAPTER_DELIMITER)
    if label is not None:
        return ChapterMarker(label=label)

    name = _marker_payload(line, BOOK_DELIMITER)
    if name is not None:
        return BookMarker(name=name)

    verse = _parse_verse(line)
    if verse is not None:
        return verse

    return Unrecognized()


__all__ = [
    "BookMarker",
    "ChapterMarker",
    "VerseRecord",
    "Unrecognized",
    "LineTag",
    "classify_line",
]
