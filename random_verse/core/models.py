"""Core scripture tree shared across layers.

A ``Corpus`` owns its ``Book`` objects, each ``Book`` owns its ``Chapter``
objects, and each ``Chapter`` owns its ``Verse`` objects. The tree is built
once by the hierarchy builder and treated as read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


@dataclass(frozen=True, slots=True)
class Verse:
    """A numbered line of text within a chapter."""

    number: int
    text: str


@dataclass(slots=True)
class Chapter:
    """A labeled division within a book.

    ``number`` is the label exactly as it appeared in the marker line, so it
    is kept as a string (labels are not guaranteed to be numeric).
    """

    number: str
    verses: List[Verse] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Alias for ``number``."""
        return self.number


@dataclass(slots=True)
class Book:
    """A named top-level division holding chapters in source order."""

    name: str
    chapters: List[Chapter] = field(default_factory=list)

    @property
    def verse_count(self) -> int:
        return sum(len(chapter.verses) for chapter in self.chapters)


@dataclass(slots=True)
class Corpus:
    """The full parsed document."""

    books: List[Book] = field(default_factory=list)

    @property
    def chapter_count(self) -> int:
        return sum(len(book.chapters) for book in self.books)

    @property
    def verse_count(self) -> int:
        return sum(book.verse_count for book in self.books)

    def iter_verses(self) -> Iterator[Tuple[Book, Chapter, Verse]]:
        """Yield ``(book, chapter, verse)`` triples in source order."""
        for book in self.books:
            for chapter in book.chapters:
                for verse in chapter.verses:
                    yield book, chapter, verse


__all__ = ["Verse", "Chapter", "Book", "Corpus"]
