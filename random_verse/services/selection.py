"""Uniform random verse selection over a parsed corpus."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

from random_verse.core.config import config
from random_verse.core.exceptions import EmptyContainerError
from random_verse.core.logging import get_logger
from random_verse.core.models import Book, Chapter, Corpus, Verse
from random_verse.core.ports import RandomSourcePort

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SelectedVerse:
    """A verse together with the book and chapter that cite it."""

    book: Book
    chapter: Chapter
    verse: Verse


def default_random_source() -> RandomSourcePort:
    """Return a ``random.Random`` seeded from configuration (or OS entropy)."""
    return random.Random(config.RANDOM_VERSE_SEED)


def _pick(items: Sequence[T], rng: RandomSourcePort, container: str, name: str | None) -> T:
    if not items:
        raise EmptyContainerError(container, name)
    return items[rng.randrange(len(items))]


def select_random_verse(
    corpus: Corpus, rng: Optional[RandomSourcePort] = None
) -> SelectedVerse:
    """Draw a book, then a chapter, then a verse, each uniformly at random.

    Raises:
        EmptyContainerError: if the corpus, the drawn book, or the drawn
            chapter has nothing to draw from.
    """
    source = rng if rng is not None else default_random_source()
    book = _pick(corpus.books, source, "corpus", None)
    chapter = _pick(book.chapters, source, "book", book.name)
    verse = _pick(chapter.verses, source, "chapter", f"{book.name}:{chapter.number}")
    logger.debug(
        "Selected verse %s:%s:%d", book.name, chapter.number, verse.number
    )
    return SelectedVerse(book=book, chapter=chapter, verse=verse)


__all__ = ["SelectedVerse", "default_random_source", "select_random_verse"]
