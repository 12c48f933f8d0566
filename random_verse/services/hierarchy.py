"""Fold classified corpus lines into a Book → Chapter → Verse tree.

The builder keeps at most one open book and one open chapter. Children are
appended to their parent when the parent's next boundary arrives (or at end of
stream), so no back-references are needed. Orphaned chapters (no open book)
and orphaned verses (no open chapter) are dropped without error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from random_verse.core.lines import (
    BookMarker,
    ChapterMarker,
    LineTag,
    VerseRecord,
    classify_line,
)
from random_verse.core.models import Book, Chapter, Corpus, Verse


@dataclass(slots=True)
class ParseContext:
    """Corpus under construction plus the currently open book and chapter."""

    corpus: Corpus = field(default_factory=Corpus)
    book: Optional[Book] = None
    chapter: Optional[Chapter] = None


def _close_chapter(context: ParseContext) -> None:
    chapter, context.chapter = context.chapter, None
    if chapter is not None and context.book is not None:
        context.book.chapters.append(chapter)


def _close_book(context: ParseContext) -> None:
    _close_chapter(context)
    book, context.book = context.book, None
    if book is not None:
        context.corpus.books.append(book)


def advance(context: ParseContext, tag: LineTag) -> ParseContext:
    """Apply one classified line to ``context`` and return it."""
    if isinstance(tag, BookMarker):
        _close_book(context)
        context.book = Book(name=tag.name)
    elif isinstance(tag, ChapterMarker):
        _close_chapter(context)
        context.chapter = Chapter(number=tag.label)
    elif isinstance(tag, VerseRecord):
        if context.chapter is not None:
            context.chapter.verses.append(Verse(number=tag.number, text=tag.text))
    return context


def finish(context: ParseContext) -> Corpus:
    """Close any open chapter and book and return the completed corpus."""
    _close_book(context)
    return context.corpus


def build_corpus(lines: Iterable[str]) -> Corpus:
    """Build a corpus from raw lines in a single pass.

    Empty lines are skipped before trimming; every other line is trimmed of
    surrounding whitespace and classified.
    """
    context = ParseContext()
    for line in lines:
        if not line:
            continue
        advance(context, classify_line(line.strip()))
    return finish(context)


def parse_corpus(text: str) -> Corpus:
    r"""Split decoded corpus text into lines and build the tree.

    Lines break on ``\n`` only (one trailing ``\r`` removed); other Unicode
    line separators stay inside the verse text.
    """
    return build_corpus(line.removesuffix("\r") for line in text.split("\n"))


__all__ = ["ParseContext", "advance", "finish", "build_corpus", "parse_corpus"]
