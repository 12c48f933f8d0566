"""Render selected verses for display."""

from __future__ import annotations

from random_verse.services.selection import SelectedVerse


def format_verse(selected: SelectedVerse) -> str:
    """Return ``<number>. <text> [<book>:<chapter>]``."""
    return (
        f"{selected.verse.number}. {selected.verse.text} "
        f"[{selected.book.name}:{selected.chapter.number}]"
    )


__all__ = ["format_verse"]
