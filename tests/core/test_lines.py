"""Tests for corpus line classification."""

from __future__ import annotations

import pytest

from random_verse.core.lines import (
    BookMarker,
    ChapterMarker,
    Unrecognized,
    VerseRecord,
    classify_line,
)

# pylint: disable=missing-function-docstring


def test_spaced_book_marker_uses_fixed_offsets() -> None:
    assert classify_line("== Genesis ==") == BookMarker(name="Genesis")
    assert classify_line("== Song of Solomon ==") == BookMarker(name="Song of Solomon")


def test_spaced_chapter_marker_uses_fixed_offsets() -> None:
    assert classify_line("=== 1 ===") == ChapterMarker(label="1")
    assert classify_line("=== Prologue ===") == ChapterMarker(label="Prologue")


def test_unspaced_markers_keep_full_payload() -> None:
    assert classify_line("==Genesis==") == BookMarker(name="Genesis")
    assert classify_line("===1===") == ChapterMarker(label="1")


def test_chapter_marker_takes_priority_over_book_marker() -> None:
    tag = classify_line("===X===")
    assert isinstance(tag, ChapterMarker)
    assert tag.label == "X"


def test_only_one_separator_is_stripped() -> None:
    assert classify_line("==  Padded  ==") == BookMarker(name=" Padded ")


def test_cyrillic_book_name() -> None:
    assert classify_line("== Бытие ==") == BookMarker(name="Бытие")


def test_verse_record_keeps_text_verbatim() -> None:
    tag = classify_line("16 For God so loved the world,  that he gave")
    assert tag == VerseRecord(number=16, text="For God so loved the world,  that he gave")


def test_verse_record_with_empty_text() -> None:
    assert classify_line("3 ") == VerseRecord(number=3, text="")


@pytest.mark.parametrize(
    "line",
    [
        "",
        "Genesis",
        "1",
        "a1 text",
        "-1 negative",
        "1_000 underscored",
        "++1 doubled",
        "+ bare sign",
        "1.5 decimal",
        "====",
        "==",
        "= single =",
        "== unterminated",
    ],
)
def test_unrecognized_lines(line: str) -> None:
    assert classify_line(line) == Unrecognized()


def test_delimiter_runs_follow_fixed_offsets() -> None:
    assert classify_line("======") == BookMarker(name="")
    assert classify_line("=======") == ChapterMarker(label="")
    assert classify_line("===== X =====") == ChapterMarker(label="= X =")


def test_verse_number_accepts_leading_plus() -> None:
    assert classify_line("+1 text") == VerseRecord(number=1, text="text")


def test_verse_number_is_bounded_to_unsigned_32_bits() -> None:
    assert classify_line("4294967295 text") == VerseRecord(number=4294967295, text="text")
    assert classify_line("4294967296 text") == Unrecognized()
