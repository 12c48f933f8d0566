"""Tests for reading and decoding corpus assets."""

from __future__ import annotations

from pathlib import Path

import pytest

from random_verse.adapters import corpus_source
from random_verse.adapters.corpus_source import (
    CorpusFileSource,
    PackagedCorpusSource,
    decode_corpus,
    default_corpus_source,
    load_corpus,
)
from random_verse.core.exceptions import CorpusLoadError

# pylint: disable=missing-function-docstring

CP1251_SAMPLE = "== Бытие ==\n=== 1 ===\n1 В начале сотворил Бог небо и землю.\n"


class InMemorySource:
    def __init__(self, raw: bytes, encoding: str = "cp1251") -> None:
        self.raw = raw
        self.encoding = encoding

    def read_bytes(self) -> bytes:
        return self.raw

    def describe(self) -> str:
        return "memory"


def test_decode_cp1251() -> None:
    assert decode_corpus(CP1251_SAMPLE.encode("cp1251"), "cp1251") == CP1251_SAMPLE


def test_decode_replaces_undecodable_bytes() -> None:
    # 0x98 is unassigned in Windows-1251
    assert decode_corpus(b"1 a\x98b", "cp1251") == "1 a�b"


def test_decode_unknown_encoding_raises() -> None:
    with pytest.raises(CorpusLoadError):
        decode_corpus(b"", "no-such-codec")


def test_load_corpus_from_memory_source() -> None:
    corpus = load_corpus(InMemorySource(CP1251_SAMPLE.encode("cp1251")))
    assert corpus.books[0].name == "Бытие"
    assert corpus.books[0].chapters[0].verses[0].text == "В начале сотворил Бог небо и землю."


def test_file_source_reads_bytes(tmp_path: Path) -> None:
    path = tmp_path / "bible.txt"
    path.write_bytes(CP1251_SAMPLE.encode("cp1251"))
    corpus = load_corpus(CorpusFileSource(path, "cp1251"))
    assert corpus.verse_count == 1


def test_file_source_missing_file_raises(tmp_path: Path) -> None:
    source = CorpusFileSource(tmp_path / "missing.txt")
    with pytest.raises(CorpusLoadError) as excinfo:
        source.read_bytes()
    assert "missing.txt" in str(excinfo.value)


def test_packaged_corpus_parses_into_non_empty_tree() -> None:
    corpus = load_corpus(PackagedCorpusSource())
    assert corpus.books, "bundled corpus should contain books"
    assert all(book.chapters for book in corpus.books)
    assert all(chapter.verses for book in corpus.books for chapter in book.chapters)
    assert corpus.books[0].name == "Genesis"
    assert corpus.books[0].chapters[0].verses[0].text == (
        "In the beginning God created the heaven and the earth."
    )


def test_default_source_prefers_explicit_path(tmp_path: Path) -> None:
    source = default_corpus_source(tmp_path / "x.txt", "utf-8")
    assert isinstance(source, CorpusFileSource)
    assert source.encoding == "utf-8"


def test_default_source_uses_configured_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(corpus_source.config, "CORPUS_PATH", tmp_path / "configured.txt")
    source = default_corpus_source()
    assert isinstance(source, CorpusFileSource)
    assert source.describe().endswith("configured.txt")


def test_default_source_falls_back_to_package(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(corpus_source.config, "CORPUS_PATH", None)
    monkeypatch.setattr(corpus_source.config, "CORPUS_ENCODING", "utf-8")
    source = default_corpus_source()
    assert isinstance(source, PackagedCorpusSource)
    assert source.encoding == "utf-8"
