"""Corpus source adapters: read, decode, and parse the scripture asset.

The default corpus ships inside the package as ``assets/bible.txt``. A file on
disk can be used instead by setting ``CORPUS_PATH``.
"""

from __future__ import annotations

import codecs
from importlib import resources
from pathlib import Path
from typing import Optional

from random_verse.core.config import config
from random_verse.core.exceptions import CorpusLoadError
from random_verse.core.logging import get_logger
from random_verse.core.models import Corpus
from random_verse.core.ports import CorpusSourcePort
from random_verse.services.hierarchy import parse_corpus

logger = get_logger(__name__)

PACKAGED_CORPUS = "bible.txt"
REPLACEMENT_CHAR = "�"


def decode_corpus(raw: bytes, encoding: str) -> str:
    """Decode ``raw`` lossily; undecodable sequences become U+FFFD."""
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise CorpusLoadError(f"unknown corpus encoding: {encoding}") from exc
    text = raw.decode(encoding, errors="replace")
    logger.debug(
        "Decoded corpus",
        extra={
            "encoding": encoding,
            "chars": len(text),
            "replacements": text.count(REPLACEMENT_CHAR),
        },
    )
    return text


class CorpusFileSource:
    """Corpus stored as a plain file on disk."""

    def __init__(self, path: Path, encoding: Optional[str] = None) -> None:
        self.path = Path(path)
        self.encoding = encoding or config.CORPUS_ENCODING

    def read_bytes(self) -> bytes:
        try:
            return self.path.read_bytes()
        except OSError as exc:
            raise CorpusLoadError(f"cannot read corpus file {self.path}: {exc}") from exc

    def describe(self) -> str:
        return str(self.path)


class PackagedCorpusSource:
    """Corpus bundled with the ``random_verse`` package."""

    def __init__(self, encoding: Optional[str] = None, resource: str = PACKAGED_CORPUS) -> None:
        self.resource = resource
        self.encoding = encoding or config.CORPUS_ENCODING

    def read_bytes(self) -> bytes:
        try:
            return resources.files("random_verse.assets").joinpath(self.resource).read_bytes()
        except (OSError, ModuleNotFoundError) as exc:
            raise CorpusLoadError(f"cannot read packaged corpus {self.resource}: {exc}") from exc

    def describe(self) -> str:
        return f"package:random_verse.assets/{self.resource}"


def default_corpus_source(
    path: Optional[Path] = None, encoding: Optional[str] = None
) -> CorpusSourcePort:
    """Return a file source for ``path`` (or ``CORPUS_PATH``), else the packaged asset."""
    corpus_path = path if path is not None else config.CORPUS_PATH
    if corpus_path is not None:
        return CorpusFileSource(corpus_path, encoding)
    return PackagedCorpusSource(encoding)


def load_corpus(source: Optional[CorpusSourcePort] = None) -> Corpus:
    """Read, decode, and parse a corpus in one synchronous pass."""
    source = source if source is not None else default_corpus_source()
    raw = source.read_bytes()
    logger.info("Loaded corpus from %s (%d bytes)", source.describe(), len(raw))
    corpus = parse_corpus(decode_corpus(raw, source.encoding))
    logger.info(
        "Parsed %d books, %d chapters, %d verses",
        len(corpus.books),
        corpus.chapter_count,
        corpus.verse_count,
    )
    return corpus


__all__ = [
    "CorpusFileSource",
    "PackagedCorpusSource",
    "decode_corpus",
    "default_corpus_source",
    "load_corpus",
]
