"""Infrastructure adapter exports."""

from random_verse.core.exceptions import CorpusLoadError  # noqa: F401

from .corpus_source import (
    CorpusFileSource,
    PackagedCorpusSource,
    default_corpus_source,
    load_corpus,
)

__all__ = [
    "CorpusFileSource",
    "PackagedCorpusSource",
    "CorpusLoadError",
    "default_corpus_source",
    "load_corpus",
]
