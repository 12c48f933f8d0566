"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol


class CorpusSourcePort(Protocol):
    """Port exposing the raw bytes of a corpus asset."""

    encoding: str

    def read_bytes(self) -> bytes:
        """Return the undecoded corpus content."""
        ...

    def describe(self) -> str:
        """Return a short human-readable location for logs and errors."""
        ...


class RandomSourcePort(Protocol):
    """Port exposing a uniform integer draw over ``[0, stop)``."""

    def randrange(self, stop: int) -> int:
        """Return a uniformly distributed integer in ``[0, stop)``."""
        ...


__all__ = ["CorpusSourcePort", "RandomSourcePort"]
