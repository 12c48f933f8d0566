"""Core exception types shared across layers."""


class CorpusLoadError(Exception):
    """Raised when the corpus asset cannot be read or decoded as configured."""


class EmptyContainerError(LookupError):
    """Raised when random selection reaches a corpus, book, or chapter with no children."""

    def __init__(self, container: str, name: str | None = None) -> None:
        self.container = container
        self.name = name
        if name is None:
            message = f"cannot select from an empty {container}"
        else:
            message = f"cannot select from empty {container} '{name}'"
        super().__init__(message)


__all__ = [
    "CorpusLoadError",
    "EmptyContainerError",
]
