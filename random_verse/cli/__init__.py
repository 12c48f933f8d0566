"""CLI entry point for random-verse."""

from random_verse.cli.commands import app as main_app


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
