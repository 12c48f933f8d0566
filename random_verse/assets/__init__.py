"""Bundled corpus data."""
