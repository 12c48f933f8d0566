"""Core models, configuration, and shared primitives."""
