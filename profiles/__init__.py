"""Nullable-field profile model: people, a session registry and relation checks."""

__version__ = "0.1.0"
