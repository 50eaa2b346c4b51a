"""Helpers for text patterns, number puzzles, list operations and string checks."""

__version__ = "0.1.0"
__all__ = ["arrays", "numeric", "patterns", "text"]