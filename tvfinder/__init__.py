"""Building blocks for a terminal fuzzy finder: input editing, highlight-aware truncation, shell, file and clipboard helpers."""

__version__ = "0.11.9"