#!/usr/bin/env python3
"""
Separator hierarchy value object.

The hierarchy is an ordered tuple of separator strings, most semantically
significant first. The empty string terminates the default hierarchy and
requests character-level splitting.
"""

from collections.abc import Sequence

DEFAULT_SEPARATORS: tuple[str, ...] = (
    "\n\n",  # Paragraph breaks
    ".\n",  # Sentence endings with newline
    "!\n",  # Exclamation with newline
    "?\n",  # Question with newline
    ":\n",  # Colon with newline
    ";\n",  # Semicolon with newline
    "\n",  # Line breaks
    ". ",  # Sentences
    "! ",  # Exclamation sentences
    "? ",  # Question sentences
    "; ",  # Semicolon clauses
    ", ",  # Comma clauses
    " ",  # Words
    "",  # Characters (last resort)
)


def resolve_separators(separators: Sequence[str] | None) -> tuple[str, ...]:
    """
    Freeze a caller-supplied hierarchy, falling back to the default.

    Args:
        separators: Ordered separators, or None/empty for the default hierarchy

    Returns:
        Immutable separator hierarchy
    """
    if not separators:
        return DEFAULT_SEPARATORS
    return tuple(separators)
