"""
Shared chunking types.

This module provides core type definitions that are used by both the domain
services and the outer layers (public functions, CLI) without creating
circular imports.
"""

from enum import Enum


class LineEnding(str, Enum):
    """Line ending conventions recognised in source documents."""

    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"

    @property
    def label(self) -> str:
        """Human readable name, used in logs and statistics."""
        return self.name


class SeparatorTag(str, Enum):
    """Markers stored in ``separator_used`` when no configured separator applies."""

    CHARACTER = "char"  # Fixed-size character slicing
    EXHAUSTED = "none"  # Separator hierarchy ran out before the text fit
