#!/usr/bin/env python3
"""
Domain services for text splitting.

Domain services encapsulate the stages of the splitting pipeline: line ending
normalization, recursive splitting, overlap and position mapping.
"""

from textsplit.chunking.domain.services.line_endings import (
    detect_line_ending,
    normalize_line_endings,
    restore_line_endings,
)
from textsplit.chunking.domain.services.overlap import apply_overlap, get_word_safe_overlap
from textsplit.chunking.domain.services.position_mapper import PositionMapper, offset_to_line_column
from textsplit.chunking.domain.services.recursive_splitter import split_by_characters, split_recursively

__all__ = [
    "PositionMapper",
    "apply_overlap",
    "detect_line_ending",
    "get_word_safe_overlap",
    "normalize_line_endings",
    "offset_to_line_column",
    "restore_line_endings",
    "split_by_characters",
    "split_recursively",
]
