#!/usr/bin/env python3
"""
Line ending detection and normalization.

Splitting always runs on LF-normalized text. The dominant convention of the
source document is detected up front and written back into the text fields of
the finished chunks.
"""

from collections.abc import Iterable

from textsplit.chunking.domain.entities.chunk import TextChunk
from textsplit.chunking.types import LineEnding


def detect_line_ending(text: str) -> LineEnding:
    """
    Detect the line ending style used in the input text.

    CRLF is checked first as it contains both CR and LF. Text without any line
    break defaults to LF.

    Args:
        text: The text to analyze

    Returns:
        The detected line ending
    """
    if "\r\n" in text:
        return LineEnding.CRLF

    if "\r" in text:
        return LineEnding.CR

    return LineEnding.LF


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and bare CR line breaks to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def restore_line_endings(chunks: Iterable[TextChunk], line_ending: LineEnding) -> None:
    """
    Rewrite LF breaks in every text field of ``chunks`` to ``line_ending``.

    Positions are left untouched; they keep referring to the normalized text.
    """
    if line_ending is LineEnding.LF:
        return

    for chunk in chunks:
        chunk.text = chunk.text.replace("\n", line_ending.value)
        chunk.overlap_text = chunk.overlap_text.replace("\n", line_ending.value)
        chunk.chunk_text = chunk.chunk_text.replace("\n", line_ending.value)
