#!/usr/bin/env python3
"""
Word-safe overlap between consecutive chunks.

The tail of each chunk's final text is prepended to the next chunk. The tail
is trimmed so it starts right after a whitespace, punctuation, bracket or quote
character, which keeps the overlap from beginning in the middle of a word.
"""

from collections.abc import Sequence
from dataclasses import replace

from textsplit.chunking.domain.entities.chunk import TextChunk

BOUNDARY_CHARACTERS = frozenset(
    " \n\r\t\f"  # Whitespace characters
    ".,;:!?"  # Punctuation marks
    "()[]{}"  # Brackets
    "\"'`"  # Quote characters
)


def get_word_safe_overlap(text: str, max_length: int) -> str:
    """
    Extract a word-safe overlap from the end of ``text``.

    Args:
        text: Source text to take the overlap from
        max_length: Maximum overlap length

    Returns:
        A suffix of ``text`` no longer than ``max_length``. It starts after the
        first boundary character of the candidate tail, or is the whole tail
        when no usable boundary exists.
    """
    if max_length <= 0 or not text.strip():
        return ""

    candidate = text[-max_length:]

    for index, char in enumerate(candidate):
        if char in BOUNDARY_CHARACTERS:
            # A boundary in last position would leave nothing to carry over
            if index < len(candidate) - 1:
                return candidate[index + 1 :]
            break

    return candidate


def apply_overlap(chunks: Sequence[TextChunk], chunk_overlap: int) -> list[TextChunk]:
    """
    Prepend a word-safe tail of each chunk to its successor.

    The first chunk is returned unchanged. Every later chunk is replaced by a
    new object whose ``text`` is ``overlap_text + chunk_text``; positions,
    separator and ``chunk_text`` keep their pre-overlap values. The overlap
    source is the previous chunk's final, already overlapped, text.

    Args:
        chunks: Raw chunks in document order
        chunk_overlap: Maximum characters to carry over

    Returns:
        New list of chunks with overlap applied
    """
    if not chunks:
        return []

    overlapped = [chunks[0]]

    for current in chunks[1:]:
        overlap = get_word_safe_overlap(overlapped[-1].text, chunk_overlap)
        overlapped.append(
            replace(
                current,
                text=overlap + current.chunk_text,
                overlap_text=overlap,
            )
        )

    return overlapped
