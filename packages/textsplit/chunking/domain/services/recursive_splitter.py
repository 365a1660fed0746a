#!/usr/bin/env python3
"""
Recursive separator-driven text splitting.

The splitter walks an ordered separator hierarchy. At each level it cuts the
text at the rightmost separator occurrence that keeps the chunk within
``chunk_size``; segments that cannot be cut at the current level are handed
to the next, finer separator. The empty separator, or running out of
separators, falls back to fixed-size character slicing, so every emitted chunk
is at most ``chunk_size`` characters long.

Recursion depth is bounded by the length of the hierarchy because every
descent advances ``separator_index``.
"""

import logging
from collections.abc import Sequence

from textsplit.chunking.domain.entities.chunk import TextChunk
from textsplit.chunking.types import SeparatorTag

logger = logging.getLogger(__name__)


def split_recursively(
    text: str,
    chunk_size: int,
    separators: Sequence[str],
    separator_index: int = 0,
    base_position: int = 0,
) -> list[TextChunk]:
    """
    Recursively split text using a hierarchy of separators.

    Args:
        text: The (normalized) text to split
        chunk_size: Maximum characters per chunk
        separators: Separator hierarchy, most significant first
        separator_index: Current position in the hierarchy
        base_position: Offset of ``text`` within the outer document

    Returns:
        Raw chunks in document order, without overlap
    """
    chunks: list[TextChunk] = []

    # Base case: text fits in one chunk
    if len(text) <= chunk_size:
        if text:
            tag = separators[separator_index] if separator_index < len(separators) else SeparatorTag.EXHAUSTED.value
            chunks.append(TextChunk.from_segment(text, base_position, tag))
        return chunks

    # No more separators, or the hierarchy asks for characters
    if separator_index >= len(separators) or separators[separator_index] == "":
        return split_by_characters(text, chunk_size, base_position)

    separator = separators[separator_index]
    start = 0
    length = len(text)

    while start < length:
        # Remaining text fits in one chunk
        if length - start <= chunk_size:
            chunks.append(TextChunk.from_segment(text[start:], base_position + start, separator))
            break

        first_occurrence = text.find(separator, start)

        # Separator absent from the rest, try the next level
        if first_occurrence == -1:
            chunks.extend(
                split_recursively(text[start:], chunk_size, separators, separator_index + 1, base_position + start)
            )
            break

        # Rightmost occurrence ending within the size window
        split_at = text.rfind(separator, start, start + chunk_size)

        if split_at != -1:
            end = split_at + len(separator)
            chunks.append(TextChunk.from_segment(text[start:end], base_position + start, separator))
            start = end
            continue

        # Segment before the first occurrence is oversized; the separator itself is dropped
        if first_occurrence > start:
            chunks.extend(
                split_recursively(
                    text[start:first_occurrence],
                    chunk_size,
                    separators,
                    separator_index + 1,
                    base_position + start,
                )
            )
        start = first_occurrence + len(separator)

    return chunks


def split_by_characters(text: str, chunk_size: int, base_position: int = 0) -> list[TextChunk]:
    """
    Cut text into consecutive slices of ``chunk_size`` characters.

    Args:
        text: Text to slice
        chunk_size: Slice length; the last slice may be shorter
        base_position: Offset of ``text`` within the outer document

    Returns:
        Character-level chunks tagged ``"char"``
    """
    logger.debug(f"Character-level split of {len(text)} characters at offset {base_position}")
    return [
        TextChunk.from_segment(text[i : i + chunk_size], base_position + i, SeparatorTag.CHARACTER.value)
        for i in range(0, len(text), chunk_size)
    ]
