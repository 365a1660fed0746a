"""Recursive, separator-aware text splitting.

Two entry points cover most uses::

    >>> from textsplit import split, split_with_metadata
    >>> split("aaaaaaaaaa", chunk_size=3, separators=[""])
    ['aaa', 'aaa', 'aaa', 'a']

``split_with_metadata`` returns :class:`TextChunk` records with overlap,
offset and line/column information. Use :class:`RecursiveTextSplitter` to
validate the arguments once and split many documents.
"""

from collections.abc import Sequence

from textsplit.chunking.domain.entities.chunk import TextChunk
from textsplit.chunking.domain.entities.chunk_collection import ChunkCollection
from textsplit.chunking.domain.exceptions import (
    ChunkingDomainError,
    InvalidConfigurationError,
    OverlapConfigurationError,
)
from textsplit.chunking.domain.value_objects.chunk_config import SplitConfig
from textsplit.chunking.domain.value_objects.separators import DEFAULT_SEPARATORS
from textsplit.chunking.unified.recursive_strategy import RecursiveTextSplitter


def split(
    text: str | None,
    chunk_size: int,
    chunk_overlap: int = 0,
    separators: Sequence[str] | None = None,
) -> list[str]:
    """
    Recursively split text into chunks, returning only the text content.

    Args:
        text: The input text to split
        chunk_size: Maximum size of each chunk in characters
        chunk_overlap: Characters to overlap between consecutive chunks
        separators: Custom separator hierarchy; None or empty uses the default

    Returns:
        Chunk texts in document order

    Raises:
        InvalidConfigurationError: If chunk_size is not positive, chunk_overlap is
            negative, or chunk_overlap is not less than chunk_size
    """
    return RecursiveTextSplitter(chunk_size, chunk_overlap, separators).split(text)


def split_with_metadata(
    text: str | None,
    chunk_size: int,
    chunk_overlap: int = 0,
    separators: Sequence[str] | None = None,
) -> list[TextChunk]:
    """
    Recursively split text into chunks with overlap and position metadata.

    Args:
        text: The input text to split
        chunk_size: Maximum size of each chunk in characters
        chunk_overlap: Characters to overlap between consecutive chunks
        separators: Custom separator hierarchy; None or empty uses the default

    Returns:
        Chunks in document order

    Raises:
        InvalidConfigurationError: If the arguments are invalid
    """
    return RecursiveTextSplitter(chunk_size, chunk_overlap, separators).split_with_metadata(text)


__all__ = [
    "DEFAULT_SEPARATORS",
    "ChunkCollection",
    "ChunkingDomainError",
    "InvalidConfigurationError",
    "OverlapConfigurationError",
    "RecursiveTextSplitter",
    "SplitConfig",
    "TextChunk",
    "split",
    "split_with_metadata",
]
