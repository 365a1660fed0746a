#!/usr/bin/env python3
"""
Recursive text splitting pipeline.

This module combines the domain services into the full splitting pipeline:
line ending normalization, recursive splitting over the separator hierarchy,
optional word-safe overlap, index and line/column annotation, and restoration
of the original line endings.
"""

import logging
from collections.abc import Sequence

from textsplit.chunking.domain.entities.chunk import TextChunk
from textsplit.chunking.domain.entities.chunk_collection import ChunkCollection
from textsplit.chunking.domain.services.line_endings import (
    detect_line_ending,
    normalize_line_endings,
    restore_line_endings,
)
from textsplit.chunking.domain.services.overlap import apply_overlap
from textsplit.chunking.domain.services.position_mapper import PositionMapper
from textsplit.chunking.domain.services.recursive_splitter import split_recursively
from textsplit.chunking.domain.value_objects.chunk_config import SplitConfig

logger = logging.getLogger(__name__)


class RecursiveTextSplitter:
    """
    Recursive text splitter with semantic awareness and configurable overlap.

    The splitter prefers paragraph breaks, then sentence and clause
    boundaries, then words, and falls back to character slicing only when no
    separator fits. Arguments are validated on construction, so a splitter
    instance can be reused for any number of documents.
    """

    def __init__(
        self,
        chunk_size: int,
        chunk_overlap: int = 0,
        separators: Sequence[str] | None = None,
    ) -> None:
        """
        Initialize the splitter.

        Args:
            chunk_size: Maximum characters per chunk before overlap is added
            chunk_overlap: Maximum characters carried over from the previous chunk
            separators: Separator hierarchy; None or empty selects the default

        Raises:
            InvalidConfigurationError: If the arguments are invalid
        """
        self._config = SplitConfig(chunk_size, chunk_overlap, separators)

    @classmethod
    def from_config(cls, config: SplitConfig) -> "RecursiveTextSplitter":
        """Create a splitter from an existing configuration."""
        return cls(config.chunk_size, config.chunk_overlap, config.separators)

    @property
    def config(self) -> SplitConfig:
        """Get the validated configuration."""
        return self._config

    def split(self, text: str | None) -> list[str]:
        """
        Split text and return only the final chunk texts.

        Args:
            text: The document to split

        Returns:
            Chunk texts in document order, overlap included
        """
        return [chunk.text for chunk in self.split_with_metadata(text)]

    def split_with_metadata(self, text: str | None) -> list[TextChunk]:
        """
        Split text into chunks with overlap and position metadata.

        Args:
            text: The document to split

        Returns:
            Chunks in document order
        """
        return self.split_to_collection(text).get_chunks()

    def split_to_collection(self, text: str | None) -> ChunkCollection:
        """
        Split text and keep the normalized source alongside the chunks.

        Args:
            text: The document to split

        Returns:
            Collection of the chunks of ``text``
        """
        if not text:
            return ChunkCollection("", [], separators=self._config.separators)

        line_ending = detect_line_ending(text)
        normalized = normalize_line_endings(text)

        chunks = split_recursively(normalized, self._config.chunk_size, self._config.separators or ())

        if self._config.chunk_overlap > 0 and len(chunks) > 1:
            chunks = apply_overlap(chunks, self._config.chunk_overlap)

        mapper = PositionMapper(normalized)
        for index, chunk in enumerate(chunks):
            chunk.chunk_index = index
            mapper.annotate(chunk)

        restore_line_endings(chunks, line_ending)

        logger.debug(
            f"Split {len(normalized)} characters into {len(chunks)} chunks "
            f"(chunk_size={self._config.chunk_size}, chunk_overlap={self._config.chunk_overlap}, "
            f"line_ending={line_ending.label})"
        )
        return ChunkCollection(normalized, chunks, line_ending, self._config.separators)

    def estimate_chunks(self, content_length: int) -> int:
        """
        Estimate the number of chunks.

        Args:
            content_length: Length of content in characters

        Returns:
            Estimated chunk count (a lower bound)
        """
        return self._config.estimate_chunks(content_length)

    def __repr__(self) -> str:
        """String representation of the splitter."""
        return (
            f"{self.__class__.__name__}(chunk_size={self._config.chunk_size}, "
            f"chunk_overlap={self._config.chunk_overlap})"
        )
