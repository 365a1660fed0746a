#!/usr/bin/env python3
"""
ChunkCollection entity representing the result of one split call.

This module defines a read-only collection that pairs the chunks with the
normalized source text their positions refer to, and answers coverage and
statistics questions about them.
"""

from collections.abc import Iterator, Sequence
from typing import Any

from textsplit.chunking.domain.entities.chunk import TextChunk
from textsplit.chunking.domain.value_objects.separators import resolve_separators
from textsplit.chunking.types import LineEnding


class ChunkCollection:
    """
    Entity representing the chunks of a single document.

    Positions of the contained chunks refer to ``source_text``, the
    LF-normalized document. Regions not covered by any chunk are separators
    the splitter dropped while descending the hierarchy.
    """

    def __init__(
        self,
        source_text: str,
        chunks: Sequence[TextChunk],
        line_ending: LineEnding = LineEnding.LF,
        separators: Sequence[str] | None = None,
    ) -> None:
        """
        Initialize a chunk collection for a document.

        Args:
            source_text: The normalized text that was split
            chunks: Chunks in document order
            line_ending: Line ending detected in the original document
            separators: Hierarchy the chunks were split with; None selects the default
        """
        self._source_text = source_text
        self._chunks = list(chunks)
        self._line_ending = line_ending
        self._separators = tuple(sep for sep in resolve_separators(separators) if sep)

    @property
    def source_text(self) -> str:
        """Get the normalized source text."""
        return self._source_text

    @property
    def line_ending(self) -> LineEnding:
        """Get the line ending detected in the original document."""
        return self._line_ending

    @property
    def chunk_count(self) -> int:
        """Get the number of chunks in the collection."""
        return len(self._chunks)

    def get_chunks(self) -> list[TextChunk]:
        """Get all chunks in order."""
        return self._chunks.copy()

    def get_texts(self) -> list[str]:
        """Get the final text of every chunk in order."""
        return [chunk.text for chunk in self._chunks]

    def get_chunk_by_index(self, index: int) -> TextChunk | None:
        """
        Get a chunk by its index.

        Args:
            index: The chunk index (0-based)

        Returns:
            The chunk if found, None otherwise
        """
        for chunk in self._chunks:
            if chunk.chunk_index == index:
                return chunk
        return None

    def get_chunk_at_position(self, offset: int) -> TextChunk | None:
        """
        Get the chunk whose own content covers a character offset.

        Args:
            offset: 0-based offset in the normalized source text

        Returns:
            The covering chunk, or None if the offset falls in a gap
        """
        for chunk in self._chunks:
            if chunk.start_position <= offset < chunk.end_position:
                return chunk
        return None

    def get_chunks_in_range(self, start_offset: int, end_offset: int) -> list[TextChunk]:
        """
        Get all chunks that overlap with the given character range.

        Args:
            start_offset: Start position in source text
            end_offset: End position in source text (exclusive)

        Returns:
            List of chunks that overlap the range
        """
        return [
            chunk
            for chunk in self._chunks
            if chunk.start_position < end_offset and chunk.end_position > start_offset
        ]

    def find_gaps(self) -> list[tuple[int, int]]:
        """
        Find gaps in text coverage.

        Returns:
            List of (start, end) tuples representing uncovered regions
        """
        if not self._chunks:
            return [(0, len(self._source_text))] if self._source_text else []

        gaps = []
        last_end = 0

        for chunk in self._chunks:
            if chunk.start_position > last_end:
                gaps.append((last_end, chunk.start_position))
            last_end = max(last_end, chunk.end_position)

        # Check for gap at the end
        if last_end < len(self._source_text):
            gaps.append((last_end, len(self._source_text)))

        return gaps

    def calculate_coverage(self) -> float:
        """
        Calculate text coverage.

        Returns:
            Fraction of source text covered by chunk content (0.0 to 1.0)
        """
        total_chars = len(self._source_text)
        if total_chars == 0:
            return 0.0

        uncovered = sum(end - start for start, end in self.find_gaps())
        return (total_chars - uncovered) / total_chars

    def calculate_size_statistics(self) -> dict[str, float]:
        """
        Calculate statistics about chunk sizes.

        Returns:
            Dictionary with size statistics in characters
        """
        if not self._chunks:
            return {
                "average_chars": 0.0,
                "max_chars": 0,
                "min_chars": 0,
                "total_chars": 0,
            }

        char_counts = [chunk.character_count for chunk in self._chunks]

        return {
            "average_chars": sum(char_counts) / len(char_counts),
            "max_chars": max(char_counts),
            "min_chars": min(char_counts),
            "total_chars": sum(char_counts),
        }

    def calculate_overlap_statistics(self) -> dict[str, float]:
        """
        Calculate statistics about prepended overlaps.

        Returns:
            Dictionary with overlap statistics
        """
        overlaps = [len(chunk.overlap_text) for chunk in self._chunks if chunk.overlap_text]

        if not overlaps:
            return {
                "average_overlap": 0.0,
                "max_overlap": 0,
                "min_overlap": 0,
                "total_overlap_chars": 0,
            }

        return {
            "average_overlap": sum(overlaps) / len(overlaps),
            "max_overlap": max(overlaps),
            "min_overlap": min(overlaps),
            "total_overlap_chars": sum(overlaps),
        }

    def count_separators(self) -> dict[str, int]:
        """Count how many chunks each separator produced."""
        counts: dict[str, int] = {}
        for chunk in self._chunks:
            counts[chunk.separator_used] = counts.get(chunk.separator_used, 0) + 1
        return counts

    def validate_completeness(self) -> tuple[bool, list[str]]:
        """
        Validate the collection for ordering and consistency.

        A gap is reported as lost content unless it is made up entirely of
        separators from the hierarchy, which the splitter drops at cuts.

        Returns:
            Tuple of (is_valid, list_of_issues)
        """
        issues = []

        # Check indices
        actual_indices = [chunk.chunk_index for chunk in self._chunks]
        if actual_indices != list(range(len(self._chunks))):
            issues.append(f"Chunk indices out of sequence: {actual_indices}")

        # Check ordering and bounds
        previous_start = 0
        for chunk in self._chunks:
            if chunk.start_position < previous_start:
                issues.append(f"Chunk {chunk.chunk_index} starts before its predecessor")
            if chunk.end_position > len(self._source_text):
                issues.append(
                    f"Chunk {chunk.chunk_index} end position ({chunk.end_position}) "
                    f"exceeds source text length ({len(self._source_text)})"
                )
            previous_start = chunk.start_position

        # Check that gaps only hold dropped separator text
        for start, end in self.find_gaps():
            gap = self._source_text[start:end]
            if not self._is_separator_run(gap):
                issues.append(f"Content lost between offsets {start} and {end}: {gap!r}")

        return len(issues) == 0, issues

    def _is_separator_run(self, gap: str) -> bool:
        """Check whether ``gap`` is a concatenation of hierarchy separators."""
        # Adjacent cuts at different levels can leave several separators in one gap
        reachable = [True] + [False] * len(gap)
        for index in range(len(gap)):
            if not reachable[index]:
                continue
            for separator in self._separators:
                if gap.startswith(separator, index):
                    reachable[index + len(separator)] = True
        return reachable[len(gap)]

    def get_statistics(self) -> dict[str, Any]:
        """Summarize the collection for reporting."""
        return {
            "chunk_count": self.chunk_count,
            "source_length": len(self._source_text),
            "line_ending": self._line_ending.label,
            "coverage": self.calculate_coverage(),
            "gaps": [list(gap) for gap in self.find_gaps()],
            "separators": self.count_separators(),
            "sizes": self.calculate_size_statistics(),
            "overlap": self.calculate_overlap_statistics(),
        }

    def __iter__(self) -> Iterator[TextChunk]:
        """Iterate over chunks in order."""
        return iter(self._chunks)

    def __len__(self) -> int:
        """Get the number of chunks."""
        return len(self._chunks)

    def __repr__(self) -> str:
        """String representation of the collection."""
        return f"ChunkCollection(chunks={self.chunk_count}, coverage={self.calculate_coverage():.1%})"
