#!/usr/bin/env python3
"""
Chunk entity representing a single piece of a split document.

Position convention: ``start_position`` is the 0-based offset of the first
character of ``chunk_text`` and ``end_position`` is exclusive, both measured
in the line-ending normalized document. Line and column numbers are 1-based.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class TextChunk:
    """
    A chunk produced by the recursive splitter.

    Instances are created by the splitter, replaced by the overlap pass and
    decorated in place with index and coordinates before being returned.
    Callers should treat returned chunks as read-only.
    """

    text: str  # Full text including overlap
    chunk_text: str  # Own content, without overlap
    start_position: int
    end_position: int
    separator_used: str
    overlap_text: str = ""
    chunk_index: int = 0
    start_line: int = 1
    start_column: int = 1
    end_line: int = 1
    end_column: int = 1

    def __post_init__(self) -> None:
        """Validate positional invariants."""
        if self.start_position < 0:
            raise ValueError(f"Start position must be non-negative, got {self.start_position}")

        if self.end_position < self.start_position:
            raise ValueError(
                f"End position ({self.end_position}) must not precede start position ({self.start_position})"
            )

    @classmethod
    def from_segment(cls, segment: str, start_position: int, separator_used: str) -> "TextChunk":
        """Create a raw, overlap-free chunk covering ``segment``."""
        return cls(
            text=segment,
            chunk_text=segment,
            start_position=start_position,
            end_position=start_position + len(segment),
            separator_used=separator_used,
        )

    @property
    def character_count(self) -> int:
        """Number of characters the chunk covers in the normalized document."""
        return self.end_position - self.start_position

    @property
    def has_overlap(self) -> bool:
        """Check if text from the previous chunk was prepended."""
        return bool(self.overlap_text)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    def __repr__(self) -> str:
        """String representation of the chunk."""
        preview = self.text[:50] + "..." if len(self.text) > 50 else self.text
        return (
            f"TextChunk(index={self.chunk_index}, "
            f"span={self.start_position}:{self.end_position}, "
            f"separator={self.separator_used!r}, "
            f"text={preview!r})"
        )
