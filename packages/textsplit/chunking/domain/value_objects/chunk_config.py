#!/usr/bin/env python3
"""
Immutable split configuration value object.

This module defines the configuration for one split call with built-in
validation, so invalid arguments are rejected before any text is touched.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from textsplit.chunking.domain.exceptions import InvalidConfigurationError, OverlapConfigurationError
from textsplit.chunking.domain.value_objects.separators import DEFAULT_SEPARATORS, resolve_separators


@dataclass(frozen=True)
class SplitConfig:
    """
    Immutable configuration for recursive splitting.

    Sizes are measured in characters of the line-ending normalized text.
    ``separators`` is always stored as a tuple; ``None`` or an empty sequence
    selects :data:`DEFAULT_SEPARATORS`.
    """

    chunk_size: int
    chunk_overlap: int = 0
    separators: Sequence[str] | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate configuration and freeze the separator hierarchy."""
        if self.chunk_size <= 0:
            raise InvalidConfigurationError(
                "Chunk size must be positive",
                {"chunk_size": self.chunk_size},
            )

        if self.chunk_overlap < 0:
            raise InvalidConfigurationError(
                "Chunk overlap cannot be negative",
                {"chunk_overlap": self.chunk_overlap},
            )

        if self.chunk_overlap >= self.chunk_size:
            raise OverlapConfigurationError(self.chunk_overlap, self.chunk_size)

        object.__setattr__(self, "separators", resolve_separators(self.separators))

    @property
    def uses_default_separators(self) -> bool:
        """Check whether the built-in hierarchy is in effect."""
        return self.separators == DEFAULT_SEPARATORS

    def estimate_chunks(self, content_length: int) -> int:
        """
        Estimate the number of chunks for a document of the given length.

        This is a lower bound: separator boundaries usually leave chunks short
        of ``chunk_size``.

        Args:
            content_length: Length of the normalized document in characters

        Returns:
            Estimated chunk count
        """
        if content_length <= 0:
            return 0
        return -(-content_length // self.chunk_size)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary representation of configuration
        """
        return {
            "chunk_size": self.chunk_size,
            "chunk_overlap": self.chunk_overlap,
            "separators": list(self.separators or ()),
        }
