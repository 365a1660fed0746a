#!/usr/bin/env python3
"""
Domain-specific exceptions for text splitting.

These exceptions represent argument and business rule violations detected
before any text is processed. Once a configuration is accepted the splitting
pipeline cannot fail.
"""

from typing import Any


class ChunkingDomainError(Exception):
    """Base exception for all chunking domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional details."""
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidConfigurationError(ChunkingDomainError, ValueError):
    """Raised when split arguments violate business rules."""


class OverlapConfigurationError(InvalidConfigurationError):
    """Raised when the overlap is not strictly smaller than the chunk size."""

    def __init__(self, overlap: int, chunk_size: int) -> None:
        """Initialize with overlap information."""
        super().__init__(
            f"Chunk overlap {overlap} must be less than chunk size {chunk_size}",
            {"chunk_overlap": overlap, "chunk_size": chunk_size},
        )
        self.overlap = overlap
        self.chunk_size = chunk_size
