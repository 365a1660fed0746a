#!/usr/bin/env python3
"""
Pure domain layer for text splitting.

This module provides the core splitting logic, independent of the CLI and
settings layers.
"""

from textsplit.chunking.domain.entities.chunk import TextChunk
from textsplit.chunking.domain.entities.chunk_collection import ChunkCollection
from textsplit.chunking.domain.exceptions import (
    ChunkingDomainError,
    InvalidConfigurationError,
    OverlapConfigurationError,
)
from textsplit.chunking.domain.value_objects.chunk_config import SplitConfig
from textsplit.chunking.domain.value_objects.separators import DEFAULT_SEPARATORS
from textsplit.chunking.domain.value_objects.text_position import TextPosition

__all__ = [
    # Entities
    "TextChunk",
    "ChunkCollection",
    # Value Objects
    "SplitConfig",
    "TextPosition",
    "DEFAULT_SEPARATORS",
    # Exceptions
    "ChunkingDomainError",
    "InvalidConfigurationError",
    "OverlapConfigurationError",
]
