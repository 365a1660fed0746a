#!/usr/bin/env python3
"""
Domain entities for text splitting.

Entities represent the chunks produced by a split call and the collection
that groups them with their source text.
"""

from textsplit.chunking.domain.entities.chunk import TextChunk
from textsplit.chunking.domain.entities.chunk_collection import ChunkCollection

__all__ = ["ChunkCollection", "TextChunk"]
