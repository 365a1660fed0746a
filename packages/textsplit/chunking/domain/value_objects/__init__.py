#!/usr/bin/env python3
"""
Value objects for the chunking domain.

Value objects are immutable objects that represent concepts in the domain
without identity.
"""

from textsplit.chunking.domain.value_objects.chunk_config import SplitConfig
from textsplit.chunking.domain.value_objects.separators import DEFAULT_SEPARATORS, resolve_separators
from textsplit.chunking.domain.value_objects.text_position import TextPosition

__all__ = ["DEFAULT_SEPARATORS", "SplitConfig", "TextPosition", "resolve_separators"]
