#!/usr/bin/env python3
"""
Splitting pipeline.

This module wires the domain services into a single reusable splitter.
"""

from textsplit.chunking.unified.recursive_strategy import RecursiveTextSplitter

__all__ = ["RecursiveTextSplitter"]
