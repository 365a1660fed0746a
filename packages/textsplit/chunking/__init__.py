#!/usr/bin/env python3
"""
Chunking package for text splitting.

This package provides pure domain logic for recursively splitting text
documents into bounded, position-annotated chunks.
"""
