#!/usr/bin/env python3
"""
Character offset to line/column mapping.

Lines and columns are 1-based. The line of an offset is one plus the number
of newlines strictly before it; the column counts from the character after the
nearest preceding newline, or from the start of the document.
"""

import re
from bisect import bisect_left

from textsplit.chunking.domain.entities.chunk import TextChunk
from textsplit.chunking.domain.value_objects.text_position import TextPosition

_NEWLINE = re.compile("\n")


class PositionMapper:
    """
    Map offsets of one normalized document to line/column coordinates.

    Newline offsets are collected once so each lookup is a binary search.
    """

    def __init__(self, text: str) -> None:
        """
        Initialize the mapper for a document.

        Args:
            text: LF-normalized document text
        """
        self._length = len(text)
        self._newlines = [match.start() for match in _NEWLINE.finditer(text)]

    @property
    def line_count(self) -> int:
        """Number of lines in the document."""
        return len(self._newlines) + 1

    def position_at(self, offset: int) -> TextPosition:
        """
        Get the line/column of an offset.

        Args:
            offset: 0-based offset, ``len(text)`` allowed for exclusive ends

        Returns:
            1-based line and column

        Raises:
            ValueError: If the offset lies outside the document
        """
        if not 0 <= offset <= self._length:
            raise ValueError(f"Offset {offset} outside document of length {self._length}")

        newlines_before = bisect_left(self._newlines, offset)
        previous_newline = self._newlines[newlines_before - 1] if newlines_before else -1
        return TextPosition(line=newlines_before + 1, column=offset - previous_newline)

    def annotate(self, chunk: TextChunk) -> None:
        """Fill the line/column fields of ``chunk`` from its positions."""
        start = self.position_at(chunk.start_position)
        end = self.position_at(chunk.end_position)
        chunk.start_line = start.line
        chunk.start_column = start.column
        chunk.end_line = end.line
        chunk.end_column = end.column


def offset_to_line_column(text: str, offset: int) -> TextPosition:
    """Map a single offset of ``text``; prefer :class:`PositionMapper` for repeated lookups."""
    return PositionMapper(text).position_at(offset)
