#!/usr/bin/env python3
"""Line/column coordinate value object."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class TextPosition:
    """1-based line and column of a character offset."""

    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"Line must be at least 1, got {self.line}")
        if self.column < 1:
            raise ValueError(f"Column must be at least 1, got {self.column}")
