"""Options shared by the splitting commands."""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from textsplit import config
from textsplit.chunking.domain.exceptions import InvalidConfigurationError
from textsplit.chunking.unified.recursive_strategy import RecursiveTextSplitter

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "f": "\f", "\\": "\\"}
_ESCAPE_PATTERN = re.compile(r"\\(.)")


def unescape_separator(value: str) -> str:
    """Turn backslash escapes typed on the command line into characters."""
    return _ESCAPE_PATTERN.sub(lambda match: _ESCAPES.get(match.group(1), match.group(0)), value)


def read_document(path: str, encoding: str) -> str:
    """Read a document without translating its line endings."""
    if path == "-":
        data = click.get_binary_stream("stdin").read()
    else:
        data = Path(path).read_bytes()
    return data.decode(encoding)


def splitter_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the document and splitting options to a command."""
    decorators = [
        click.argument("path", type=click.Path(exists=True, dir_okay=False, allow_dash=True)),
        click.option(
            "--chunk-size",
            "-s",
            type=int,
            default=lambda: config.settings.DEFAULT_CHUNK_SIZE,
            show_default="from TEXTSPLIT_DEFAULT_CHUNK_SIZE",
            help="Maximum characters per chunk before overlap",
        ),
        click.option(
            "--chunk-overlap",
            "-o",
            type=int,
            default=lambda: config.settings.DEFAULT_CHUNK_OVERLAP,
            show_default="from TEXTSPLIT_DEFAULT_CHUNK_OVERLAP",
            help="Maximum characters carried over from the previous chunk",
        ),
        click.option(
            "--separator",
            "separators",
            multiple=True,
            help="Separator, highest priority first; repeat for a hierarchy. Escapes such as \\n are honoured",
        ),
        click.option("--encoding", default="utf-8", show_default=True, help="Document encoding"),
    ]
    for decorator in reversed(decorators):
        command = decorator(command)
    return command


def build_splitter(chunk_size: int, chunk_overlap: int, separators: tuple[str, ...]) -> RecursiveTextSplitter:
    """Create a splitter, reporting invalid arguments as usage errors."""
    try:
        return RecursiveTextSplitter(
            chunk_size,
            chunk_overlap,
            [unescape_separator(separator) for separator in separators],
        )
    except InvalidConfigurationError as e:
        raise click.UsageError(e.message) from e
