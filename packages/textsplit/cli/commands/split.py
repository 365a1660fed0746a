"""Print the chunks of a document."""

from __future__ import annotations

import json
import logging

import click

from textsplit.cli.commands.options import build_splitter, read_document, splitter_options

logger = logging.getLogger(__name__)


@click.command()
@splitter_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Plain chunk texts or JSON records with metadata",
)
def split(
    path: str,
    chunk_size: int,
    chunk_overlap: int,
    separators: tuple[str, ...],
    encoding: str,
    output_format: str,
) -> None:
    """Split the document at PATH ('-' for stdin) and print its chunks."""
    splitter = build_splitter(chunk_size, chunk_overlap, separators)
    chunks = splitter.split_with_metadata(read_document(path, encoding))
    logger.info(f"Produced {len(chunks)} chunks from {path}")

    if output_format == "json":
        click.echo(json.dumps([chunk.to_dict() for chunk in chunks], ensure_ascii=False, indent=2))
        return

    for chunk in chunks:
        click.echo(
            f"--- chunk {chunk.chunk_index} "
            f"[{chunk.start_line}:{chunk.start_column}-{chunk.end_line}:{chunk.end_column}] ---"
        )
        click.echo(chunk.text)
