"""Report statistics about how a document splits."""

from __future__ import annotations

import json

import click

from textsplit.cli.commands.options import build_splitter, read_document, splitter_options


@click.command()
@splitter_options
def stats(
    path: str,
    chunk_size: int,
    chunk_overlap: int,
    separators: tuple[str, ...],
    encoding: str,
) -> None:
    """Split the document at PATH ('-' for stdin) and print statistics as JSON."""
    splitter = build_splitter(chunk_size, chunk_overlap, separators)
    collection = splitter.split_to_collection(read_document(path, encoding))

    report = collection.get_statistics()
    report["config"] = splitter.config.to_dict()
    report["estimated_chunks"] = splitter.estimate_chunks(len(collection.source_text))

    is_complete, issues = collection.validate_completeness()
    report["complete"] = is_complete
    report["issues"] = issues

    click.echo(json.dumps(report, ensure_ascii=False, indent=2))
