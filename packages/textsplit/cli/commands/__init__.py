"""Subcommands of the textsplit CLI."""
