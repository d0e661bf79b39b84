"""Command execution package for CLI."""

from tagsort.ui.cli.commands.sort import SortCommand

__all__ = ["SortCommand"]
