"""Command line argument handling package."""

from tagsort.ui.cli.args.parser import ArgumentParser
from tagsort.ui.cli.args.options import SortArgs

__all__ = ["ArgumentParser", "SortArgs"]
