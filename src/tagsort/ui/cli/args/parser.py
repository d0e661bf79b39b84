"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tagsort.config.config import Config
from tagsort.features.sorting import SortMode
from tagsort.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from tagsort.ui.cli.args.options import SortArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tagsort",
            description=(
                "tagsort - reconcile a music collection's directory layout with "
                "the tags embedded in its files."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "music_path",
            nargs="?",
            default=".",
            type=str,
            help="Collection root (defaults to the current directory)",
            metavar="MUSIC_PATH",
        )

        mode_group = parser.add_mutually_exclusive_group()
        _ = mode_group.add_argument(
            "--source-from-tags",
            dest="mode",
            action="store_const",
            const=SortMode.PATH_FROM_TAGS,
            help="Move files to artist/album/title paths derived from their tags",
        )
        _ = mode_group.add_argument(
            "--source-from-path",
            dest="mode",
            action="store_const",
            const=SortMode.TAGS_FROM_PATH,
            help="Rewrite tags from each file's artist/album/title path (default)",
        )
        parser.set_defaults(mode=SortMode.TAGS_FROM_PATH)

        _ = parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Just scan, print the planned changes and do nothing",
        )
        _ = parser.add_argument(
            "--no-prune",
            dest="prune_empty",
            action="store_false",
            help="Keep empty directories left behind after sorting",
        )
        _ = parser.add_argument(
            "--transcode",
            action="store_true",
            help="Convert lossless files to the compressed format afterwards",
        )
        _ = parser.add_argument(
            "--workers",
            type=int,
            help="Maximum number of concurrent encoder processes",
            metavar="N",
        )
        _ = parser.add_argument(
            "--bitrate",
            type=str,
            help="Target bitrate for transcoded files (e.g. 320k)",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> SortArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            SortArgs: Processed command line arguments.

        Raises:
            SystemExit: If the collection root doesn't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        music_path = Path(parsed_args.music_path)
        if not music_path.exists() or not music_path.is_dir():
            logger.error("Music path does not exist or is not a directory: %s", music_path)
            sys.exit(1)

        workers: int | None = parsed_args.workers
        if workers is not None and workers <= 0:
            logger.error("Workers must be a positive integer; received %s", workers)
            sys.exit(1)

        return SortArgs(
            music_path=music_path.resolve(),
            mode=parsed_args.mode,
            dry_run=parsed_args.dry_run,
            prune_empty=parsed_args.prune_empty,
            transcode=parsed_args.transcode,
            workers=workers,
            bitrate=parsed_args.bitrate,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
