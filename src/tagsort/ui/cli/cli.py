"""Command line interface for tagsort."""

import sys
from typing import final

from tagsort.platform.logging import logger
from tagsort.ui.cli.args import ArgumentParser, SortArgs
from tagsort.ui.cli.commands import SortCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: SortArgs = ArgumentParser.process_args(args_list)
            report = SortCommand(args).execute()
            if report.has_failures:
                sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor``.
    """
    CommandProcessor.process_command()
    return 0
