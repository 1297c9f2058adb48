"""Command line interface for dbrestore."""

import sys
from typing import final

from dbrestore.platform.logging import logger
from dbrestore.ui.cli.args import ArgumentParser
from dbrestore.ui.cli.args.options import CLIArgs, RestoreArgs
from dbrestore.ui.cli.commands import ProvidersCommand, RestoreCommand


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
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, RestoreArgs):
                _ = RestoreCommand(args).execute()
                return

            ProvidersCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            logger.debug("Failure details", exc_info=True)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
