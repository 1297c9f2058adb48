"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from dbrestore.config.config import Config
from dbrestore.features.restoration import CompressionType
from dbrestore.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from dbrestore.ui.cli.args.options import CLIArgs, ProvidersArgs, RestoreArgs


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
            description="dbrestore - Restore database backups kept on storage services.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        restore_parser = subparsers.add_parser(
            "restore",
            help="Restore a database backup; omitted options are asked interactively",
        )
        _ = restore_parser.add_argument(
            "--source",
            type=str,
            help="Storage service holding the backup",
            metavar="SOURCE",
        )
        _ = restore_parser.add_argument(
            "--source-path",
            "--sourcePath",
            dest="source_path",
            type=str,
            help="Path of the backup file within the storage service",
            metavar="PATH",
        )
        _ = restore_parser.add_argument(
            "--database",
            type=str,
            help="Database connection to restore into",
            metavar="DATABASE",
        )
        _ = restore_parser.add_argument(
            "--compression",
            type=str,
            help="Compression used by the backup (none, gzip)",
            metavar="TYPE",
        )
        ArgumentParser._add_verbosity_flags(restore_parser)

        providers_parser = subparsers.add_parser(
            "providers",
            help="List configured storage services and database connections",
        )
        ArgumentParser._add_verbosity_flags(providers_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If an option value is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "restore":
            return ArgumentParser._process_restore(parsed_args)

        if command == "providers":
            return ProvidersArgs(
                command="providers",
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed restore information",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _process_restore(parsed_args: argparse.Namespace) -> RestoreArgs:
        compression: str | None = parsed_args.compression
        if compression:
            try:
                compression = CompressionType.from_user_input(compression).value
            except ValueError as e:
                logger.error("%s", e)
                sys.exit(2)

        return RestoreArgs(
            command="restore",
            source=parsed_args.source or None,
            source_path=parsed_args.source_path or None,
            database=parsed_args.database or None,
            compression=compression or None,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
