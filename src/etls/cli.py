"""
Command-line interface.

Usage:
    # List ETLs configured in config/etls.yaml
    etls etls:list

    # Use another config directory and a .env file
    etls --config-dir deploy/config --env-file .env etls:list
"""

import argparse
import io
import os
import sys
from pathlib import Path
from typing import Callable, Sequence

from rich.console import Console
from rich.markup import escape

from etls import __version__
from etls.commands.list_command import ListCommand
from etls.core.config import ConfigManager
from etls.core.exceptions import EtlsError, OutputWriteError
from etls.core.logging import configure_logging, get_logger
from etls.etl.registry import EtlRegistry

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def run_list(args: argparse.Namespace) -> int:
    """Handle ``etls:list``."""
    config_manager = ConfigManager(
        config_dir=Path(args.config_dir),
        env_file=Path(args.env_file) if args.env_file else None,
    )
    # Load everything before writing so a bad config never yields partial output
    registry = EtlRegistry.from_config(config_manager)
    return ListCommand(registry).handle()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subparser per command."""
    parser = argparse.ArgumentParser(
        prog="etls",
        description="Inspect configured ETLs",
    )
    parser.add_argument(
        "--config-dir",
        default=os.environ.get("ETLS_CONFIG_DIR", "config"),
        help="Directory containing YAML configuration (default: %(default)s)",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Optional .env file with variables for config templates",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    list_parser = subparsers.add_parser(
        ListCommand.name,
        aliases=["list"],
        help=ListCommand.description,
        description=ListCommand.description,
    )
    list_parser.set_defaults(handler=run_list)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv).

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    handler: Callable[[argparse.Namespace], int] = args.handler
    try:
        return handler(args)
    except EtlsError as e:
        logger.debug("command_failed", command=args.command, error=str(e))
        if isinstance(e, OutputWriteError):
            _discard_stdout()
        Console(stderr=True).print(
            f"[bold red]Error:[/bold red] {escape(e.message)}",
            soft_wrap=True,
        )
        return EXIT_FAILURE


def _discard_stdout() -> None:
    """Point the stdout descriptor at devnull so the exit-time flush cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, io.UnsupportedOperation):
        return

    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)
