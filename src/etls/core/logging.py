"""
structlog setup.

Every package logger is a structlog logger wrapping the standard library
logger of the same module name. Until an application attaches handlers only
warnings reach stderr through ``logging``'s last-resort handler, and nothing
ever reaches stdout, which carries command output.
"""

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger

PACKAGE_LOGGER = "etls"


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger backed by ``logging.getLogger(name)``.

    Processors and level filtering follow the global structlog configuration.
    """
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(verbose: bool = False) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: Emit debug events instead of warnings and above.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )


def reset_logging() -> None:
    """Undo configure_logging: drop handlers and restore structlog defaults."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    structlog.reset_defaults()
