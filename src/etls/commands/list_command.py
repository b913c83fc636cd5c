"""
The ``etls:list`` command: print every registered ETL.
"""

import sys
from typing import TextIO

from etls.core.exceptions import OutputWriteError
from etls.core.logging import get_logger
from etls.core.strings import kebab_case
from etls.etl.registry import EtlRegistry, EtlRegistryEntry

logger = get_logger(__name__)


def format_entry(entry: EtlRegistryEntry) -> str:
    """Format one registry entry as a listing line."""
    return f"{kebab_case(entry.logical_name)} found in class {entry.class_name}"


def list_etls(registry: EtlRegistry) -> list[str]:
    """
    Build the listing lines for a registry.

    Args:
        registry: Registry to list.

    Returns:
        One line per entry, in registry order.
    """
    return [format_entry(entry) for entry in registry]


class ListCommand:
    """
    List ETLs.

    Writes ``<kebab-name> found in class <class>`` for each registered ETL,
    one per line, in configuration order.

    Usage:
        command = ListCommand(registry)
        exit_code = command.handle()
    """

    name = "etls:list"
    description = "List ETLs"

    def __init__(self, registry: EtlRegistry, output: TextIO | None = None) -> None:
        """
        Initialize the command.

        Args:
            registry: Registry to list.
            output: Text stream to write to (defaults to stdout at call time).
        """
        self._registry = registry
        self._output = output

    def handle(self) -> int:
        """
        Run the command.

        Returns:
            Exit code, always 0.

        Raises:
            OutputWriteError: If the output stream rejects a write.
        """
        output = self._output or sys.stdout
        lines = list_etls(self._registry)

        written = 0
        try:
            for line in lines:
                output.write(f"{line}\n")
                written += 1
            output.flush()
        except OSError as e:
            raise OutputWriteError(
                f"Failed to write ETL listing: {e}",
                details={"written": written, "total": len(lines)},
            ) from e

        logger.debug("etls_listed", total=len(lines))

        return 0
