"""
Console commands.
"""

from etls.commands.list_command import ListCommand, format_entry, list_etls

__all__ = [
    "ListCommand",
    "format_entry",
    "list_etls",
]
