"""
Core module - Configuration, templating, string helpers, and exceptions.
"""

from etls.core.config import ConfigManager
from etls.core.exceptions import (
    ConfigurationError,
    ConfigurationMissingError,
    EtlsError,
    OutputWriteError,
    TemplateError,
)
from etls.core.strings import kebab_case
from etls.core.templating import TemplateEngine

__all__ = [
    "ConfigManager",
    "TemplateEngine",
    "kebab_case",
    "EtlsError",
    "ConfigurationError",
    "ConfigurationMissingError",
    "OutputWriteError",
    "TemplateError",
]
