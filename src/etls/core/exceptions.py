"""
Custom exceptions for the etls package.

All exceptions inherit from EtlsError for easy catching.
"""

from typing import Any


class EtlsError(Exception):
    """Base exception for all etls errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(EtlsError):
    """Raised when there's a configuration error."""

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.config_path = config_path


class ConfigurationMissingError(ConfigurationError):
    """Raised when an expected configuration key is absent or not a mapping."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        config_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, config_path, details)
        self.key = key


class TemplateError(EtlsError):
    """Raised when template rendering fails."""

    def __init__(
        self,
        message: str,
        template_name: str | None = None,
        context: dict[str, Any] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.template_name = template_name
        self.context = context


class OutputWriteError(EtlsError):
    """Raised when the output stream rejects a write."""
