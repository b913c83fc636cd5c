"""
Jinja2 templating for configuration files.

Configuration YAML is rendered as a Jinja2 template before it is parsed,
so values such as ``{{ APP_NAMESPACE }}`` can be filled from the
environment.
"""

from typing import Any

import orjson
from jinja2 import Environment, StrictUndefined

from etls.core.exceptions import TemplateError


class TemplateEngine:
    """
    Jinja2 string renderer with a runtime-modifiable context.

    Undefined variables raise instead of rendering as empty strings, so a
    config that references a missing environment variable fails loudly.

    Usage:
        engine = TemplateEngine({"APP_NAMESPACE": "App"})
        engine.render_string("{{ APP_NAMESPACE }}.Etls.MyCoolEtl")
    """

    def __init__(self, context: dict[str, Any] | None = None) -> None:
        self._context: dict[str, Any] = dict(context or {})
        self._env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._register_filters()

    def _register_filters(self) -> None:
        """Register custom Jinja2 filters."""
        self._env.filters.update({
            "to_json": self._filter_to_json,
            "env_upper": lambda s: s.upper().replace("-", "_"),
            "default_empty": lambda v, d="": v if v else d,
        })

    @staticmethod
    def _filter_to_json(value: Any) -> str:
        """Convert value to a JSON string; JSON is valid YAML flow syntax."""
        return orjson.dumps(value).decode("utf-8")

    @property
    def context(self) -> dict[str, Any]:
        """Get current context (copy)."""
        return self._context.copy()

    def set_context(self, context: dict[str, Any]) -> None:
        """Replace the entire context."""
        self._context = dict(context)

    def update_context(self, updates: dict[str, Any]) -> None:
        """Update context with new values."""
        self._context.update(updates)

    def render_string(
        self,
        template_string: str,
        extra_context: dict[str, Any] | None = None,
    ) -> str:
        """
        Render a template from a string.

        Args:
            template_string: Template content as string.
            extra_context: Additional context to merge (doesn't modify base context).

        Returns:
            Rendered string.

        Raises:
            TemplateError: If the template is malformed or references an
                undefined variable.
        """
        try:
            template = self._env.from_string(template_string)
            context = {**self._context, **(extra_context or {})}
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render string template: {e}",
            ) from e
