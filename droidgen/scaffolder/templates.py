"""Jinja2 rendering for template patterns.

Provides the TemplateRenderer class which renders the inline path, body and
manual-step patterns held by registered templates.  Undefined placeholders are
never rendered as empty strings: :meth:`TemplateRenderer.placeholders` lets the
generator check a pattern before rendering, and the environment itself uses
``StrictUndefined`` so a missed check still fails loudly.
"""

from __future__ import annotations

from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined, UndefinedError, meta

from droidgen.errors import TemplateSubstitutionError


class TemplateRenderer:
    """Renders Jinja2 pattern strings with a flat placeholder context.

    The environment is configured once and never mutated afterwards, so a
    single renderer can be shared by concurrent generation requests.
    """

    def __init__(self) -> None:
        self.env = Environment(
            loader=BaseLoader(),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Inspection ----------------------------------------------------------

    def placeholders(self, pattern: str) -> set[str]:
        """Return the names a pattern reads from its context.

        Example::

            renderer.placeholders("{{ name }}Dao.kt") -> {"name"}
        """
        ast = self.env.parse(pattern)
        return set(meta.find_undeclared_variables(ast))

    # -- Rendering -----------------------------------------------------------

    def render_string(
        self,
        pattern: str,
        context: dict[str, Any],
        *,
        template_id: str = "",
        location: str = "pattern",
    ) -> str:
        """Render *pattern* with *context*.

        Raises:
            TemplateSubstitutionError: If the pattern reads a name that is not
                in *context*.
        """
        template = self.env.from_string(pattern)
        try:
            return template.render(**context)
        except UndefinedError as exc:
            missing = sorted(self.placeholders(pattern) - set(context))
            placeholder = missing[0] if missing else str(exc)
            raise TemplateSubstitutionError(template_id, placeholder, location) from exc
