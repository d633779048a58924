"""Jinja2 template rendering for the generated project files.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``stackgen/scaffolder/templates/`` directory and renders them with a context
built from an artifact's slot mapping.  Undefined slots raise instead of
rendering as empty strings, so a template can never silently drop a port or
credential.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, meta


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Generated files are configuration and shell text, so
    autoescaping is disabled and trailing newlines are preserved.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"server/Dockerfile.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.

        Raises:
            jinja2.UndefinedError: The template references a slot missing
                from *context*.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Introspection -----------------------------------------------------

    def slots(self, template_path: str) -> set[str]:
        """Return the names of every variable referenced by a template."""
        source, _, _ = self.env.loader.get_source(self.env, template_path)
        return meta.find_undeclared_variables(self.env.parse(source))
