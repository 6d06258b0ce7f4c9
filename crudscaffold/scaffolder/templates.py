"""Jinja2 template rendering for CRUD view scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``crudscaffold/scaffolder/templates/`` directory and renders them with a
resource-specific context.  Supports file-based rendering, string-based
rendering for inline path templates, and placeholder detection.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# Placeholder detection
# ---------------------------------------------------------------------------

# Jinja2-style expression placeholders: {{resource_name}}, {{ resource_name }}
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def detect_placeholders(text: str) -> list[str]:
    """Return the placeholder names found in *text*, in order of appearance.

    Repeated placeholders are reported once per occurrence, so
    ``len(detect_placeholders(text))`` is the number of substitution points.
    """
    return PLACEHOLDER_PATTERN.findall(text)


def has_placeholders(text: str) -> bool:
    """Return ``True`` if *text* still contains a placeholder token."""
    return bool(PLACEHOLDER_PATTERN.search(text))


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for CRUD scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Undefined variables raise instead of rendering as
    empty strings, so a template can never silently drop a substitution.
    Compiled templates are cached by the underlying ``Environment``, which
    makes one renderer per process the expected lifecycle.
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

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"view.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.

        Raises:
            jinja2.TemplateNotFound: If *template_path* does not exist.
            jinja2.UndefinedError: If the template references a variable
                missing from *context*.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context.

        Used for destination path templates such as
        ``"views/{{ resource_name }}/view.js"``.
        """
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- Introspection -----------------------------------------------------

    def source(self, template_path: str) -> str:
        """Return the raw, unrendered text of *template_path*."""
        source, _filename, _uptodate = self.env.loader.get_source(self.env, template_path)
        return source

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template paths.

        Paths are relative to the template root directory.
        """
        if not self.template_dir.is_dir():
            return []
        return sorted(
            str(p.relative_to(self.template_dir).as_posix())
            for p in self.template_dir.rglob(f"*{TEMPLATE_SUFFIX}")
        )
