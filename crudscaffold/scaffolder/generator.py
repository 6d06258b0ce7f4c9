"""Core scaffolding step: resource name in, generated artifacts out.

Takes a resource name, validates it, and renders every registered template
(API descriptor, view descriptor) together with its destination path.  This
module performs no file-system writes and no console output; emitting the
artifacts is the job of :mod:`crudscaffold.scaffolder.emitter`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for every error raised by the scaffolder."""


class InvalidNameError(ScaffoldError, ValueError):
    """Raised when a resource name is empty or not safe to use as a path segment."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid resource name {name!r}: {reason}")


# ---------------------------------------------------------------------------
# Template registry
# ---------------------------------------------------------------------------

RESOURCE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_-]*$")


@dataclass(frozen=True)
class TemplateSpec:
    """A registered template and the path its output is written to."""

    name: str
    source: str
    path_template: str


@dataclass(frozen=True)
class GeneratedArtifact:
    """Rendered template text paired with its relative destination path."""

    template: str
    path: str
    content: str


API_TEMPLATE = TemplateSpec(
    name="api",
    source="api.js.j2",
    path_template="api/{{ resource_name }}.js",
)
# The view imports its API module as `api`, not under the resource name:
# hyphenated names such as `order-item` are not JS identifiers.
VIEW_TEMPLATE = TemplateSpec(
    name="view",
    source="view.js.j2",
    path_template="views/{{ resource_name }}/view.js",
)

# Registration order is the order of the generated artifacts.
TEMPLATES: tuple[TemplateSpec, ...] = (API_TEMPLATE, VIEW_TEMPLATE)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_resource_name(name: str) -> str:
    """Check that *name* is usable as both a substitution value and a path segment.

    Accepts letters, digits, underscores and hyphens; the first character may
    not be a hyphen.  Returns *name* unchanged.

    Raises:
        InvalidNameError: If *name* is empty, not a string, or contains any
            other character (``/``, ``\\``, ``.``, whitespace, braces...).
    """
    if not isinstance(name, str):
        raise InvalidNameError(str(name), "must be a string")
    if not name:
        raise InvalidNameError(name, "must not be empty")
    if "/" in name or "\\" in name or ".." in name:
        raise InvalidNameError(name, "must not contain path separators or '..'")
    if not RESOURCE_NAME_PATTERN.match(name):
        raise InvalidNameError(
            name,
            "only letters, digits, '_' and '-' are allowed, "
            "and the name may not start with '-'",
        )
    return name


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class Scaffolder:
    """Renders the registered CRUD templates for a resource.

    A scaffolder holds no per-call state: ``generate`` is a pure function of
    its argument and the (immutable) template sources.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        templates: tuple[TemplateSpec, ...] = TEMPLATES,
    ) -> None:
        self.renderer = TemplateRenderer(template_dir)
        self.templates = templates

    def generate(self, resource_name: str) -> list[GeneratedArtifact]:
        """Render every registered template for *resource_name*.

        Args:
            resource_name: The resource identifier, e.g. ``"widget"``.

        Returns:
            One artifact per registered template, in registration order.

        Raises:
            InvalidNameError: If *resource_name* fails validation.  No
                template is rendered in that case.
        """
        validate_resource_name(resource_name)
        context = {"resource_name": resource_name}

        artifacts: list[GeneratedArtifact] = []
        for spec in self.templates:
            content = self.renderer.render(spec.source, context)
            path = self.renderer.render_string(spec.path_template, context)
            artifacts.append(GeneratedArtifact(template=spec.name, path=path, content=content))
        return artifacts


@lru_cache(maxsize=1)
def default_scaffolder() -> Scaffolder:
    """Return the process-wide scaffolder over the bundled templates."""
    return Scaffolder()


def generate(resource_name: str) -> list[GeneratedArtifact]:
    """Render the bundled templates for *resource_name*.

    Shortcut for ``default_scaffolder().generate(resource_name)``.
    """
    return default_scaffolder().generate(resource_name)
