"""CRUD view scaffolder -- generates API and view descriptor modules.

Takes a resource name and renders the bundled templates into an API
descriptor (``api/<name>.js``) and a view descriptor
(``views/<name>/view.js``) for the host application's admin UI framework.

Quick usage::

    from crudscaffold.scaffolder import generate, write_artifacts

    artifacts = generate("widget")
    written = await write_artifacts(artifacts, "/path/to/app/src")
"""

from crudscaffold.scaffolder.emitter import (
    ArtifactExistsError,
    UnsafePathError,
    scaffold,
    write_artifacts,
)
from crudscaffold.scaffolder.generator import (
    TEMPLATES,
    GeneratedArtifact,
    InvalidNameError,
    Scaffolder,
    ScaffoldError,
    TemplateSpec,
    generate,
    validate_resource_name,
)
from crudscaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "TEMPLATES",
    "ArtifactExistsError",
    "GeneratedArtifact",
    "InvalidNameError",
    "ScaffoldError",
    "Scaffolder",
    "TemplateRenderer",
    "TemplateSpec",
    "UnsafePathError",
    "generate",
    "scaffold",
    "validate_resource_name",
    "write_artifacts",
]
