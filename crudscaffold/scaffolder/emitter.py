"""Write generated artifacts to disk.

The generator only produces ``(path, content)`` pairs; this module places
them beneath an output directory.  Writes are all-or-nothing with respect to
conflicts: every destination is checked before the first file is written.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .generator import GeneratedArtifact, Scaffolder, ScaffoldError, default_scaffolder


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ArtifactExistsError(ScaffoldError):
    """Raised when destination files already exist and overwriting is off."""

    def __init__(self, paths: list[Path]) -> None:
        self.paths = paths
        listing = ", ".join(str(p) for p in paths)
        super().__init__(f"Refusing to overwrite existing file(s): {listing}")


class UnsafePathError(ScaffoldError):
    """Raised when an artifact path would land outside the output directory."""

    def __init__(self, path: str, output_dir: Path) -> None:
        self.path = path
        self.output_dir = output_dir
        super().__init__(f"Artifact path {path!r} escapes output directory {output_dir}")


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def resolve_targets(
    artifacts: list[GeneratedArtifact], output_dir: str | Path
) -> list[Path]:
    """Map each artifact to its absolute destination under *output_dir*.

    Raises:
        UnsafePathError: If an artifact path is absolute or climbs out of
            *output_dir*.
    """
    root = Path(output_dir).resolve()
    targets: list[Path] = []
    for artifact in artifacts:
        target = (root / artifact.path).resolve()
        if Path(artifact.path).is_absolute() or not target.is_relative_to(root):
            raise UnsafePathError(artifact.path, root)
        targets.append(target)
    return targets


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


async def write_artifacts(
    artifacts: list[GeneratedArtifact],
    output_dir: str | Path,
    *,
    overwrite: bool = False,
) -> list[Path]:
    """Write *artifacts* beneath *output_dir*.

    Parent directories are created automatically.  The writes run in a
    worker thread so the event loop is never blocked on disk I/O.

    Args:
        artifacts: Output of :meth:`Scaffolder.generate`.
        output_dir: Root of the host application's source tree.
        overwrite: Replace files that already exist.

    Returns:
        The written paths, in artifact order.

    Raises:
        ArtifactExistsError: If any destination exists and *overwrite* is
            ``False``.  Nothing is written in that case.
        UnsafePathError: If an artifact path escapes *output_dir*.
    """
    targets = resolve_targets(artifacts, output_dir)

    if not overwrite:
        conflicts = [t for t in targets if t.exists()]
        if conflicts:
            raise ArtifactExistsError(conflicts)

    for artifact, target in zip(artifacts, targets):
        await asyncio.to_thread(_write_file, target, artifact.content)
    return targets


async def scaffold(
    resource_name: str,
    output_dir: str | Path,
    *,
    overwrite: bool = False,
    template_dir: str | Path | None = None,
    scaffolder: Scaffolder | None = None,
) -> list[Path]:
    """Generate the artifacts for *resource_name* and write them to *output_dir*.

    Templates come from *scaffolder* if given, else from *template_dir*, else
    from the bundled set.  Validation happens before anything touches the
    file system, so an invalid name never leaves partial output behind.
    """
    if scaffolder is None:
        scaffolder = Scaffolder(template_dir) if template_dir is not None else default_scaffolder()
    artifacts = scaffolder.generate(resource_name)
    return await write_artifacts(artifacts, output_dir, overwrite=overwrite)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
