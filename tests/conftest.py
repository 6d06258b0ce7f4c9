"""Shared pytest fixtures for the crud-scaffold test suite.

Provides reusable fixtures for:
- Temporary output directories
- A scaffolder over the bundled templates
- A custom template directory for override tests
- A clean ``CRUD_SCAFFOLD_*`` environment
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from crudscaffold.scaffolder.generator import Scaffolder


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Temporary host-application source tree (auto-cleanup)."""
    out = tmp_path / "app-src"
    out.mkdir()
    yield out


@pytest.fixture
def custom_template_dir(tmp_path: Path) -> Path:
    """A template directory overriding both bundled templates."""
    tpl_dir = tmp_path / "custom-templates"
    tpl_dir.mkdir()
    (tpl_dir / "api.js.j2").write_text(
        textwrap.dedent("""\
            // {{ resource_name }} endpoints
            export default { list: '/api/{{ resource_name }}/list' }
        """),
        encoding="utf-8",
    )
    (tpl_dir / "view.js.j2").write_text(
        "export default { data: '{{resource_name}}' }\n",
        encoding="utf-8",
    )
    return tpl_dir


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------

@pytest.fixture
def scaffolder() -> Scaffolder:
    """A scaffolder over the bundled templates."""
    return Scaffolder()


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every ``CRUD_SCAFFOLD_*`` variable for the duration of a test."""
    for var in (
        "CRUD_SCAFFOLD_OUTPUT_DIR",
        "CRUD_SCAFFOLD_OVERWRITE",
        "CRUD_SCAFFOLD_TEMPLATE_DIR",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
