"""Integration tests for the generate-then-write flow.

These tests run the real scaffolder and emitter against a temporary host
source tree and check that the generated modules reference each other
consistently.  No external services are required.
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from crudscaffold.cli import main
from crudscaffold.scaffolder import generate, scaffold
from crudscaffold.scaffolder.templates import has_placeholders


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _generated_files(root: Path) -> list[str]:
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestScaffoldEndToEnd:
    @pytest.mark.asyncio
    async def test_view_import_resolves_to_api_module(self, output_dir: Path):
        await scaffold("order-item", output_dir)

        view_path = output_dir / "views" / "order-item" / "view.js"
        view = view_path.read_text(encoding="utf-8")
        match = re.search(r"import api from '([^']+)'", view)
        assert match is not None

        imported = (view_path.parent / f"{match.group(1)}.js").resolve()
        assert imported == (output_dir / "api" / "order-item.js").resolve()
        assert imported.is_file()

    @pytest.mark.asyncio
    async def test_several_resources(self, output_dir: Path):
        for name in ("widget", "order-item", "user_profile"):
            await scaffold(name, output_dir)

        assert _generated_files(output_dir) == [
            "api/order-item.js",
            "api/user_profile.js",
            "api/widget.js",
            "views/order-item/view.js",
            "views/user_profile/view.js",
            "views/widget/view.js",
        ]
        for path in output_dir.rglob("*.js"):
            assert not has_placeholders(path.read_text(encoding="utf-8"))

    def test_cli_output_matches_library(self, clean_env, output_dir: Path):
        assert main(["widget", "--output", str(output_dir)]) == 0
        for artifact in generate("widget"):
            written = (output_dir / artifact.path).read_text(encoding="utf-8")
            assert written == artifact.content

    def test_cli_rerun_is_byte_identical(self, clean_env, output_dir: Path):
        assert main(["widget", "-o", str(output_dir)]) == 0
        first = {p: p.read_bytes() for p in output_dir.rglob("*.js")}
        assert main(["widget", "-o", str(output_dir), "--force"]) == 0
        second = {p: p.read_bytes() for p in output_dir.rglob("*.js")}
        assert first == second
