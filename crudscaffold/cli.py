"""crud-scaffold command-line entry point.

Generates the API descriptor and view descriptor for one resource and writes
them into the host application's source tree.

Usage::

    crud-scaffold widget --output ./src
    crud-scaffold order-item -o ./src --force
    crud-scaffold widget --dry-run
    crud-scaffold --list-templates
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from jinja2 import TemplateError, TemplateNotFound
from rich.markup import escape

from crudscaffold.config import ScaffoldConfig
from crudscaffold.scaffolder.emitter import resolve_targets, write_artifacts
from crudscaffold.scaffolder.generator import Scaffolder, ScaffoldError
from crudscaffold.scaffolder.templates import detect_placeholders
from crudscaffold.utils import (
    console,
    print_error,
    print_source,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``crud-scaffold``."""
    parser = argparse.ArgumentParser(
        prog="crud-scaffold",
        description="Scaffold CRUD API and view descriptors for a resource",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  crud-scaffold widget\n"
            "  crud-scaffold order-item -o ./src --force\n"
            "  crud-scaffold widget --dry-run\n"
        ),
    )
    parser.add_argument(
        "resource_name",
        nargs="?",
        help="Resource identifier (letters, digits, '_' and '-')",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: $CRUD_SCAFFOLD_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite files that already exist",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated files instead of writing them",
    )
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Directory with template overrides (api.js.j2, view.js.j2)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (see ScaffoldConfig)",
    )
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="List the registered templates and exit",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> ScaffoldConfig:
    """Merge config file / environment with command-line overrides."""
    if args.config:
        config = ScaffoldConfig.load(Path(args.config))
    else:
        config = ScaffoldConfig.from_env()

    if args.output is not None:
        config.output_dir = Path(args.output)
    if args.force:
        config.overwrite = True
    if args.template_dir is not None:
        config.template_dir = Path(args.template_dir)
    return config


def _describe_template_error(exc: TemplateError) -> str:
    if isinstance(exc, TemplateNotFound):
        return f"template {escape(str(exc.name))} not found"
    return f"template error: {escape(str(exc))}"


def _list_templates(scaffolder: Scaffolder) -> None:
    rows: dict[str, str] = {}
    for spec in scaffolder.templates:
        source = scaffolder.renderer.source(spec.source)
        placeholders = sorted(set(detect_placeholders(source)))
        rows[spec.name] = f"{spec.path_template}  [{', '.join(placeholders) or '-'}]"
    print_summary_table({k: escape(v) for k, v in rows.items()}, title="Templates")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``crud-scaffold`` / ``python -m crudscaffold.cli``.

    Returns the process exit status.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _resolve_config(args)
    except (OSError, ValueError) as exc:
        print_error(f"Error: invalid configuration: {escape(str(exc))}")
        return 1

    scaffolder = Scaffolder(config.template_dir)

    if args.list_templates:
        try:
            _list_templates(scaffolder)
        except TemplateError as exc:
            print_error(f"Error: {_describe_template_error(exc)}")
            return 1
        return 0

    if args.resource_name is None:
        parser.print_usage(sys.stderr)
        print_error("Error: a resource name is required")
        return 1

    try:
        artifacts = scaffolder.generate(args.resource_name)
        if args.dry_run:
            for artifact in artifacts:
                print_source(artifact.path, artifact.content)
            return 0

        if config.overwrite:
            existing = [t for t in resolve_targets(artifacts, config.output_dir) if t.exists()]
            for path in existing:
                print_warning(f"Overwriting {escape(str(path))}")

        written = asyncio.run(
            write_artifacts(artifacts, config.output_dir, overwrite=config.overwrite)
        )
    except ScaffoldError as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1
    except TemplateError as exc:
        print_error(f"Error: {_describe_template_error(exc)}")
        return 1
    except OSError as exc:
        print_error(f"Error: could not write files: {escape(str(exc))}")
        return 1

    print_summary_table(
        {artifact.template: escape(str(path)) for artifact, path in zip(artifacts, written)},
        title=f"Scaffolded '{args.resource_name}'",
    )
    print_success(f"Generated {len(written)} file(s) in {escape(str(config.output_dir))}")
    console.print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
