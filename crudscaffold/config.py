"""crud-scaffold configuration.

Typed settings for the command-line tool.  Uses a Pydantic v2 model so values
are validated at construction time and can be serialised to/from JSON or read
from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "CRUD_SCAFFOLD_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ScaffoldConfig(BaseModel):
    """Settings shared by the CLI and programmatic callers.

    Instances are typically created once by the CLI entry point and then
    overridden field-by-field from command-line flags.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Root of the host application's source tree",
    )
    overwrite: bool = Field(
        default=False,
        description="Replace generated files that already exist",
    )
    template_dir: Optional[Path] = Field(
        default=None,
        description="Directory holding api.js.j2 / view.js.j2 overrides",
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            CRUD_SCAFFOLD_OUTPUT_DIR, CRUD_SCAFFOLD_OVERWRITE,
            CRUD_SCAFFOLD_TEMPLATE_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get(f"{ENV_PREFIX}OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ[f"{ENV_PREFIX}OUTPUT_DIR"])
        if os.environ.get(f"{ENV_PREFIX}OVERWRITE"):
            kwargs["overwrite"] = _parse_bool(
                f"{ENV_PREFIX}OVERWRITE", os.environ[f"{ENV_PREFIX}OVERWRITE"]
            )
        if os.environ.get(f"{ENV_PREFIX}TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ[f"{ENV_PREFIX}TEMPLATE_DIR"])
        return cls(**kwargs)


def _parse_bool(var: str, raw: str) -> bool:
    """Parse a boolean environment value, rejecting anything unrecognised."""
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{var} must be one of 1/true/yes/on or 0/false/no/off, got {raw!r}")
