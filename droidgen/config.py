"""droidgen configuration.

Typed configuration for the prober, generator and CLI. All settings use
Pydantic v2 models so they can be validated at construction time and serialised
to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class ProbeConfig(BaseModel):
    """Bounds for the convention prober's directory walk.

    The walk never descends deeper than ``max_depth`` directories below the
    project root and stops after ``max_files`` files have been inspected.
    """

    max_depth: int = Field(default=16, ge=1, description="Maximum directory depth below the root")
    max_files: int = Field(default=5000, ge=1, description="Maximum number of files inspected")
    skip_dirs: list[str] = Field(
        default=["build", ".git", ".gradle", ".idea", "node_modules", ".cxx"],
        description="Directory names that are never entered",
    )


class Config(BaseModel):
    """Global droidgen configuration.

    Defaults here fill the convention slots of a template whenever the prober
    could not discover the project's own value.
    """

    default_package: str = Field(default="com.example.app")
    default_source_root: str = Field(default="app/src/main/java")
    default_test_root: str = Field(default="app/src/test/java")
    probe: ProbeConfig = Field(default_factory=ProbeConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            DROIDGEN_DEFAULT_PACKAGE, DROIDGEN_SOURCE_ROOT, DROIDGEN_TEST_ROOT,
            DROIDGEN_PROBE_MAX_DEPTH, DROIDGEN_PROBE_MAX_FILES.
        """
        probe_kwargs: dict[str, Any] = {}
        if os.environ.get("DROIDGEN_PROBE_MAX_DEPTH"):
            probe_kwargs["max_depth"] = int(os.environ["DROIDGEN_PROBE_MAX_DEPTH"])
        if os.environ.get("DROIDGEN_PROBE_MAX_FILES"):
            probe_kwargs["max_files"] = int(os.environ["DROIDGEN_PROBE_MAX_FILES"])

        kwargs: dict[str, Any] = {}
        if os.environ.get("DROIDGEN_DEFAULT_PACKAGE"):
            kwargs["default_package"] = os.environ["DROIDGEN_DEFAULT_PACKAGE"]
        if os.environ.get("DROIDGEN_SOURCE_ROOT"):
            kwargs["default_source_root"] = os.environ["DROIDGEN_SOURCE_ROOT"]
        if os.environ.get("DROIDGEN_TEST_ROOT"):
            kwargs["default_test_root"] = os.environ["DROIDGEN_TEST_ROOT"]

        return cls(probe=ProbeConfig(**probe_kwargs), **kwargs)
