"""Pydantic v2 models for templates and generation results.

Templates are declarative tables of path/body patterns; nothing here renders
anything. Every model is frozen so a registered template cannot change after
process start.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FileSkeleton(BaseModel):
    """One generated file: a path pattern and a body pattern."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Target path pattern, relative to the project root")
    body: str = Field(..., description="Jinja2 body pattern")


class ManualStep(BaseModel):
    """A follow-up instruction that droidgen cannot perform itself.

    When ``convention`` is set the rendered step is annotated with the
    discovered location of that convention, or asks the caller to locate the
    file when the prober found nothing.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Jinja2 instruction pattern")
    convention: Optional[str] = Field(
        default=None, description="Convention key this step edits, e.g. 'di-module-path'"
    )
    target: str = Field(
        default="", description="Human description of the file to locate when not found"
    )


class Template(BaseModel):
    """A named, fixed plan for producing files from a base name."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique template identifier")
    description: str = Field(default="")
    files: tuple[FileSkeleton, ...] = Field(default=())
    manual_steps: tuple[ManualStep, ...] = Field(default=())


class GeneratedFile(BaseModel):
    """A rendered ``(path, body)`` pair."""

    model_config = ConfigDict(frozen=True)

    path: str
    body: str


class GenerationResult(BaseModel):
    """Output of one generation request."""

    model_config = ConfigDict(frozen=True)

    template_id: str
    base_name: str
    files: tuple[GeneratedFile, ...] = Field(default=())
    manual_steps: tuple[str, ...] = Field(default=())

    @property
    def paths(self) -> list[str]:
        """Target paths in generation order."""
        return [f.path for f in self.files]
