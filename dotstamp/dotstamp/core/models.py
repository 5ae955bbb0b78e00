"""Domain models for projects, templates and value sets."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class TemplateMode(str, Enum):
    """How rendered content is applied to an output file."""

    REPLACE = "replace"
    APPEND = "append"
    PREPEND = "prepend"


class Template(BaseModel):
    """A renderable template bound to one or more output paths."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Template name, unique within a project")
    contents: str = Field(..., description="Raw template text")
    out: list[Path] = Field(..., min_length=1, description="Output file paths")
    mode: TemplateMode = Field(
        default=TemplateMode.REPLACE, description="Write mode for every output"
    )


class ValueSet(BaseModel):
    """A named set of placeholder values."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Value set name (values file stem)")
    values: dict[str, str] = Field(
        default_factory=dict, description="Resolved values, ordered by key"
    )
    vars: dict[str, str] = Field(
        default_factory=dict, description="Raw variables, ordered by key"
    )


class Project(BaseModel):
    """A project owning templates and value sets."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name (directory name)")
    templates: list[Template] = Field(default_factory=list, description="Templates")
    value_sets: dict[str, ValueSet] = Field(
        default_factory=dict, description="Value sets keyed by name"
    )


class Config(BaseModel):
    """All projects found under a config root."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Config root directory")
    projects: dict[str, Project] = Field(
        default_factory=dict, description="Projects keyed by name"
    )
