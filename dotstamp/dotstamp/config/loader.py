"""Loading of projects, templates and value sets from a config directory."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..core.errors import ConfigError
from ..core.models import Config, Project, Template, TemplateMode, ValueSet

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = "config.toml"
TEMPLATES_DIR = "templates"
VALUES_DIR = "values"
VARS_TABLE = "vars"


class TemplateConfig(BaseModel):
    """A ``[templates.<name>]`` entry of a project's config.toml."""

    file: Path = Field(..., description="Template file, relative to templates/")
    out: list[Path] = Field(..., min_length=1, description="Output file paths")
    mode: TemplateMode = Field(default=TemplateMode.REPLACE, description="Write mode")

    @field_validator("out", mode="before")
    @classmethod
    def _listify_out(cls, value: Any) -> Any:
        if isinstance(value, (str, Path)):
            return [value]
        return value

    @field_validator("out")
    @classmethod
    def _expand_home(cls, value: list[Path]) -> list[Path]:
        return [path.expanduser() for path in value]


class ProjectConfig(BaseModel):
    """A project's config.toml."""

    templates: dict[str, TemplateConfig] = Field(
        default_factory=dict, description="Templates keyed by name"
    )


def read_toml(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File is unreadable or not valid TOML
    """
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to read TOML file at path '{path}'") from e


def load_values(path: Path) -> ValueSet:
    """Load a value set from a values file.

    Top-level keys are values. A value naming an entry of the optional
    ``[vars]`` table resolves to that entry, any other value is used as is.

    Args:
        path: Values file path; its stem is the value set name

    Returns:
        Value set with values and vars ordered by key
    """
    data = read_toml(path)

    raw_vars = data.pop(VARS_TABLE, {})
    if not isinstance(raw_vars, dict):
        raise ConfigError(f"'{VARS_TABLE}' must be a table in values file at path '{path}'")

    for table, entries in ((VARS_TABLE, raw_vars), ("values", data)):
        for key, value in entries.items():
            if not isinstance(value, str):
                raise ConfigError(
                    f"Entry '{key}' in {table} of values file at path '{path}' "
                    f"must be a string, got {type(value).__name__}"
                )

    values = {key: raw_vars.get(value, value) for key, value in sorted(data.items())}
    return ValueSet(name=path.stem, values=values, vars=dict(sorted(raw_vars.items())))


def _load_template(name: str, template_config: TemplateConfig, templates_path: Path) -> Template:
    template_path = templates_path / template_config.file
    try:
        contents = template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Failed to read template file at path '{template_path}'"
        ) from e

    return Template(
        name=name,
        contents=contents,
        out=template_config.out,
        mode=template_config.mode,
    )


def load_project(path: Path) -> Project:
    """Load a single project directory.

    Args:
        path: Project directory; its name is the project name

    Returns:
        Project with templates in config order and value sets ordered by name
    """
    config_path = path / PROJECT_CONFIG_FILE
    try:
        project_config = ProjectConfig.model_validate(read_toml(config_path))
    except (ConfigError, ValidationError) as e:
        raise ConfigError(
            f"Failed to read project config file at path '{config_path}'"
        ) from e

    templates = [
        _load_template(name, template_config, path / TEMPLATES_DIR)
        for name, template_config in project_config.templates.items()
    ]

    values_path = path / VALUES_DIR
    value_sets: dict[str, ValueSet] = {}
    if values_path.is_dir():
        for values_file in sorted(values_path.glob("*.toml")):
            value_set = load_values(values_file)
            value_sets[value_set.name] = value_set
    else:
        logger.debug(f"Project '{path.name}' has no values directory")

    logger.debug(
        f"Loaded project '{path.name}': {len(templates)} template(s), "
        f"{len(value_sets)} value set(s)"
    )
    return Project(name=path.name, templates=templates, value_sets=value_sets)


def load_config(path: Path) -> Config:
    """Load every project found under a config root.

    Args:
        path: Config root directory

    Returns:
        Config with projects ordered by name
    """
    if not path.is_dir():
        raise ConfigError(f"Config directory not found at path '{path}'")

    projects: dict[str, Project] = {}
    for entry in sorted(path.iterdir()):
        if not entry.is_dir() or entry.name.startswith("."):
            continue
        projects[entry.name] = load_project(entry)

    return Config(path=path, projects=projects)
