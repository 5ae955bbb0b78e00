"""Shared pytest fixtures for the dotstamp test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from dotstamp.core.models import Config, Project, Template, TemplateMode, ValueSet


def write_project(
    root: Path,
    name: str,
    config_toml: str,
    templates: dict[str, str],
    values: dict[str, str] | None = None,
) -> Path:
    """Create a project directory under ``root``."""
    project_dir = root / name
    (project_dir / "templates").mkdir(parents=True)
    (project_dir / "config.toml").write_text(textwrap.dedent(config_toml))
    for file_name, contents in templates.items():
        (project_dir / "templates" / file_name).write_text(contents)
    if values is not None:
        (project_dir / "values").mkdir()
        for set_name, contents in values.items():
            (project_dir / "values" / f"{set_name}.toml").write_text(
                textwrap.dedent(contents)
            )
    return project_dir


def make_config(*projects: Project, path: Path = Path(".")) -> Config:
    return Config(path=path, projects={project.name: project for project in projects})


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Directory for generated output files."""
    directory = tmp_path / "out"
    directory.mkdir()
    return directory


@pytest.fixture
def dev_project(out_dir: Path) -> Project:
    """Project ``p`` with a single replace-mode template and two value sets."""
    return Project(
        name="p",
        templates=[
            Template(
                name="url",
                contents="url: {{host}}\n",
                out=[out_dir / "url.yaml"],
                mode=TemplateMode.REPLACE,
            )
        ],
        value_sets={
            "dev": ValueSet(name="dev", values={"host": "a.com"}),
            "prod": ValueSet(name="prod", values={"host": "b.com"}),
        },
    )
