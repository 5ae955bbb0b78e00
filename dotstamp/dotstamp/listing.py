"""Listing of projects and their value sets."""

from __future__ import annotations

from collections.abc import Callable

from .core.errors import NotFoundError, SelectionError
from .core.models import Config


def list_projects(
    project_name: str | None,
    no_values: bool,
    config: Config,
    echo: Callable[[str], None] = print,
) -> None:
    """Print project names, each followed by a tree of its value sets."""
    projects = [
        project
        for name, project in config.projects.items()
        if project_name is None or name == project_name
    ]

    if not projects:
        if project_name is not None:
            raise NotFoundError(f"No project named '{project_name}' found")
        raise SelectionError("No projects found")

    for index, project in enumerate(projects):
        if not no_values and index > 0:
            echo("")

        echo(project.name)

        if no_values:
            continue

        names = list(project.value_sets)
        for position, name in enumerate(names):
            prefix = "└" if position == len(names) - 1 else "├"
            echo(f"  {prefix}─ {name}")
