from __future__ import annotations

import pytest

from dotstamp.core.errors import NotFoundError, SelectionError
from dotstamp.core.models import Project, ValueSet
from dotstamp.listing import list_projects

from .conftest import make_config


@pytest.fixture
def config():
    return make_config(
        Project(
            name="alpha",
            value_sets={
                "dev": ValueSet(name="dev"),
                "prod": ValueSet(name="prod"),
            },
        ),
        Project(name="beta", value_sets={"only": ValueSet(name="only")}),
    )


def _list(project_name, no_values, config) -> list[str]:
    lines: list[str] = []
    list_projects(project_name, no_values, config, echo=lines.append)
    return lines


def test_lists_projects_with_value_tree(config) -> None:
    assert _list(None, False, config) == [
        "alpha",
        "  ├─ dev",
        "  └─ prod",
        "",
        "beta",
        "  └─ only",
    ]


def test_lists_project_names_only(config) -> None:
    assert _list(None, True, config) == ["alpha", "beta"]


def test_lists_single_project(config) -> None:
    assert _list("beta", False, config) == ["beta", "  └─ only"]


def test_unknown_project(config) -> None:
    with pytest.raises(NotFoundError, match="No project named 'gamma'"):
        _list("gamma", False, config)


def test_no_projects() -> None:
    with pytest.raises(SelectionError, match="No projects found"):
        _list(None, False, make_config())
