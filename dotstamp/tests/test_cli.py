from __future__ import annotations

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from dotstamp.cli import app
from dotstamp.cli.parsers import parse_override

from .conftest import write_project

runner = CliRunner()


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    root = tmp_path / "config"
    out = (tmp_path / "out" / "url.yaml").as_posix()
    write_project(
        root,
        "p",
        f"""
            [templates.url]
            file = "url.yaml"
            out = "{out}"
        """,
        {"url.yaml": "url: {{host}}\n"},
        {"dev": 'host = "a.com"\n', "prod": 'host = "b.com"\n'},
    )
    return root


def test_parse_override_splits_on_first_equals() -> None:
    assert parse_override("KEY=a=b") == ("KEY", "a=b")
    assert parse_override("KEY=") == ("KEY", "")


@pytest.mark.parametrize("value", ["novalue", "=value"])
def test_parse_override_rejects_invalid(value: str) -> None:
    with pytest.raises(typer.BadParameter):
        parse_override(value)


def test_generate(config_root: Path, tmp_path: Path) -> None:
    result = runner.invoke(app, ["generate", "p", "dev", "--config-dir", str(config_root)])

    assert result.exit_code == 0, result.output
    assert result.stdout == "Generated template 'url'\n"
    assert (tmp_path / "out" / "url.yaml").read_text() == "url: a.com\n"


def test_generate_with_overrides_only(config_root: Path, tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["generate", "p", "--set", "host=c.com", "--config-dir", str(config_root)],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "url.yaml").read_text() == "url: c.com\n"


def test_generate_reads_config_dir_from_environment(
    config_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("DOTSTAMP_CONFIG_DIR", str(config_root))

    result = runner.invoke(app, ["generate", "p", "--random"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "url.yaml").read_text() in {"url: a.com\n", "url: b.com\n"}


def test_generate_error_exits_non_zero(config_root: Path, tmp_path: Path) -> None:
    result = runner.invoke(app, ["generate", "p", "staging", "--config-dir", str(config_root)])

    assert result.exit_code == 1
    assert "No values named 'staging' found in project 'p'" in result.output
    assert not (tmp_path / "out" / "url.yaml").exists()


def test_generate_without_selection_fails(config_root: Path) -> None:
    result = runner.invoke(app, ["generate", "p", "--config-dir", str(config_root)])

    assert result.exit_code == 1
    assert "value set name or random flag" in result.output


def test_generate_rejects_malformed_override(config_root: Path) -> None:
    result = runner.invoke(
        app, ["generate", "p", "dev", "--set", "oops", "--config-dir", str(config_root)]
    )

    assert result.exit_code == 2


def test_list(config_root: Path) -> None:
    result = runner.invoke(app, ["list", "--config-dir", str(config_root)])

    assert result.exit_code == 0, result.output
    assert result.stdout == "p\n  ├─ dev\n  └─ prod\n"


def test_list_missing_config_dir(tmp_path: Path) -> None:
    result = runner.invoke(app, ["list", "--config-dir", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "Config directory not found" in result.output
