"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..config import Settings, load_config
from ..core.errors import DotstampError, format_error_chain
from ..core.models import Config
from ..generation import generate as generate_templates
from ..listing import list_projects
from .parsers import parse_override

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dotstamp",
    help="Render config and dotfile templates from project value sets.",
    no_args_is_help=True,
)

ConfigDirOption = Annotated[
    str,
    typer.Option(
        "--config-dir",
        help="Config root with one directory per project (default: $DOTSTAMP_CONFIG_DIR or ~/.config/dotstamp).",
        metavar="DIR",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
]


def _setup(config_dir: str, verbose: bool) -> Config:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    path = Path(config_dir).expanduser() if config_dir else Settings().resolved_config_dir()
    logger.debug(f"Loading config from {path}")
    return load_config(path)


def _fail(exc: DotstampError) -> typer.Exit:
    typer.echo(format_error_chain(exc), err=True)
    return typer.Exit(code=1)


@app.command("list")
def list_command(
    project: Annotated[
        Optional[str],
        typer.Option(
            "--project",
            "-p",
            help="Project to list the value sets of.",
            metavar="PROJECT",
        ),
    ] = None,
    no_values: Annotated[
        bool,
        typer.Option(
            "--no-values",
            help="Only list project names.",
        ),
    ] = False,
    config_dir: ConfigDirOption = "",
    verbose: VerboseOption = False,
) -> None:
    """List available projects and their value sets."""
    try:
        config = _setup(config_dir, verbose)
        list_projects(project, no_values, config, echo=typer.echo)
    except DotstampError as e:
        raise _fail(e) from e


@app.command("generate")
def generate_command(
    project: Annotated[str, typer.Argument(help="Project to generate the templates of.")],
    values: Annotated[
        Optional[str],
        typer.Argument(help="Value set to supply to the templates."),
    ] = None,
    random_values: Annotated[
        bool,
        typer.Option(
            "--random",
            "-r",
            help="Pick a random value set.",
        ),
    ] = False,
    template: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-t",
            help="Only generate this template.",
            metavar="TEMPLATE",
        ),
    ] = None,
    overrides: Annotated[
        list[str],
        typer.Option(
            "--set",
            "-s",
            help="Override a value (format: KEY=VALUE). Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = [],
    config_dir: ConfigDirOption = "",
    verbose: VerboseOption = False,
) -> None:
    """Generate template files."""
    parsed_overrides = [parse_override(item) for item in overrides]

    try:
        config = _setup(config_dir, verbose)
        generate_templates(
            project,
            values,
            parsed_overrides,
            random_values,
            template,
            config,
            echo=typer.echo,
        )
    except DotstampError as e:
        raise _fail(e) from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
