"""CLI argument parsers and validators."""

from __future__ import annotations

import typer


def parse_override(value: str) -> tuple[str, str]:
    """Parse an override argument in format KEY=VALUE."""
    if "=" not in value:
        raise typer.BadParameter(f"Must be KEY=VALUE, got: {value!r}")
    key, val = value.split("=", 1)
    if not key:
        raise typer.BadParameter(f"Key must not be empty, got: {value!r}")
    return key, val
