"""Template rendering engine."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from ..core.errors import RenderError, TemplateIOError
from ..core.models import Template, TemplateMode
from .io import atomic_write_text, ensure_parent, read_existing
from .placeholders import fill
from .repeat import expand_repeats
from .sections import section_bounds, synchronize

logger = logging.getLogger(__name__)


def render_template(
    template: Template,
    values: Mapping[str, str],
    values_name: str,
    raw_vars: Mapping[str, str] | None = None,
) -> str:
    """Render a template's contents against a value table.

    Args:
        template: Template to render
        values: Merged value table, also the ``values`` repeat pool
        values_name: Name of the value table for error messages
        raw_vars: Raw variables, the ``vars`` repeat pool

    Returns:
        Rendered text
    """
    pools = {"values": values, "vars": raw_vars or {}}
    try:
        expanded = expand_repeats(template.contents, pools, template.name)
        return fill(expanded, values, values_name)
    except RenderError as e:
        raise RenderError(f"Failed to render template '{template.name}'") from e


def write_output(template: Template, path: Path, rendered: str) -> None:
    """Apply rendered content to a single output path.

    Args:
        template: Template the content belongs to
        path: Output file path
        rendered: Rendered template text
    """
    try:
        ensure_parent(path)
    except OSError as e:
        raise TemplateIOError(
            f"Failed to create output directory for template '{template.name}' "
            f"at '{path.parent}'"
        ) from e

    existing = ""
    if template.mode is not TemplateMode.REPLACE:
        try:
            existing = read_existing(path)
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateIOError(
                f"Failed to read existing output of template '{template.name}' "
                f"at '{path}'"
            ) from e

    contents = synchronize(template.mode, rendered, existing, template.name)

    try:
        atomic_write_text(path, contents)
    except OSError as e:
        raise TemplateIOError(
            f"Failed to write template '{template.name}' to '{path}'"
        ) from e

    logger.debug(f"Wrote {template.name} → {path} ({template.mode.value})")


def render_and_write(
    template: Template,
    values: Mapping[str, str],
    values_name: str,
    raw_vars: Mapping[str, str] | None = None,
) -> list[Path]:
    """Render a template and write it to every output path.

    Returns:
        Output file paths
    """
    logger.debug(f"Rendering template: {template.name}")

    rendered = render_template(template, values, values_name, raw_vars)
    if template.mode is not TemplateMode.REPLACE:
        section_bounds(rendered, template.name)

    for path in template.out:
        write_output(template, path, rendered)

    return list(template.out)
