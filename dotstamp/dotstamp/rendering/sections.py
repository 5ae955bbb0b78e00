"""Idempotent placement of rendered content inside existing files."""

from __future__ import annotations

import logging

from ..core.errors import RenderError
from ..core.models import TemplateMode

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``, dropping line terminators and a trailing empty line."""
    if not text:
        return []
    lines = [line.rstrip("\r") for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines


def section_bounds(rendered: str, template_name: str) -> tuple[str, str]:
    """Return the first and last line that delimit a rendered section.

    Raises:
        RenderError: Content is empty or has a single line
    """
    lines = split_lines(rendered)
    if not lines:
        raise RenderError(f"Template cannot be empty: {template_name}")
    if len(lines) < 2:
        raise RenderError(f"Template has only one line: {template_name}")
    return lines[0], lines[-1]


def strip_section(existing: str, first_line: str, last_line: str) -> str:
    """Remove every previously written section from ``existing``.

    A section starts at a line equal to ``first_line`` and ends at the next
    line equal to ``last_line``; both boundary lines are removed with it.

    Args:
        existing: Current file contents
        first_line: First line of the rendered content
        last_line: Last line of the rendered content

    Returns:
        Remaining lines, each terminated by a newline
    """
    kept: list[str] = []
    skipping = False

    for line in split_lines(existing):
        if not skipping and line == first_line:
            skipping = True
            continue
        if skipping and line == last_line:
            skipping = False
            continue
        if not skipping:
            kept.append(line + "\n")

    if skipping:
        logger.warning(
            f"Section starting with {first_line!r} is not terminated; "
            "dropping the rest of the file"
        )

    return "".join(kept)


def synchronize(
    mode: TemplateMode, rendered: str, existing: str, template_name: str
) -> str:
    """Compute the new contents of an output file.

    Args:
        mode: Template write mode
        rendered: Freshly rendered template content
        existing: Current output file contents ("" when absent)
        template_name: Template name for error messages

    Returns:
        Contents to write
    """
    if mode is TemplateMode.REPLACE:
        return rendered

    first_line, last_line = section_bounds(rendered, template_name)
    remainder = strip_section(existing, first_line, last_line)

    if mode is TemplateMode.APPEND:
        return remainder + rendered
    if mode is TemplateMode.PREPEND:
        if remainder and not rendered.endswith("\n"):
            return rendered + "\n" + remainder
        return rendered + remainder

    raise ValueError(f"Unknown template mode: {mode}")
