"""Expansion of ``<{ repeat POOL }>`` ... ``<{ endrepeat }>`` blocks."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from ..core.errors import RenderError
from .placeholders import fill

logger = logging.getLogger(__name__)

_REPEAT_PATTERN = re.compile(r"<\{\s*repeat\s+(\S+)\s*\}>")
_ENDREPEAT_PATTERN = re.compile(r"<\{\s*endrepeat\s*\}>")


def _match_repeat(line: str) -> re.Match[str] | None:
    return _REPEAT_PATTERN.fullmatch(line.rstrip("\r"))


def _is_endrepeat(line: str) -> bool:
    return _ENDREPEAT_PATTERN.fullmatch(line.rstrip("\r")) is not None


def has_repeat(contents: str) -> bool:
    """Return True when any line of ``contents`` opens a repeat block."""
    return any(_match_repeat(line) for line in contents.split("\n"))


def _find_end(lines: list[str], start: int, template_name: str) -> int:
    for index in range(start + 1, len(lines)):
        if _match_repeat(lines[index]):
            raise RenderError(
                "Repeat statement inside repeat statement not allowed. "
                f"First in line '{start + 1}', second in line '{index + 1}'"
            )
        if _is_endrepeat(lines[index]):
            return index

    raise RenderError(
        f"No endrepeat statement found after repeat statement in line "
        f"'{start + 1}' in template '{template_name}'"
    )


def _check_pool(
    pool_name: str,
    pools: Mapping[str, Mapping[str, str]],
    line_number: int,
    template_name: str,
) -> None:
    if pool_name not in pools:
        known = ", ".join(sorted(pools))
        raise RenderError(
            f"Unknown repeat pool '{pool_name}' in line '{line_number}' in "
            f"template '{template_name}' (expected one of: {known})"
        )


def validate_blocks(
    contents: str, pools: Mapping[str, Mapping[str, str]], template_name: str
) -> None:
    """Check pools and repeat/endrepeat pairing against the template source.

    Raises:
        RenderError: Unknown pool, nested repeat or missing endrepeat
    """
    lines = contents.split("\n")
    index = 0
    while index < len(lines):
        match = _match_repeat(lines[index])
        if match is None:
            index += 1
            continue
        _check_pool(match.group(1), pools, index + 1, template_name)
        index = _find_end(lines, index, template_name) + 1


def expand_first(
    contents: str, pools: Mapping[str, Mapping[str, str]], template_name: str
) -> str:
    """Expand the first repeat block of ``contents``.

    Args:
        contents: Template text
        pools: Repeatable tables keyed by pool name
        template_name: Template name for error messages

    Returns:
        Text with the first block replaced by one rendered body per entry
    """
    lines = contents.split("\n")

    for start, line in enumerate(lines):
        match = _match_repeat(line)
        if match is None:
            continue

        pool_name = match.group(1)
        _check_pool(pool_name, pools, start + 1, template_name)

        end = _find_end(lines, start, template_name)
        logger.debug(
            f"Expanding repeat over '{pool_name}' in '{template_name}' "
            f"(lines {start + 1}-{end + 1})"
        )

        body_lines = lines[start + 1 : end]
        expanded: list[str] = []
        if body_lines:
            body = "\n".join(body_lines)
            expanded = [
                fill(body, {"key": key, "value": value}, f"{pool_name}[{key}]")
                for key, value in pools[pool_name].items()
            ]

        return "\n".join(lines[:start] + expanded + lines[end + 1 :])

    return contents


def expand_repeats(
    contents: str, pools: Mapping[str, Mapping[str, str]], template_name: str
) -> str:
    """Expand every repeat block until no repeat markers remain.

    Args:
        contents: Template text
        pools: Repeatable tables keyed by pool name (e.g. ``values``, ``vars``)
        template_name: Template name for error messages

    Returns:
        Text without repeat blocks

    Raises:
        RenderError: Unknown pool, nested repeat or missing endrepeat
    """
    validate_blocks(contents, pools, template_name)
    while has_repeat(contents):
        contents = expand_first(contents, pools, template_name)
    return contents
