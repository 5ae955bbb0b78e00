"""Placeholder substitution for ``{{ key }}`` tokens."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from ..core.errors import RenderError

logger = logging.getLogger(__name__)

_PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*(\S+?)\s*\}\}")


def resolve(text: str, values: Mapping[str, str]) -> tuple[str, list[str]]:
    """Substitute every placeholder in ``text`` with its value.

    A token may start with any number of ``-`` characters. They are stripped
    to get the lookup key and the same number of leading characters is
    removed from the value. Missing keys render as empty strings.

    Args:
        text: Template text
        values: Lookup table for placeholder keys

    Returns:
        Rendered text and the missing keys in first-seen order
    """
    missing: list[str] = []

    def replace(match: re.Match[str]) -> str:
        token = match.group(1)
        key = token.lstrip("-")
        dash_count = len(token) - len(key)

        value = values.get(key)
        if value is None:
            if key not in missing:
                missing.append(key)
            return ""
        return value[dash_count:]

    return _PLACEHOLDER_PATTERN.sub(replace, text), missing


def fill(text: str, values: Mapping[str, str], values_name: str) -> str:
    """Substitute placeholders, failing when any key is missing.

    Args:
        text: Template text
        values: Lookup table for placeholder keys
        values_name: Name of the value table, used in the error message

    Returns:
        Rendered text

    Raises:
        RenderError: One or more keys have no value
    """
    rendered, missing = resolve(text, values)
    if missing:
        raise RenderError(
            f"Could not find keys in values '{values_name}': {', '.join(missing)}"
        )
    return rendered
