"""Exception types raised by dotstamp."""

from __future__ import annotations


class DotstampError(Exception):
    """Base class for all dotstamp errors."""


class NotFoundError(DotstampError):
    """Raised when a project, value set or template does not exist."""


class SelectionError(DotstampError):
    """Raised when no value set or template can be selected."""


class RenderError(DotstampError):
    """Raised when a template cannot be rendered."""


class TemplateIOError(DotstampError):
    """Raised when an output file cannot be read or written."""


class ConfigError(DotstampError):
    """Raised when configuration files are missing or invalid."""


def format_error_chain(exc: BaseException) -> str:
    """Join an exception and its causes into one line.

    Args:
        exc: Outermost exception

    Returns:
        Messages of ``exc`` and every ``__cause__`` joined by ``": "``
    """
    messages: list[str] = []
    current: BaseException | None = exc
    while current is not None:
        message = str(current) or type(current).__name__
        if message not in messages:
            messages.append(message)
        current = current.__cause__
    return ": ".join(messages)
