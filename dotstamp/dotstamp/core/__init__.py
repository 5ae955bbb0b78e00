"""Core models and errors."""

from .errors import (
    ConfigError,
    DotstampError,
    NotFoundError,
    RenderError,
    SelectionError,
    TemplateIOError,
)
from .models import Config, Project, Template, TemplateMode, ValueSet

__all__ = [
    "Config",
    "ConfigError",
    "DotstampError",
    "NotFoundError",
    "Project",
    "RenderError",
    "SelectionError",
    "Template",
    "TemplateIOError",
    "TemplateMode",
    "ValueSet",
]
