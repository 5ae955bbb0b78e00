"""Configuration: settings and on-disk project loading."""

from .loader import load_config, load_project, load_values
from .settings import Settings

__all__ = ["Settings", "load_config", "load_project", "load_values"]
