"""dotstamp - project-scoped template renderer for config files and dotfiles.

Renders templates with placeholder substitution and repeat blocks, and keeps
appended or prepended sections up to date in files that hold other content.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export the library API and the CLI entry point
from .cli import main
from .generation import generate
from .listing import list_projects

__all__ = ["generate", "list_projects", "main"]
