"""Rendering: placeholders, repeat blocks, section sync and file output."""

from .engine import render_and_write, render_template
from .placeholders import fill, resolve
from .repeat import expand_repeats
from .sections import synchronize

__all__ = [
    "expand_repeats",
    "fill",
    "render_and_write",
    "render_template",
    "resolve",
    "synchronize",
]
