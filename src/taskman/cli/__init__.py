"""Command-line interface for taskman."""

from .app import app
from .render import Renderer

__all__ = [
    "Renderer",
    "app",
]
