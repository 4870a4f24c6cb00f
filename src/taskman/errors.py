"""Application-level exception types for taskman."""

from __future__ import annotations


class TaskmanError(Exception):
    """Base exception for taskman."""


class InvalidArgumentError(TaskmanError, ValueError):
    """Raised when a required destination structure is missing."""


class ConfigurationError(TaskmanError):
    """Raised when parser or buffer limits are out of range."""
