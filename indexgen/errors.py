"""Exception hierarchy for indexgen runs.

Every failure is fatal: lower layers raise one of these (chaining the original
``OSError`` or template error) and ``indexgen.cli.main`` reports it and exits.
"""

from __future__ import annotations

from pathlib import Path


class IndexGenError(Exception):
    """Base class for all indexgen failures."""


class ConfigurationError(IndexGenError):
    """Raised for unusable options: unknown theme, missing template, bad path."""


class TraversalError(IndexGenError):
    """Raised when a directory cannot be scanned or an entry cannot be stat'ed."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)


class TemplateRenderError(IndexGenError):
    """Raised when a template fails to compile or render."""

    def __init__(self, message: str, template_name: str | None = None) -> None:
        self.template_name = template_name
        if template_name:
            message = f"{template_name}: {message}"
        super().__init__(message)


class OutputWriteError(IndexGenError):
    """Raised when a listing page cannot be written."""

    def __init__(self, message: str, path: Path | str) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")


__all__ = [
    "IndexGenError",
    "ConfigurationError",
    "TraversalError",
    "TemplateRenderError",
    "OutputWriteError",
]
