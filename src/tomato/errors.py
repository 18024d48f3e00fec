"""Errors surfaced to users of the view compiler."""

from __future__ import annotations

from typing import Optional


class TomatoError(Exception):
    """Base class for every error that aborts a compiler run."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def format(self) -> str:
        if self.path:
            return f"{self.message} ({self.path})"
        return self.message


class LoadError(TomatoError):
    """Raised when a template cannot be read, parsed or resolved to a root element."""


class TemplateReferenceError(TomatoError):
    """Raised when a nested <tomato> element does not say which template it uses."""


class ConfigurationError(TomatoError):
    """Raised when the compiler is asked for something it does not support."""


__all__ = [
    "TomatoError",
    "LoadError",
    "TemplateReferenceError",
    "ConfigurationError",
]
