"""Exceptions raised by go-vanity."""

from typing import Any


class VanityError(Exception):
    """Base exception for all go-vanity errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(VanityError):
    """The vanity config could not be read, decoded or normalized."""


class RenderError(VanityError):
    """A page template failed to render."""


class OutputError(VanityError):
    """A directory or file under the output root could not be written."""
