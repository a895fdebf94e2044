"""Core domain models and exceptions for go-vanity."""

from go_vanity.core.exceptions import (
    ConfigurationError,
    OutputError,
    RenderError,
    VanityError,
)
from go_vanity.core.models import PathEntry, PathSettings, Site, VanityConfig

__all__ = [
    # Models
    "PathSettings",
    "VanityConfig",
    "PathEntry",
    "Site",
    # Exceptions
    "VanityError",
    "ConfigurationError",
    "RenderError",
    "OutputError",
]
