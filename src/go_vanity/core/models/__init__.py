"""Domain models for go-vanity."""

from go_vanity.core.models.vanity import PathEntry, PathSettings, Site, VanityConfig

__all__ = [
    "PathSettings",
    "VanityConfig",
    "PathEntry",
    "Site",
]
