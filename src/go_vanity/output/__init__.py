"""Output writers for go-vanity."""

from go_vanity.output.writer import SiteWriter

__all__ = ["SiteWriter"]
