"""Page rendering for go-vanity."""

from go_vanity.rendering.renderer import PageRenderer

__all__ = ["PageRenderer"]
