"""Service layer for go-vanity."""

from go_vanity.services.generation import GenerationService

__all__ = ["GenerationService"]
