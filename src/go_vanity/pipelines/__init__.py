"""Processing pipelines for go-vanity."""

from go_vanity.pipelines.generation import GenerationPipeline, GenerationResult, generate
from go_vanity.pipelines.normalization import normalize_config

__all__ = ["GenerationPipeline", "GenerationResult", "generate", "normalize_config"]
