"""Generation service."""

from pathlib import Path

from go_vanity.config.decoding import read_config_file
from go_vanity.pipelines.generation import GenerationPipeline, GenerationResult


class GenerationService:
    """Service for generating a site from a config file on disk."""

    def __init__(self, pipeline: GenerationPipeline) -> None:
        self._pipeline = pipeline

    def generate_from_file(
        self, config_path: str | Path, output_dir: str | Path
    ) -> GenerationResult:
        """Read ``config_path`` and write the generated pages to ``output_dir``."""
        data = read_config_file(config_path)
        return self._pipeline.generate(data, output_dir)
