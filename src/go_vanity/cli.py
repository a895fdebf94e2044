"""CLI for go-vanity."""

import sys

import click
import structlog

from go_vanity.config.logging import configure_logging
from go_vanity.config.settings import get_settings
from go_vanity.core.exceptions import VanityError

logger = structlog.get_logger(__name__)


def _create_service(settings):
    """Create the generation service from settings."""
    from go_vanity.pipelines.generation import GenerationPipeline
    from go_vanity.rendering.renderer import PageRenderer
    from go_vanity.services.generation import GenerationService

    renderer = PageRenderer(
        title=settings.index_title,
        description=settings.index_description,
    )
    return GenerationService(pipeline=GenerationPipeline(renderer=renderer))


@click.command()
@click.option(
    "-config", "--config", "config_path", default=None,
    help="Path to vanity config file (default: vanity.yaml)",
)
@click.option(
    "-output", "--output", "output_dir", default=None,
    help="Output directory for generated files (default: public)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(config_path: str | None, output_dir: str | None, verbose: bool) -> None:
    """Generate static Go vanity import pages.

    Writes index.html plus one <path>.html per configured path.
    """
    settings = get_settings()
    configure_logging(log_level="DEBUG" if verbose else settings.log_level)

    config_path = config_path or settings.config_path
    output_dir = output_dir or settings.output_dir

    service = _create_service(settings)
    try:
        result = service.generate_from_file(config_path, output_dir)
    except VanityError as e:
        logger.error("failed to generate", error=e.message, **e.details)
        sys.exit(1)

    click.echo(
        f"Generated {len(result.files)} files for {result.site.host or '(no host)'} "
        f"in {result.output_dir}"
    )


if __name__ == "__main__":
    cli()
