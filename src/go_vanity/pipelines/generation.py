"""Config-to-site generation pipeline."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from go_vanity.config.decoding import load_config
from go_vanity.core.models.vanity import Site
from go_vanity.output.writer import SiteWriter
from go_vanity.pipelines.normalization import normalize_config
from go_vanity.rendering.renderer import PageRenderer

logger = structlog.get_logger(__name__)


@dataclass
class GenerationResult:
    """What a generation run produced."""

    site: Site
    output_dir: Path
    files: list[Path] = field(default_factory=list)


class GenerationPipeline:
    """Turns raw config bytes into a directory of static pages.

    Steps run strictly in order:
    1. Decode the YAML config
    2. Normalize and sort the paths
    3. Render and write index.html
    4. Render and write one page per path

    The first failure aborts the run; files written before it stay on disk.
    """

    def __init__(
        self,
        renderer: PageRenderer | None = None,
        writer_factory: Callable[[Path], SiteWriter] = SiteWriter,
    ) -> None:
        self._renderer = renderer or PageRenderer()
        self._writer_factory = writer_factory

    def build_site(self, data: bytes | str) -> Site:
        config = load_config(data)
        site = normalize_config(config)
        logger.info("Config loaded", host=site.host, paths=len(site.entries))
        return site

    def generate(self, data: bytes | str, output_dir: str | Path) -> GenerationResult:
        site = self.build_site(data)
        return self.write_site(site, output_dir)

    def write_site(self, site: Site, output_dir: str | Path) -> GenerationResult:
        result = GenerationResult(site=site, output_dir=Path(output_dir))
        writer = self._writer_factory(result.output_dir)

        index = self._renderer.render_index(site.host, site.import_paths)
        result.files.append(writer.write_index(index))

        for entry in site.entries:
            page = self._renderer.render_entry(site.host, entry)
            result.files.append(writer.write_page(entry.output_name, page))

        logger.info(
            "Site generated",
            output_dir=str(result.output_dir),
            files=len(result.files),
        )
        return result


def generate(data: bytes | str, output_dir: str | Path) -> GenerationResult:
    """Generate the site with the default renderer and writer."""
    return GenerationPipeline().generate(data, output_dir)
