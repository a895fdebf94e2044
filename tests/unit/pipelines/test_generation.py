"""Tests for the generation pipeline."""

from pathlib import Path

import pytest

from go_vanity.core.exceptions import ConfigurationError, OutputError
from go_vanity.output.writer import SiteWriter
from go_vanity.pipelines.generation import GenerationPipeline, generate
from go_vanity.rendering.renderer import PageRenderer


@pytest.mark.unit
class TestGenerationPipeline:
    """Tests for GenerationPipeline."""

    def test_build_site(self, sample_yaml: str) -> None:
        site = GenerationPipeline().build_site(sample_yaml)
        assert site.import_paths == ["go.example.com/contrib", "go.example.com/sdk"]

    def test_generate_writes_all_files(self, tmp_path: Path, sample_yaml: str) -> None:
        result = generate(sample_yaml, tmp_path)
        assert result.files == [
            tmp_path / "index.html",
            tmp_path / "contrib.html",
            tmp_path / "sdk.html",
        ]
        assert all(path.is_file() for path in result.files)

    def test_uses_given_renderer(self, tmp_path: Path, sample_yaml: str) -> None:
        pipeline = GenerationPipeline(renderer=PageRenderer(title="Example modules"))
        pipeline.generate(sample_yaml, tmp_path)
        assert "<h1>Example modules</h1>" in (tmp_path / "index.html").read_text()

    def test_invalid_config_writes_nothing(self, tmp_path: Path) -> None:
        out = tmp_path / "out"
        with pytest.raises(ConfigurationError):
            generate("\ninvalid yaml: [\n", out)
        assert not out.exists()

    def test_index_written_before_pages(self, tmp_path: Path, sample_yaml: str) -> None:
        written = []

        class RecordingWriter(SiteWriter):
            def write_index(self, content: bytes) -> Path:
                written.append("index.html")
                return super().write_index(content)

            def write_page(self, output_name: str, content: bytes) -> Path:
                written.append(output_name)
                return super().write_page(output_name, content)

        GenerationPipeline(writer_factory=RecordingWriter).generate(sample_yaml, tmp_path)
        assert written == ["index.html", "contrib.html", "sdk.html"]

    def test_write_failure_aborts_run(self, tmp_path: Path, sample_yaml: str) -> None:
        (tmp_path / "contrib.html").mkdir()
        with pytest.raises(OutputError):
            generate(sample_yaml, tmp_path)
        assert (tmp_path / "index.html").is_file()
        assert not (tmp_path / "sdk.html").exists()
