"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
import structlog

from go_vanity.config.settings import get_settings
from go_vanity.core.models.vanity import PathSettings, VanityConfig

SAMPLE_CONFIG = """
host: go.example.com
paths:
  /sdk:
    repo: https://github.com/example/sdk
    vcs: git
  /contrib:
    repo: https://github.com/example/contrib
"""


@pytest.fixture(autouse=True)
def _reset_global_state():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    # the CLI binds structlog to the CliRunner stream, which is closed afterwards
    structlog.reset_defaults()


@pytest.fixture
def sample_yaml() -> str:
    """Two-path config in the on-disk format."""
    return SAMPLE_CONFIG


@pytest.fixture
def sample_config() -> VanityConfig:
    """Decoded equivalent of ``sample_yaml``."""
    return VanityConfig(
        host="go.example.com",
        paths={
            "/sdk": PathSettings(repo="https://github.com/example/sdk", vcs="git"),
            "/contrib": PathSettings(repo="https://github.com/example/contrib"),
        },
    )


@pytest.fixture
def config_file(tmp_path: Path, sample_yaml: str) -> Path:
    path = tmp_path / "vanity.yaml"
    path.write_text(sample_yaml)
    return path
