"""Vanity config models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PathSettings(BaseModel):
    """Per-path record as it appears in the config file."""

    repo: str = ""
    display: str = ""  # go-source template, e.g. "{repo} {repo}/tree/main{/dir} ..."
    vcs: str = ""
    subdir: str = ""

    @field_validator("repo", "display", "vcs", "subdir", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class VanityConfig(BaseModel):
    """Top-level config document: a host and its import paths."""

    host: str = ""
    paths: dict[str, PathSettings] = Field(default_factory=dict)

    @field_validator("host", mode="before")
    @classmethod
    def _null_host(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("paths", mode="before")
    @classmethod
    def _null_paths(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            # "/lib:" with no body decodes as None
            return {key: {} if item is None else item for key, item in value.items()}
        return value


class PathEntry(BaseModel):
    """A fully defaulted import path, ready to render."""

    model_config = ConfigDict(frozen=True)

    path: str
    repo: str
    display: str
    vcs: str
    subdir: str = ""

    def import_path(self, host: str) -> str:
        return host + self.path

    @property
    def output_name(self) -> str:
        """File name relative to the output root, e.g. ``a/b.html`` for ``/a/b``."""
        return self.path.removeprefix("/") + ".html"


class Site(BaseModel):
    """Normalized config: the host and its entries sorted by path."""

    model_config = ConfigDict(frozen=True)

    host: str = ""
    entries: tuple[PathEntry, ...] = ()

    @property
    def import_paths(self) -> list[str]:
        return [entry.import_path(self.host) for entry in self.entries]
