"""Normalization of the raw path mapping into sorted, defaulted entries."""

import structlog

from go_vanity.core.exceptions import ConfigurationError
from go_vanity.core.models.vanity import PathEntry, PathSettings, Site, VanityConfig

logger = structlog.get_logger(__name__)

DEFAULT_VCS = "git"

# {/dir}, {file} and {line} are expanded by the go-source consumer, not here.
DEFAULT_DISPLAY_TEMPLATE = "{repo} {repo}/tree/main{{/dir}} {repo}/blob/main{{/dir}}/{{file}}#L{{line}}"


def normalize_path(path: str) -> str:
    """Drop a single trailing slash: ``/lib/`` -> ``/lib``."""
    return path.removesuffix("/")


def default_vcs(vcs: str) -> str:
    return vcs or DEFAULT_VCS


def default_display(repo: str, display: str) -> str:
    """Return ``display``, or the GitHub-style template derived from ``repo``.

    Examples:
        default_display("https://github.com/org/lib", "")
        -> "https://github.com/org/lib https://github.com/org/lib/tree/main{/dir}
            https://github.com/org/lib/blob/main{/dir}/{file}#L{line}"
    """
    return display or DEFAULT_DISPLAY_TEMPLATE.format(repo=repo)


def normalize_entry(path: str, settings: PathSettings) -> PathEntry:
    return PathEntry(
        path=normalize_path(path),
        repo=settings.repo,
        display=default_display(settings.repo, settings.display),
        vcs=default_vcs(settings.vcs),
        subdir=settings.subdir,
    )


def normalize_config(config: VanityConfig) -> Site:
    """Build the sorted site model from a decoded config.

    Raises ConfigurationError when two keys collapse onto the same path
    after trailing-slash removal.
    """
    entries: dict[str, PathEntry] = {}
    for raw_path, settings in config.paths.items():
        entry = normalize_entry(raw_path, settings)
        if entry.path in entries:
            raise ConfigurationError(
                f"duplicate path after normalization: {entry.path}",
                details={"path": entry.path, "raw_path": raw_path},
            )
        if not entry.repo:
            logger.warning("Path has no repository URL", path=entry.path)
        entries[entry.path] = entry

    ordered = tuple(sorted(entries.values(), key=lambda entry: entry.path))
    return Site(host=config.host, entries=ordered)
