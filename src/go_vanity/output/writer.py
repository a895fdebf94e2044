"""Writing rendered pages under the output root."""

import os
from pathlib import Path

import structlog

from go_vanity.core.exceptions import OutputError

logger = structlog.get_logger(__name__)

DIR_MODE = 0o700
FILE_MODE = 0o600
INDEX_NAME = "index.html"


class SiteWriter:
    """Writes pages below a root directory with owner-only permissions.

    Every directory this writer creates gets ``DIR_MODE``, including
    intermediate ones; existing directories are left untouched.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def ensure_root(self) -> None:
        self._make_dirs(self._root)

    def write_index(self, content: bytes) -> Path:
        self.ensure_root()
        return self._write(self._root / INDEX_NAME, content)

    def write_page(self, output_name: str, content: bytes) -> Path:
        """Write ``content`` to ``<root>/<output_name>``, e.g. ``a/b.html``."""
        target = self._root / output_name.lstrip("/")
        self._make_dirs(target.parent)
        return self._write(target, content)

    def _make_dirs(self, directory: Path) -> None:
        missing = []
        current = directory
        while not current.exists():
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent

        for path in reversed(missing):
            try:
                path.mkdir(mode=DIR_MODE)
            except FileExistsError:
                continue
            except OSError as e:
                raise OutputError(
                    f"failed to create directory {path}: {e}",
                    details={"path": str(path)},
                ) from e

    def _write(self, path: Path, content: bytes) -> Path:
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(content)
        except OSError as e:
            raise OutputError(
                f"failed to write {path}: {e}",
                details={"path": str(path)},
            ) from e
        logger.debug("Page written", path=str(path), size=len(content))
        return path
