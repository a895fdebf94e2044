"""HTML rendering of the index and per-path vanity pages."""

from collections.abc import Iterable

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from go_vanity.core.exceptions import RenderError
from go_vanity.core.models.vanity import PathEntry

INDEX_TEMPLATE = "index.html"
VANITY_TEMPLATE = "vanity.html"


class PageRenderer:
    """Renders pages to UTF-8 bytes.

    Rendering is pure: nothing is written to disk here. The go-import,
    go-source and refresh tags in ``vanity.html`` are read by ``go get``
    and must keep their exact shape.
    """

    def __init__(self, title: str | None = None, description: str | None = None) -> None:
        self._title = title
        self._description = description
        self._env = Environment(
            loader=PackageLoader("go_vanity.rendering", "templates"),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )

    def _render(self, template_name: str, **context) -> bytes:
        try:
            template = self._env.get_template(template_name)
            return template.render(**context).encode("utf-8")
        except TemplateError as e:
            raise RenderError(
                f"failed to render {template_name}: {e}",
                details={"template": template_name},
            ) from e

    def render_index(self, host: str, import_paths: Iterable[str]) -> bytes:
        """Render the index listing every import path in the given order."""
        return self._render(
            INDEX_TEMPLATE,
            title=self._title or host,
            description=self._description,
            import_paths=list(import_paths),
        )

    def render_vanity(
        self,
        import_path: str,
        repo: str,
        vcs: str,
        display: str,
        subdir: str = "",
    ) -> bytes:
        """Render the go-import / go-source page for a single import path."""
        return self._render(
            VANITY_TEMPLATE,
            import_path=import_path,
            repo=repo,
            vcs=vcs,
            display=display,
            subdir=subdir,
        )

    def render_entry(self, host: str, entry: PathEntry) -> bytes:
        return self.render_vanity(
            import_path=entry.import_path(host),
            repo=entry.repo,
            vcs=entry.vcs,
            display=entry.display,
            subdir=entry.subdir,
        )
