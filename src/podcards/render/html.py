"""HTML publishing for rendered pages.

Serializes a mounted Page through a Jinja2 page template. Templates declare
their mount points by calling ``mount_point("<id>")``; the publisher scans
the template source, and the sources it includes or imports, for those
calls to build an empty Page before rendering.
"""

import logging
import re
import shutil
from pathlib import Path
from typing import Any

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    TemplateError,
    meta,
    select_autoescape,
)

from podcards.config.schema import SiteConfig
from podcards.render.page import MountedChild, Page
from podcards.utils.errors import PublishError
from podcards.utils.filters import register_filters

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_NAME = "index.html.j2"
OUTPUT_FILENAME = "index.html"

MOUNT_POINT_PATTERN = re.compile(r"""mount_point\(\s*["']([\w:.-]+)["']\s*\)""")


def discover_mount_points(template_source: str) -> list[str]:
    """Find mount point ids declared in a template, in order of appearance."""
    seen: dict[str, None] = {}
    for match in MOUNT_POINT_PATTERN.finditer(template_source):
        seen.setdefault(match.group(1), None)
    return list(seen)


class HtmlPublisher:
    """Render pages to HTML files.

    Example:
        >>> publisher = HtmlPublisher(config)
        >>> page = publisher.create_page(fragment="#ep2")
        >>> # ... ViewRenderer(source, page).render() ...
        >>> publisher.write(page, Path("_site"))
        PosixPath('_site/index.html')
    """

    def __init__(self, config: SiteConfig | None = None, template_path: Path | None = None):
        """Initialize the publisher.

        Args:
            config: Site configuration (title, description)
            template_path: Page template; the bundled template is used when None
        """
        self.config = config or SiteConfig()
        self.template_path = template_path

        loaders = [PackageLoader("podcards", "templates")]
        if template_path is not None:
            loaders.insert(0, FileSystemLoader(str(template_path.parent)))
            self.template_name = template_path.name
        else:
            self.template_name = DEFAULT_TEMPLATE_NAME

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(
                enabled_extensions=("html", "htm", "xml", "j2"),
                default_for_string=True,
            ),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        register_filters(self.env)

    def template_source(self, name: str | None = None) -> str:
        """Raw source of the page template, or of another template by name.

        Raises:
            PublishError: If the template cannot be found
        """
        name = name or self.template_name
        try:
            source, _, _ = self.env.loader.get_source(self.env, name)
        except TemplateError as e:
            raise PublishError(f"Page template '{name}' not found: {e}") from e
        return source

    def template_sources(self) -> list[str]:
        """Sources of the page template and every template it pulls in.

        Follows ``include``, ``import``, ``from`` and ``extends`` references
        with literal names, page template first. Names computed at render
        time cannot be followed.

        Raises:
            PublishError: If a referenced template is missing or does not parse
        """
        sources: list[str] = []
        seen: set[str] = set()
        pending = [self.template_name]
        while pending:
            name = pending.pop(0)
            if name in seen:
                continue
            seen.add(name)

            source = self.template_source(name)
            try:
                ast = self.env.parse(source, name=name)
            except TemplateError as e:
                raise PublishError(f"Failed to parse template '{name}': {e}") from e

            sources.append(source)
            pending.extend(ref for ref in meta.find_referenced_templates(ast) if ref)
        return sources

    def create_page(self, fragment: str | None = None) -> Page:
        """Create an empty page with the mount points of the template and its includes."""
        mount_points = discover_mount_points("\n".join(self.template_sources()))
        logger.debug(f"Template {self.template_name} declares mount points: {mount_points}")
        return Page(mount_points, fragment=fragment)

    def render(self, page: Page, **context: Any) -> str:
        """Render a mounted page to an HTML string.

        Raises:
            PublishError: If template rendering fails
        """

        def mount_point(container_id: str) -> list[MountedChild]:
            return page.container(container_id).children

        try:
            template = self.env.get_template(self.template_name)
            return template.render(
                site=self.config,
                page=page,
                units=page.units(),
                scroll=page.scroll,
                mount_point=mount_point,
                **context,
            )
        except TemplateError as e:
            raise PublishError(f"Failed to render {self.template_name}: {e}") from e

    def write(self, page: Page, output_dir: Path, **context: Any) -> Path:
        """Render a page and write it as ``index.html`` under ``output_dir``.

        Raises:
            PublishError: If rendering or writing fails
        """
        html = self.render(page, **context)
        output_file = output_dir / OUTPUT_FILENAME
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            output_file.write_text(html, encoding="utf-8")
        except OSError as e:
            raise PublishError(f"Failed to write {output_file}: {e}") from e

        logger.info(f"Wrote {output_file}")
        return output_file

    @staticmethod
    def copy_static(static_dir: Path, output_dir: Path) -> int:
        """Copy static assets into the output directory unchanged.

        Args:
            static_dir: Source directory (skipped when missing)
            output_dir: Destination directory

        Returns:
            Number of files copied

        Raises:
            PublishError: If copying fails
        """
        if not static_dir.is_dir():
            logger.debug(f"No static directory at {static_dir}, skipping copy")
            return 0

        try:
            shutil.copytree(static_dir, output_dir, dirs_exist_ok=True)
        except (OSError, shutil.Error) as e:
            raise PublishError(f"Failed to copy static files from {static_dir}: {e}") from e

        count = sum(1 for path in static_dir.rglob("*") if path.is_file())
        logger.debug(f"Copied {count} static file(s) to {output_dir}")
        return count
