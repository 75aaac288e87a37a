"""Site build pipeline.

Wires configuration, the episode source, the view renderer, and the HTML
publisher into a single build run. Invoked once per build.
"""

import logging
from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict, Field

from podcards.config.schema import SiteConfig
from podcards.episodes.source import EpisodeSource
from podcards.render.cards import CardBuilder
from podcards.render.html import HtmlPublisher
from podcards.render.links import LinkPanelBuilder, PlatformIconRegistry
from podcards.render.page import Page
from podcards.render.view import RenderState, ViewRenderer
from podcards.utils.tracking import UrlAnnotator

logger = logging.getLogger(__name__)


class BuildOptions(BaseModel):
    """Per-run overrides for a site build."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    base_dir: Path = Field(default_factory=Path.cwd, description="Root for relative paths")
    endpoint: str | None = Field(None, description="Override episodes endpoint")
    output_dir: Path | None = Field(None, description="Override output directory")
    template: Path | None = Field(None, description="Override page template")
    fragment: str | None = Field(None, description="Fragment to resolve, e.g. '#ep2'")
    copy_static: bool = Field(True, description="Copy the static directory to the output")
    transport: httpx.AsyncBaseTransport | None = Field(
        None, description="httpx transport for the episodes fetch"
    )


class BuildResult(BaseModel):
    """Outcome of a site build."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    state: RenderState
    output_file: Path
    episode_count: int = Field(0, ge=0)
    static_files: int = Field(0, ge=0)
    highlighted: str | None = None

    @property
    def succeeded(self) -> bool:
        """A build succeeds when the page left the loading state."""
        return self.state != RenderState.LOADING


def create_card_builder(config: SiteConfig) -> CardBuilder:
    """Assemble the card builder from site configuration."""
    registry = PlatformIconRegistry(config.platform_icons)
    annotator = UrlAnnotator(config.tracking)
    return CardBuilder(
        link_builder=LinkPanelBuilder(registry=registry, annotator=annotator),
        default_icon=config.render.default_icon,
    )


class SiteBuilder:
    """Build the episodes page from a site configuration.

    Example:
        >>> builder = SiteBuilder(config)
        >>> result = await builder.build(BuildOptions(fragment="#ep3"))
        >>> result.output_file
        PosixPath('_site/index.html')
    """

    def __init__(self, config: SiteConfig):
        self.config = config

    def _resolve(self, path: Path, base_dir: Path) -> Path:
        path = path.expanduser()
        return path if path.is_absolute() else base_dir / path

    def create_source(self, options: BuildOptions) -> EpisodeSource:
        return EpisodeSource(
            endpoint=options.endpoint or self.config.episodes_endpoint,
            base_dir=self._resolve(self.config.static_dir, options.base_dir),
            timeout=self.config.request_timeout_seconds,
            transport=options.transport,
        )

    def create_publisher(self, options: BuildOptions) -> HtmlPublisher:
        template = options.template or self.config.template
        if template is not None:
            template = self._resolve(template, options.base_dir)
        return HtmlPublisher(self.config, template_path=template)

    async def render_page(self, options: BuildOptions, publisher: HtmlPublisher) -> tuple[Page, RenderState]:
        """Run the view renderer against a fresh page."""
        page = publisher.create_page(fragment=options.fragment)
        renderer = ViewRenderer(
            source=self.create_source(options),
            page=page,
            card_builder=create_card_builder(self.config),
            config=self.config.render,
        )
        state = await renderer.render()
        return page, state

    async def build(self, options: BuildOptions | None = None) -> BuildResult:
        """Render the page and write it to the output directory.

        Raises:
            PublishError: If the template is missing or output cannot be written
        """
        options = options or BuildOptions()
        output_dir = self._resolve(options.output_dir or self.config.output_dir, options.base_dir)

        publisher = self.create_publisher(options)
        page, state = await self.render_page(options, publisher)

        static_files = 0
        if options.copy_static:
            static_dir = self._resolve(self.config.static_dir, options.base_dir)
            static_files = publisher.copy_static(static_dir, output_dir)

        output_file = publisher.write(page, output_dir)

        highlighted = page.scroll.anchor if page.scroll else None
        return BuildResult(
            state=state,
            output_file=output_file,
            episode_count=len(page.units()),
            static_files=static_files,
            highlighted=highlighted,
        )
