"""View renderer: load episodes, build cards, mount them, resolve deep links.

A render runs exactly once per page::

    LOADING --(episodes)--> RENDERED --> deep-link resolution
    LOADING --(nothing)---> EMPTY

A fetch failure and a genuinely empty collection are shown the same way.
"""

import asyncio
import logging
import re
from enum import Enum

from podcards.config.schema import RenderConfig
from podcards.episodes.ordering import order_episodes
from podcards.episodes.source import EpisodeSource
from podcards.render.cards import CardBuilder
from podcards.render.page import MountedUnit, Notice, NoticeKind, Page
from podcards.utils.errors import MountPointNotFoundError, RenderStateError

logger = logging.getLogger(__name__)

# Only "#ep<N>" fragments address episode cards
EPISODE_FRAGMENT_PATTERN = re.compile(r"^#?(ep\d+)$")


class RenderState(str, Enum):
    """Lifecycle of a single render pass."""

    LOADING = "loading"
    RENDERED = "rendered"
    EMPTY = "empty"


def parse_episode_fragment(fragment: str | None) -> str | None:
    """Extract the card anchor from a fragment identifier.

    Args:
        fragment: Fragment with or without the leading '#'

    Returns:
        Anchor such as ``ep12``, or None for any other fragment
    """
    if not fragment:
        return None
    match = EPISODE_FRAGMENT_PATTERN.match(fragment.strip())
    return match.group(1) if match else None


class ViewRenderer:
    """Orchestrate one render pass of the episodes page.

    Example:
        >>> renderer = ViewRenderer(source, page)
        >>> state = await renderer.render()
        >>> state
        <RenderState.RENDERED: 'rendered'>
    """

    def __init__(
        self,
        source: EpisodeSource,
        page: Page,
        card_builder: CardBuilder | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            source: Where episodes come from
            page: Page to mount into
            card_builder: Builder for display units
            config: Render settings (container id, notices, deep-link behaviour)
        """
        self.source = source
        self.page = page
        self.config = config or RenderConfig()
        self.card_builder = card_builder or CardBuilder(default_icon=self.config.default_icon)
        self.state = RenderState.LOADING
        self._started = False

    async def render(self, fragment: str | None = None) -> RenderState:
        """Run the render pass.

        Args:
            fragment: Fragment to resolve after rendering (defaults to the page's)

        Returns:
            Final state. LOADING means the mount point was missing.

        Raises:
            RenderStateError: If called more than once
        """
        if self._started:
            raise RenderStateError("Render already performed for this page")
        self._started = True

        try:
            container = self.page.container(self.config.container_id)
        except MountPointNotFoundError as e:
            logger.error(f"Cannot render episodes: {e}")
            return self.state

        container.replace([Notice(kind=NoticeKind.LOADING, text=self.config.loading_text)])

        episodes = await self.source.fetch_episodes()

        if not episodes:
            logger.warning("No episodes to render")
            container.replace([Notice(kind=NoticeKind.EMPTY, text=self.config.empty_text)])
            self.state = RenderState.EMPTY
            return self.state

        units = [self.card_builder.build(record) for record in order_episodes(episodes)]
        container.replace(units)
        self.state = RenderState.RENDERED
        logger.info(f"Rendered {len(units)} episode card(s)")

        await self.resolve_deep_link(fragment if fragment is not None else self.page.fragment)
        return self.state

    async def resolve_deep_link(self, fragment: str | None) -> MountedUnit | None:
        """Highlight and scroll to the card addressed by ``fragment``.

        Waits for the page's layout-settle signal, or a short fixed delay when
        the page has none, before touching the highlight.

        Args:
            fragment: Fragment identifier, e.g. ``#ep2``

        Returns:
            The highlighted unit, or None when nothing matched
        """
        anchor = parse_episode_fragment(fragment)
        if anchor is None:
            if fragment:
                logger.debug(f"Ignoring fragment {fragment!r}")
            return None

        target = self.page.find_unit(anchor)
        if target is None:
            logger.debug(f"No episode card for fragment #{anchor}")
            return None

        settled = self.page.layout_settled()
        if settled is not None:
            await settled
        else:
            await asyncio.sleep(self.config.settle_delay_seconds)

        highlight = self.config.highlight_class
        for unit in self.page.units():
            unit.classes.discard(highlight)
        target.classes.add(highlight)

        self.page.scroll_into_view(anchor, offset=self.config.scroll_offset)
        return target
