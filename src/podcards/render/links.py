"""Platform link panel construction."""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from podcards.config.schema import DEFAULT_PLATFORM_ICONS
from podcards.render.units import LinkUnit
from podcards.utils.filters import capitalize
from podcards.utils.tracking import UrlAnnotator

logger = logging.getLogger(__name__)


class PlatformIconRegistry(Mapping[str, str]):
    """Read-only mapping of known platform names to icon asset URLs.

    The set of platforms is closed: it is fixed when the registry is created
    and cannot be changed afterwards.

    Example:
        >>> registry = PlatformIconRegistry()
        >>> "spotify" in registry
        True
        >>> "myspace" in registry
        False
    """

    def __init__(self, icons: Mapping[str, str] | None = None) -> None:
        """Initialize the registry.

        Args:
            icons: Platform name to icon URL (defaults to DEFAULT_PLATFORM_ICONS)
        """
        source = DEFAULT_PLATFORM_ICONS if icons is None else icons
        self._icons = MappingProxyType(dict(source))

    def __getitem__(self, platform: str) -> str:
        return self._icons[platform]

    def __iter__(self) -> Iterator[str]:
        return iter(self._icons)

    def __len__(self) -> int:
        return len(self._icons)

    def __repr__(self) -> str:
        return f"PlatformIconRegistry({sorted(self._icons)})"


class LinkPanelBuilder:
    """Build the outbound link panel for an episode card.

    Entries are kept in the order they are declared in the episode data.
    Unknown platforms and empty URLs are dropped silently.
    """

    def __init__(
        self,
        registry: PlatformIconRegistry | None = None,
        annotator: UrlAnnotator | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            registry: Known platforms and their icons
            annotator: Tracking parameter annotator for outbound URLs
        """
        self.registry = registry if registry is not None else PlatformIconRegistry()
        self.annotator = annotator or UrlAnnotator()

    def build(self, links: Mapping[str, Any] | None) -> tuple[LinkUnit, ...]:
        """Build link units for a platform-to-URL mapping.

        Args:
            links: Platform name to URL, or None

        Returns:
            Link units in declaration order; empty when nothing qualifies
        """
        if not links:
            return ()

        units = []
        for platform, url in links.items():
            if not isinstance(url, str) or not url:
                continue
            if platform not in self.registry:
                logger.debug(f"Skipping link for unknown platform '{platform}'")
                continue

            units.append(
                LinkUnit(
                    platform=platform,
                    href=self.annotator.annotate(url),
                    label=capitalize(platform),
                    icon_src=self.registry[platform],
                )
            )

        return tuple(units)
