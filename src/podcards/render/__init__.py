"""Episode card rendering: display units, builders, page mounting, and HTML output."""

from podcards.render.cards import DEFAULT_ICON, CardBuilder
from podcards.render.html import HtmlPublisher, discover_mount_points
from podcards.render.links import LinkPanelBuilder, PlatformIconRegistry
from podcards.render.page import Container, MountedUnit, Notice, NoticeKind, Page, ScrollRequest
from podcards.render.units import CardHeader, DisplayUnit, IconDirective, IconKind, LinkUnit
from podcards.render.view import RenderState, ViewRenderer, parse_episode_fragment

__all__ = [
    # Units
    "DisplayUnit",
    "CardHeader",
    "IconDirective",
    "IconKind",
    "LinkUnit",
    # Builders
    "CardBuilder",
    "LinkPanelBuilder",
    "PlatformIconRegistry",
    "DEFAULT_ICON",
    # Page
    "Page",
    "Container",
    "MountedUnit",
    "Notice",
    "NoticeKind",
    "ScrollRequest",
    # Rendering
    "ViewRenderer",
    "RenderState",
    "parse_episode_fragment",
    "HtmlPublisher",
    "discover_mount_points",
]
