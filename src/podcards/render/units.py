"""Display unit tree for episode cards.

A display unit is an immutable description of one rendered episode card.
Builders produce these trees without touching the page; mounting them is a
separate step (see ``podcards.render.page``).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class IconKind(str, Enum):
    """How an episode icon is displayed."""

    IMAGE = "image"  # <img src=...>
    TEXT = "text"  # Literal glyph or emoji


class _Unit(BaseModel):
    model_config = ConfigDict(frozen=True)


class IconDirective(_Unit):
    """Render-as-image or render-as-text instruction for the card icon."""

    kind: IconKind
    value: str = Field(..., description="Image URL or literal glyph")
    alt: str = Field(default="", description="Alternative text for images")


class CardHeader(_Unit):
    """Icon, ordinal label, and title shown at the top of a card."""

    icon: IconDirective
    label: str = Field(..., description="Ordinal label, e.g. 'Episode 3'")
    title: str


class LinkUnit(_Unit):
    """One outbound platform link.

    Always opens in a new browsing context without passing opener or
    referrer information.
    """

    platform: str
    href: str = Field(..., description="Annotated outbound URL")
    label: str = Field(..., description="Platform name, capitalized")
    icon_src: str = Field(..., description="Platform icon asset URL")
    target: str = "_blank"
    rel: str = "noopener noreferrer"


class DisplayUnit(_Unit):
    """A complete episode card.

    ``links`` is either None or non-empty; an empty link panel is never
    attached.
    """

    anchor: str = Field(..., description="Fragment identifier, 'ep<N>'")
    episode_number: int
    header: CardHeader
    description: str | None = None
    links: tuple[LinkUnit, ...] | None = None

    @property
    def has_links(self) -> bool:
        """Check if the card carries a link panel."""
        return bool(self.links)
