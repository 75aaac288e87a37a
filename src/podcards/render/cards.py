"""Episode card construction.

Maps one episode record to an immutable DisplayUnit. Each optional field has
its own presence rule; a missing field omits its section instead of raising.
"""

from podcards.episodes.models import EpisodeRecord
from podcards.render.links import LinkPanelBuilder
from podcards.render.units import CardHeader, DisplayUnit, IconDirective, IconKind

DEFAULT_ICON = "🎙️"

_IMAGE_SCHEMES = ("http://", "https://")


class CardBuilder:
    """Build display units from episode records.

    Example:
        >>> builder = CardBuilder()
        >>> unit = builder.build(EpisodeRecord(episode=2, title="Second"))
        >>> unit.anchor, unit.header.icon.value
        ('ep2', '🎙️')
    """

    def __init__(
        self,
        link_builder: LinkPanelBuilder | None = None,
        default_icon: str = DEFAULT_ICON,
    ) -> None:
        """Initialize the card builder.

        Args:
            link_builder: Builder for the platform link panel
            default_icon: Glyph shown when a record has no icon
        """
        self.link_builder = link_builder or LinkPanelBuilder()
        self.default_icon = default_icon

    def build(self, record: EpisodeRecord) -> DisplayUnit:
        """Build the display unit for one episode.

        Args:
            record: Episode record

        Returns:
            DisplayUnit with description and link panel only when present
        """
        header = CardHeader(
            icon=self.resolve_icon(record),
            label=f"Episode {record.episode_number}",
            title=record.title,
        )

        links = self.link_builder.build(record.links)

        return DisplayUnit(
            anchor=record.anchor,
            episode_number=record.episode_number,
            header=header,
            description=record.description if record.has_description else None,
            links=links or None,
        )

    def resolve_icon(self, record: EpisodeRecord) -> IconDirective:
        """Decide how the episode icon is displayed.

        URLs become images, any other non-empty value is shown as text, and
        records without an icon get the default glyph.
        """
        icon = record.icon
        if icon and icon.startswith(_IMAGE_SCHEMES):
            return IconDirective(
                kind=IconKind.IMAGE,
                value=icon,
                alt=f"Episode {record.episode_number} icon",
            )
        if icon:
            return IconDirective(kind=IconKind.TEXT, value=icon)
        return IconDirective(kind=IconKind.TEXT, value=self.default_icon)
