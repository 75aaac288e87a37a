"""Display ordering for episode records."""

from collections.abc import Iterable

from podcards.episodes.models import EpisodeRecord


def order_episodes(records: Iterable[EpisodeRecord]) -> list[EpisodeRecord]:
    """Order episodes newest first (descending episode number).

    ``sorted`` is stable, so records sharing an episode number keep their
    relative input order. The input is not modified.

    Args:
        records: Episode records in source order

    Returns:
        New list in display order
    """
    return sorted(records, key=lambda record: record.episode_number, reverse=True)
