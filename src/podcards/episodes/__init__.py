"""Episode records: retrieval and display ordering."""

from podcards.episodes.models import EpisodeRecord, EpisodesDocument
from podcards.episodes.ordering import order_episodes
from podcards.episodes.source import EpisodeSource

__all__ = ["EpisodeRecord", "EpisodesDocument", "EpisodeSource", "order_episodes"]
