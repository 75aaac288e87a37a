"""Utility functions and helpers for podcards."""

from podcards.utils.errors import (
    ConfigError,
    EpisodeDecodeError,
    EpisodeFetchError,
    EpisodeSourceError,
    InvalidConfigError,
    MountPointNotFoundError,
    PodcardsError,
    PublishError,
    RenderError,
    RenderStateError,
)
from podcards.utils.tracking import DEFAULT_TRACKING_PARAMS, TrackingParams, UrlAnnotator

__all__ = [
    # Errors
    "PodcardsError",
    "ConfigError",
    "InvalidConfigError",
    "EpisodeSourceError",
    "EpisodeFetchError",
    "EpisodeDecodeError",
    "RenderError",
    "MountPointNotFoundError",
    "RenderStateError",
    "PublishError",
    # Tracking
    "TrackingParams",
    "UrlAnnotator",
    "DEFAULT_TRACKING_PARAMS",
]
