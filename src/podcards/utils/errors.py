"""Custom exceptions for podcards."""


class PodcardsError(Exception):
    """Base exception for all podcards errors."""

    pass


class ConfigError(PodcardsError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class EpisodeSourceError(PodcardsError):
    """Episode data could not be obtained."""

    pass


class EpisodeFetchError(EpisodeSourceError):
    """Transport failure or non-success response from the episodes endpoint."""

    pass


class EpisodeDecodeError(EpisodeSourceError):
    """Episodes document is not valid JSON or does not match the schema."""

    pass


class RenderError(PodcardsError):
    """Rendering errors."""

    pass


class MountPointNotFoundError(RenderError):
    """The page has no container with the requested id."""

    pass


class RenderStateError(RenderError):
    """Render pass invoked more than once for the same page."""

    pass


class PublishError(PodcardsError):
    """Writing the rendered page to disk failed."""

    pass
