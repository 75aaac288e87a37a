"""Tracking parameters for outbound links.

Every outbound platform link on an episode card carries the same fixed set
of UTM parameters so that traffic can be attributed to the site.
"""

from pydantic import BaseModel, ConfigDict, Field


class TrackingParams(BaseModel):
    """UTM parameter values appended to outbound URLs."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(default="tms.show", min_length=1, description="utm_source value")
    medium: str = Field(default="episode-card", min_length=1, description="utm_medium value")
    campaign: str = Field(
        default="podcast-discovery", min_length=1, description="utm_campaign value"
    )

    @property
    def query_string(self) -> str:
        """Render as a query string (without leading separator)."""
        return (
            f"utm_source={self.source}"
            f"&utm_medium={self.medium}"
            f"&utm_campaign={self.campaign}"
        )


DEFAULT_TRACKING_PARAMS = TrackingParams()


class UrlAnnotator:
    """Append tracking parameters to outbound URLs.

    The annotation is not idempotent: running it twice on the same URL
    duplicates the parameters, so each URL must be annotated exactly once
    per render.

    Example:
        >>> annotator = UrlAnnotator()
        >>> annotator.annotate("https://a.com/p")
        'https://a.com/p?utm_source=tms.show&utm_medium=episode-card&utm_campaign=podcast-discovery'
    """

    def __init__(self, params: TrackingParams | None = None) -> None:
        """Initialize the annotator.

        Args:
            params: Tracking parameters (defaults to DEFAULT_TRACKING_PARAMS)
        """
        self.params = params or DEFAULT_TRACKING_PARAMS

    def annotate(self, url: str | None, context: TrackingParams | None = None) -> str | None:
        """Append tracking parameters to a URL.

        Args:
            url: Outbound URL. Empty or None is returned unchanged.
            context: Optional parameters overriding the annotator's own for this call

        Returns:
            URL with tracking parameters appended
        """
        if not url:
            return url

        params = context or self.params
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{params.query_string}"
