"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from podcards.utils.tracking import TrackingParams

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

SIMPLE_ICONS_CDN = "https://cdn.jsdelivr.net/npm/simple-icons@13.21.0/icons"

DEFAULT_PLATFORM_ICONS: dict[str, str] = {
    "youtube": f"{SIMPLE_ICONS_CDN}/youtube.svg",
    "spotify": f"{SIMPLE_ICONS_CDN}/spotify.svg",
    "apple": f"{SIMPLE_ICONS_CDN}/applepodcasts.svg",
    "instagram": f"{SIMPLE_ICONS_CDN}/instagram.svg",
    "tiktok": f"{SIMPLE_ICONS_CDN}/tiktok.svg",
    "substack": f"{SIMPLE_ICONS_CDN}/substack.svg",
}


class RenderConfig(BaseModel):
    """Episode card rendering configuration."""

    container_id: str = "episodes-container"
    default_icon: str = "🎙️"

    # Deep-link navigation
    highlight_class: str = "highlighted"
    scroll_offset: int = -80  # Pixels from the top of the viewport
    settle_delay_seconds: float = Field(default=0.1, ge=0)

    # User-visible notices
    loading_text: str = "Loading episodes..."
    empty_text: str = "Unable to load episodes. Please check your connection and try again."


class SiteConfig(BaseModel):
    """Global podcards configuration."""

    version: str = "1"
    log_level: LogLevel = "INFO"

    # Data endpoint: http(s) URL or path relative to static_dir
    episodes_endpoint: str = "/episodes.json"
    request_timeout_seconds: float | None = None  # None: wait indefinitely

    # Build layout
    static_dir: Path = Field(default=Path("public"))
    output_dir: Path = Field(default=Path("_site"))
    template: Path | None = None  # None: use the bundled page template
    site_title: str = "The Meaningful Shit Show"
    site_description: str = ""

    platform_icons: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_PLATFORM_ICONS)
    )
    tracking: TrackingParams = Field(default_factory=TrackingParams)
    render: RenderConfig = Field(default_factory=RenderConfig)
