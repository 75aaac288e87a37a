"""Configuration loading and logging setup for podcards."""

from podcards.config.manager import ConfigManager
from podcards.config.schema import DEFAULT_PLATFORM_ICONS, RenderConfig, SiteConfig

__all__ = ["ConfigManager", "SiteConfig", "RenderConfig", "DEFAULT_PLATFORM_ICONS"]
