"""Configuration manager for loading and saving podcards config."""

from pathlib import Path

import yaml

from podcards.config.defaults import DEFAULT_SITE_CONFIG, get_default_config_content
from podcards.config.schema import SiteConfig
from podcards.utils.errors import ConfigError, InvalidConfigError

DEFAULT_CONFIG_FILENAME = "podcards.yaml"


class ConfigManager:
    """Manages the podcards site configuration file."""

    def __init__(self, config_file: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_file: Optional config file path. Defaults to ./podcards.yaml.
        """
        self.config_file = config_file or Path.cwd() / DEFAULT_CONFIG_FILENAME

    @property
    def base_dir(self) -> Path:
        """Directory relative paths in the config are resolved against."""
        return self.config_file.parent

    def load_config(self) -> SiteConfig:
        """Load and validate site configuration.

        A missing file is not an error: the defaults are returned.

        Returns:
            Validated SiteConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            return DEFAULT_SITE_CONFIG.model_copy(deep=True)

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return SiteConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: SiteConfig) -> None:
        """Save site configuration.

        Args:
            config: SiteConfig instance to save
        """
        data = config.model_dump(mode="json")

        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                data, f, default_flow_style=False, sort_keys=False, allow_unicode=True
            )

    def init_config(self, force: bool = False) -> Path:
        """Write the default configuration file.

        Args:
            force: Overwrite an existing file

        Returns:
            Path to the written file

        Raises:
            ConfigError: If the file exists and force is False
        """
        if self.config_file.exists() and not force:
            raise ConfigError(
                f"Config file already exists: {self.config_file}. Use --force to overwrite."
            )

        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content(), encoding="utf-8")
        return self.config_file
