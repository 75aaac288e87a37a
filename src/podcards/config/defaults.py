"""Default configuration values."""

import yaml

from podcards.config.schema import SiteConfig

DEFAULT_SITE_CONFIG = SiteConfig()


def get_default_config_content() -> str:
    """Get default podcards.yaml content.

    Returns:
        YAML string with a commented header
    """
    data = DEFAULT_SITE_CONFIG.model_dump(mode="json")
    body = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return "# podcards configuration\n" + body
