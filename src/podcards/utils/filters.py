"""Build-time text and URL filters for page templates.

These are pure functions registered on the Jinja2 environment that renders
the page. They are exposed both under the camelCase names used by existing
site templates and under snake_case names.
"""

import re
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment

from podcards.utils.tracking import DEFAULT_TRACKING_PARAMS, TrackingParams, UrlAnnotator

# 11-character video id after "v=" or a path separator
YOUTUBE_ID_PATTERN = re.compile(r"(?:v=|/)([\w-]{11})(?:\?|&|$)", re.ASCII)

_JSON_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def youtube_id(url: str | None) -> str | None:
    """Extract a YouTube video ID from a URL.

    Args:
        url: Video URL (watch, short, or embed form)

    Returns:
        The 11-character video ID, or None if the URL does not match
    """
    if not url:
        return None
    match = YOUTUBE_ID_PATTERN.search(url)
    return match.group(1) if match else None


def add_utm(url: str | None, episode: Any, medium: str = "episode-page") -> str | None:
    """Append tracking parameters for a specific episode page.

    Args:
        url: Outbound URL
        episode: Episode number, used as the campaign (``ep<episode>``)
        medium: utm_medium value

    Returns:
        Annotated URL, or the input unchanged when it is empty
    """
    context = TrackingParams(
        source=DEFAULT_TRACKING_PARAMS.source,
        medium=medium,
        campaign=f"ep{episode}",
    )
    return UrlAnnotator().annotate(url, context=context)


def json_escape(text: str | None) -> str:
    """Escape text for embedding inside a JSON string literal."""
    if not text:
        return ""
    for raw, escaped in _JSON_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def truncate(text: str | None, length: int) -> str | None:
    """Truncate text to at most ``length`` characters, ending with an ellipsis.

    Examples:
        >>> truncate("hello world", 8)
        'hello...'
    """
    if not text or len(text) <= length:
        return text
    return text[: max(length - 3, 0)].strip() + "..."


def is_url(value: str | None) -> bool:
    """Check whether a string begins with an HTTP scheme."""
    return bool(value) and value.startswith("http")


def has_values(mapping: Mapping[str, Any] | None) -> bool:
    """Check whether any value in a mapping is truthy."""
    if not mapping:
        return False
    return any(mapping.values())


def capitalize(value: str | None) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    if not value:
        return ""
    return value[0].upper() + value[1:]


FILTERS = {
    "youtubeId": youtube_id,
    "addUtm": add_utm,
    "jsonEscape": json_escape,
    "truncate": truncate,
    "isUrl": is_url,
    "hasValues": has_values,
    "capitalize": capitalize,
    "youtube_id": youtube_id,
    "add_utm": add_utm,
    "json_escape": json_escape,
    "is_url": is_url,
    "has_values": has_values,
}


def register_filters(env: Environment) -> Environment:
    """Register all build-time filters on a Jinja2 environment.

    Overrides Jinja2's built-in ``truncate`` and ``capitalize``.

    Args:
        env: Environment to update

    Returns:
        The same environment, for chaining
    """
    env.filters.update(FILTERS)
    return env
