"""Data models for podcast episode records."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EpisodeRecord(BaseModel):
    """A single podcast episode as supplied by the episodes endpoint.

    Only ``episode`` is required. Everything else is optional and checked
    for presence at render time. Optional fields of the wrong type are
    coerced rather than rejected: a missing or null title becomes ``""``
    and a non-string description or icon is dropped, so one malformed
    field hides a section instead of failing the whole document.

    Example:
        >>> record = EpisodeRecord.model_validate(
        ...     {"episode": 3, "title": "Pilot", "links": {"spotify": "https://..."}}
        ... )
        >>> record.anchor
        'ep3'
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    episode_number: int = Field(..., alias="episode", description="Episode number (identity key)")
    title: str = Field(default="", description="Episode title")
    description: str | None = Field(default=None, description="Optional episode description")
    icon: str | None = Field(default=None, description="Icon URL or glyph")
    links: dict[str, Any] | None = Field(
        default=None, description="Platform name to URL, in declaration order"
    )

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value if isinstance(value, str) else ""

    @field_validator("description", "icon", mode="before")
    @classmethod
    def _drop_non_string(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None

    @field_validator("links", mode="before")
    @classmethod
    def _drop_non_mapping_links(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @property
    def anchor(self) -> str:
        """Fragment identifier for this episode (``ep<N>``)."""
        return f"ep{self.episode_number}"

    @property
    def has_description(self) -> bool:
        """Check if the description has any non-whitespace content."""
        return bool(self.description and self.description.strip())


class EpisodesDocument(BaseModel):
    """Top-level shape of the episodes JSON document."""

    model_config = ConfigDict(extra="ignore")

    episodes: list[EpisodeRecord] = Field(default_factory=list)

    @field_validator("episodes", mode="before")
    @classmethod
    def _null_episodes_as_empty(cls, value: Any) -> Any:
        return value or []
