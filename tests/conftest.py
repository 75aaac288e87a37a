"""Shared fixtures for podcards tests."""

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from podcards.episodes.models import EpisodeRecord


@pytest.fixture
def episodes_data() -> dict[str, Any]:
    """Episodes document with mixed optional fields, in non-display order."""
    return {
        "episodes": [
            {
                "episode": 1,
                "title": "Pilot",
                "description": "Where it all started.",
                "icon": "🎧",
                "links": {
                    "spotify": "https://open.spotify.com/episode/abc",
                    "youtube": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
                },
            },
            {
                "episode": 3,
                "title": "Third Time",
                "icon": "https://cdn.example.com/ep3.png",
                "links": {"myspace": "https://myspace.com/tms"},
            },
            {
                "episode": 2,
                "title": "Second Wind",
                "description": "   ",
            },
        ]
    }


@pytest.fixture
def episode_records(episodes_data: dict[str, Any]) -> list[EpisodeRecord]:
    """Episode records parsed from episodes_data."""
    return [EpisodeRecord.model_validate(item) for item in episodes_data["episodes"]]


@pytest.fixture
def site_dir(tmp_path: Path, episodes_data: dict[str, Any]) -> Path:
    """Site directory with public/episodes.json and a stylesheet."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "episodes.json").write_text(json.dumps(episodes_data), encoding="utf-8")
    (public / "styles.css").write_text(".episode-card { margin: 0; }\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def sample_config_dict() -> dict[str, Any]:
    """Minimal valid podcards.yaml content."""
    return {
        "version": "1",
        "log_level": "DEBUG",
        "episodes_endpoint": "/episodes.json",
        "site_title": "Test Show",
        "tracking": {"source": "test.show", "medium": "card", "campaign": "tests"},
        "render": {"scroll_offset": -40},
    }


@pytest.fixture(autouse=True)
def reset_podcards_logger():
    """Undo setup_logging so caplog sees podcards records in every test."""
    yield
    logger = logging.getLogger("podcards")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
