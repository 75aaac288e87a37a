"""Tests for the platform link panel builder."""

import pytest

from podcards.config.schema import DEFAULT_PLATFORM_ICONS
from podcards.render.links import LinkPanelBuilder, PlatformIconRegistry
from podcards.utils.tracking import TrackingParams, UrlAnnotator


@pytest.fixture
def builder() -> LinkPanelBuilder:
    return LinkPanelBuilder()


class TestPlatformIconRegistry:
    """Tests for PlatformIconRegistry."""

    def test_default_platforms(self) -> None:
        registry = PlatformIconRegistry()
        assert set(registry) == {"youtube", "spotify", "apple", "instagram", "tiktok", "substack"}
        assert registry["apple"].endswith("/applepodcasts.svg")

    def test_custom_icons(self) -> None:
        registry = PlatformIconRegistry({"mastodon": "https://icons/mastodon.svg"})
        assert list(registry) == ["mastodon"]
        assert len(registry) == 1

    def test_read_only(self) -> None:
        registry = PlatformIconRegistry()
        with pytest.raises(TypeError):
            registry["myspace"] = "x"  # type: ignore[index]

    def test_not_affected_by_source_mutation(self) -> None:
        icons = {"spotify": "https://icons/spotify.svg"}
        registry = PlatformIconRegistry(icons)

        icons["youtube"] = "https://icons/youtube.svg"

        assert "youtube" not in registry

    def test_empty_registry_allowed(self) -> None:
        assert len(PlatformIconRegistry({})) == 0


class TestLinkPanelBuilder:
    """Tests for LinkPanelBuilder.build."""

    @pytest.mark.parametrize("links", [None, {}])
    def test_absent_or_empty_links(self, builder: LinkPanelBuilder, links) -> None:
        assert builder.build(links) == ()

    def test_unknown_platforms_dropped(self, builder: LinkPanelBuilder) -> None:
        assert builder.build({"myspace": "https://myspace.com/tms"}) == ()

    def test_empty_and_non_string_urls_dropped(self, builder: LinkPanelBuilder) -> None:
        links = {"spotify": "", "youtube": None, "apple": 42}
        assert builder.build(links) == ()

    def test_declaration_order_preserved(self, builder: LinkPanelBuilder) -> None:
        links = {
            "tiktok": "https://tiktok.com/@tms",
            "myspace": "https://myspace.com/tms",
            "apple": "https://podcasts.apple.com/tms",
            "spotify": "https://open.spotify.com/show/tms",
        }

        units = builder.build(links)

        assert [u.platform for u in units] == ["tiktok", "apple", "spotify"]

    def test_link_unit_fields(self, builder: LinkPanelBuilder) -> None:
        (unit,) = builder.build({"spotify": "https://open.spotify.com/episode/abc"})

        assert unit.href == (
            "https://open.spotify.com/episode/abc"
            "?utm_source=tms.show&utm_medium=episode-card&utm_campaign=podcast-discovery"
        )
        assert unit.label == "Spotify"
        assert unit.icon_src == DEFAULT_PLATFORM_ICONS["spotify"]
        assert unit.target == "_blank"
        assert unit.rel == "noopener noreferrer"

    def test_each_url_annotated_once(self, builder: LinkPanelBuilder) -> None:
        (unit,) = builder.build({"youtube": "https://www.youtube.com/watch?v=dQw4w9WgXcQ"})
        assert unit.href.count("utm_source=") == 1
        assert "watch?v=dQw4w9WgXcQ&utm_source=" in unit.href

    def test_injected_registry_and_annotator(self) -> None:
        builder = LinkPanelBuilder(
            registry=PlatformIconRegistry({"mastodon": "https://icons/mastodon.svg"}),
            annotator=UrlAnnotator(TrackingParams(source="s", medium="m", campaign="c")),
        )

        units = builder.build({"mastodon": "https://m.social/@tms", "spotify": "https://s"})

        assert [u.platform for u in units] == ["mastodon"]
        assert units[0].href == "https://m.social/@tms?utm_source=s&utm_medium=m&utm_campaign=c"
        assert units[0].icon_src == "https://icons/mastodon.svg"
