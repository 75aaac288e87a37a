"""Tests for outbound URL tracking parameters."""

import pytest
from pydantic import ValidationError

from podcards.utils.tracking import DEFAULT_TRACKING_PARAMS, TrackingParams, UrlAnnotator

DEFAULT_QUERY = "utm_source=tms.show&utm_medium=episode-card&utm_campaign=podcast-discovery"


class TestTrackingParams:
    """Tests for TrackingParams model."""

    def test_defaults(self) -> None:
        """Default values match the site's attribution scheme."""
        assert DEFAULT_TRACKING_PARAMS.source == "tms.show"
        assert DEFAULT_TRACKING_PARAMS.medium == "episode-card"
        assert DEFAULT_TRACKING_PARAMS.campaign == "podcast-discovery"

    def test_query_string_order(self) -> None:
        """Parameters render as source, medium, campaign."""
        params = TrackingParams(source="s", medium="m", campaign="c")
        assert params.query_string == "utm_source=s&utm_medium=m&utm_campaign=c"

    def test_frozen(self) -> None:
        """Tracking params cannot be changed after creation."""
        with pytest.raises(ValidationError):
            DEFAULT_TRACKING_PARAMS.source = "other"  # type: ignore[misc]

    def test_empty_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TrackingParams(source="")


class TestUrlAnnotator:
    """Tests for UrlAnnotator."""

    def test_url_without_query_uses_question_mark(self) -> None:
        annotator = UrlAnnotator()
        assert annotator.annotate("https://a.com/p") == f"https://a.com/p?{DEFAULT_QUERY}"

    def test_url_with_query_uses_ampersand(self) -> None:
        annotator = UrlAnnotator()
        assert annotator.annotate("https://a.com/p?x=1") == f"https://a.com/p?x=1&{DEFAULT_QUERY}"

    @pytest.mark.parametrize("url", ["", None])
    def test_empty_url_unchanged(self, url: str | None) -> None:
        assert UrlAnnotator().annotate(url) == url

    def test_custom_params(self) -> None:
        annotator = UrlAnnotator(TrackingParams(source="s", medium="m", campaign="c"))
        assert annotator.annotate("https://a.com") == "https://a.com?utm_source=s&utm_medium=m&utm_campaign=c"

    def test_context_overrides_params_for_one_call(self) -> None:
        annotator = UrlAnnotator()
        context = TrackingParams(medium="episode-page", campaign="ep4")

        annotated = annotator.annotate("https://a.com", context=context)

        assert annotated == "https://a.com?utm_source=tms.show&utm_medium=episode-page&utm_campaign=ep4"
        assert annotator.annotate("https://a.com") == f"https://a.com?{DEFAULT_QUERY}"

    def test_annotating_twice_duplicates_parameters(self) -> None:
        """Annotation is not idempotent; callers must annotate once."""
        annotator = UrlAnnotator()
        twice = annotator.annotate(annotator.annotate("https://a.com/p"))
        assert twice.count("utm_source=") == 2
