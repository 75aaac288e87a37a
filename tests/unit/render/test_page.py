"""Tests for the mounted page model."""

import asyncio

import pytest

from podcards.episodes.models import EpisodeRecord
from podcards.render.cards import CardBuilder
from podcards.render.page import MountedUnit, Notice, NoticeKind, Page
from podcards.utils.errors import MountPointNotFoundError


def _unit(number: int):
    return CardBuilder().build(EpisodeRecord(episode=number, title=f"Episode {number}"))


class TestPageContainers:
    """Tests for mount point lookup."""

    def test_container_lookup(self) -> None:
        page = Page(["episodes-container"])
        assert page.container("episodes-container").id == "episodes-container"
        assert page.mount_points == ["episodes-container"]

    def test_missing_container_raises(self) -> None:
        page = Page(["sidebar"])
        with pytest.raises(MountPointNotFoundError, match="episodes-container"):
            page.container("episodes-container")

    def test_mount_wraps_units(self) -> None:
        page = Page(["main"])
        container = page.container("main")

        container.mount([_unit(1), Notice(kind=NoticeKind.EMPTY, text="nothing")])

        assert isinstance(container.children[0], MountedUnit)
        assert container.notices == [Notice(kind=NoticeKind.EMPTY, text="nothing")]
        assert [u.anchor for u in container.units] == ["ep1"]

    def test_replace_clears_previous_children(self) -> None:
        page = Page(["main"])
        container = page.container("main")
        container.mount([Notice(kind=NoticeKind.LOADING, text="Loading")])

        container.replace([_unit(2), _unit(1)])

        assert container.notices == []
        assert [u.anchor for u in container.units] == ["ep2", "ep1"]

    def test_units_across_containers(self) -> None:
        page = Page(["a", "b"])
        page.container("a").mount([_unit(1)])
        page.container("b").mount([_unit(2)])

        assert [u.anchor for u in page.units()] == ["ep1", "ep2"]
        assert page.find_unit("ep2") is page.container("b").units[0]
        assert page.find_unit("ep3") is None


class TestMountedUnit:
    """Tests for MountedUnit classes."""

    def test_css_classes(self) -> None:
        mounted = MountedUnit(_unit(1))
        assert mounted.css_classes == "episode-card"

        mounted.classes.add("highlighted")
        assert mounted.css_classes == "episode-card highlighted"


class TestScrollAndSettle:
    """Tests for scroll requests and the layout-settle signal."""

    def test_scroll_into_view(self) -> None:
        page = Page(["main"])
        page.scroll_into_view("ep4", offset=-80)
        assert page.scroll.anchor == "ep4"
        assert page.scroll.offset == -80

    @pytest.mark.asyncio
    async def test_layout_settled_after_mount(self) -> None:
        page = Page(["main"])
        page.container("main").mount([_unit(1)])

        settled = page.layout_settled()

        assert settled is not None
        assert await settled is True

    @pytest.mark.asyncio
    async def test_layout_settled_waits_for_open_mutation(self) -> None:
        page = Page(["main"])

        with page.mutating():
            waiter = asyncio.ensure_future(page.layout_settled())
            await asyncio.sleep(0)
            assert not waiter.done()

        assert await waiter is True

    def test_no_settle_signal(self) -> None:
        page = Page(["main"], settle_signal=False)
        assert page.layout_settled() is None
