"""Mounted page state.

The page is the only mutable part of a render: named containers (mount
points) hold notices and mounted display units, units carry CSS classes such
as the deep-link highlight, and a scroll request records where the viewport
should land. Builders never touch it; only the view renderer does.
"""

import asyncio
import logging
from collections.abc import Awaitable, Iterable, Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict

from podcards.render.units import DisplayUnit
from podcards.utils.errors import MountPointNotFoundError

logger = logging.getLogger(__name__)


class NoticeKind(str, Enum):
    """Kinds of static notice shown instead of cards."""

    LOADING = "loading"
    EMPTY = "error"  # Matches the "error" CSS class


class Notice(BaseModel):
    """A single static message mounted in a container."""

    model_config = ConfigDict(frozen=True)

    kind: NoticeKind
    text: str

    @property
    def is_notice(self) -> bool:
        return True


class ScrollRequest(BaseModel):
    """Where the viewport should be scrolled after rendering."""

    model_config = ConfigDict(frozen=True)

    anchor: str
    offset: int = 0


class MountedUnit:
    """A display unit placed on the page, with its mutable CSS classes."""

    is_notice = False

    def __init__(self, unit: DisplayUnit) -> None:
        self.unit = unit
        self.classes: set[str] = set()

    @property
    def anchor(self) -> str:
        return self.unit.anchor

    @property
    def css_classes(self) -> str:
        """Class attribute value, base class first."""
        return " ".join(["episode-card", *sorted(self.classes)])

    def __repr__(self) -> str:
        return f"MountedUnit({self.anchor!r}, classes={sorted(self.classes)})"


MountedChild = Notice | MountedUnit


class Container:
    """A named mount point holding notices and mounted units in order."""

    def __init__(self, container_id: str, page: "Page") -> None:
        self.id = container_id
        self._page = page
        self.children: list[MountedChild] = []

    def __iter__(self) -> Iterator[MountedChild]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    @property
    def units(self) -> list[MountedUnit]:
        """Mounted units, excluding notices."""
        return [child for child in self.children if isinstance(child, MountedUnit)]

    @property
    def notices(self) -> list[Notice]:
        return [child for child in self.children if isinstance(child, Notice)]

    def clear(self) -> None:
        """Remove all children."""
        with self._page.mutating():
            self.children.clear()

    def mount(self, children: Iterable[DisplayUnit | Notice]) -> None:
        """Append display units (wrapped as MountedUnit) and notices in order."""
        with self._page.mutating():
            for child in children:
                if isinstance(child, DisplayUnit):
                    self.children.append(MountedUnit(child))
                else:
                    self.children.append(child)

    def replace(self, children: Iterable[DisplayUnit | Notice]) -> None:
        """Clear the container, then mount ``children``."""
        self.clear()
        self.mount(children)


class _Mutation:
    def __init__(self, page: "Page") -> None:
        self._page = page

    def __enter__(self) -> None:
        self._page._settled.clear()

    def __exit__(self, *exc_info: object) -> None:
        self._page._settled.set()


class Page:
    """In-memory page with named mount points.

    Args:
        mount_points: Container ids present in the page template
        fragment: Fragment identifier of the current location (e.g. ``#ep2``)
        settle_signal: Whether the page reports when layout has settled. Pages
            that cannot tell make callers fall back to a fixed delay.
    """

    def __init__(
        self,
        mount_points: Iterable[str],
        fragment: str | None = None,
        settle_signal: bool = True,
    ) -> None:
        self._containers = {name: Container(name, self) for name in mount_points}
        self.fragment = fragment
        self.scroll: ScrollRequest | None = None
        self._settle_signal = settle_signal
        self._settled = asyncio.Event()
        self._settled.set()

    @property
    def mount_points(self) -> list[str]:
        return list(self._containers)

    def container(self, container_id: str) -> Container:
        """Look up a mount point.

        Raises:
            MountPointNotFoundError: If the page has no such container
        """
        try:
            return self._containers[container_id]
        except KeyError:
            raise MountPointNotFoundError(
                f"Episodes container '{container_id}' not found "
                f"(available: {', '.join(self._containers) or 'none'})"
            ) from None

    def units(self) -> list[MountedUnit]:
        """All mounted units across every container, in page order."""
        return [unit for container in self._containers.values() for unit in container.units]

    def find_unit(self, anchor: str) -> MountedUnit | None:
        for unit in self.units():
            if unit.anchor == anchor:
                return unit
        return None

    def scroll_into_view(self, anchor: str, offset: int = 0) -> None:
        """Request that the viewport land on ``anchor`` shifted by ``offset`` pixels."""
        self.scroll = ScrollRequest(anchor=anchor, offset=offset)
        logger.debug(f"Scroll requested to #{anchor} (offset {offset})")

    def layout_settled(self) -> Awaitable[bool] | None:
        """Awaitable that resolves once pending mutations are laid out.

        Container mutations are synchronous and set the signal again on exit,
        so after a completed ``mount``/``replace`` the awaitable resolves
        immediately. It only blocks while a mutation is still in progress.

        Returns:
            An awaitable, or None when this page does not expose the signal
        """
        if not self._settle_signal:
            return None
        return self._settled.wait()

    def mutating(self) -> _Mutation:
        return _Mutation(self)
