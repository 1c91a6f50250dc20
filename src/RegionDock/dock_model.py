from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from PySide6.QtCore import QPointF, QRectF, QSizeF


class InvalidWindowDescriptorError(ValueError):
    """A window descriptor cannot take part in docking (missing id or content, duplicate id)."""


class UnknownWindowError(KeyError):
    """An operation referenced a window id that was never registered."""


# --- Regions ---

class Region(str, Enum):
    """The five fixed docking regions, in snap iteration order."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"

    @classmethod
    def parse(cls, value) -> Optional["Region"]:
        """Returns the matching region, or None for anything that is not one of the five."""
        if isinstance(value, Region):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None

    @property
    def is_edge(self) -> bool:
        return self is not Region.CENTER

    @property
    def axis(self) -> Optional[str]:
        """'x' for left/right (sized by width), 'y' for top/bottom (sized by height)."""
        if self in (Region.LEFT, Region.RIGHT):
            return "x"
        if self in (Region.TOP, Region.BOTTOM):
            return "y"
        return None

    @property
    def splitter_sign(self) -> int:
        """+1 when dragging toward positive screen coordinates grows the region."""
        return 1 if self in (Region.LEFT, Region.TOP) else -1


ALL_REGIONS: tuple[Region, ...] = tuple(Region)
EDGE_REGIONS: tuple[Region, ...] = (Region.LEFT, Region.RIGHT, Region.TOP, Region.BOTTOM)


# --- Windows ---

@dataclass
class WindowDescriptor:
    """What the environment hands over for each dockable window."""
    id: Any
    content: Any
    title: Optional[str] = None
    geometry: Optional[QRectF] = None


@dataclass
class DockWindow:
    """A dockable window. Its content is None exactly while a tab panel owns it."""
    id: str
    content: Any
    title: Optional[str] = None
    geometry: QRectF = field(default_factory=QRectF)
    original_size: QSizeF = field(default_factory=QSizeF)
    visible: bool = True
    z_order: int = 0

    def header_text(self) -> str:
        return self.title if self.title else f"Window {self.id}"

    @property
    def position(self) -> QPointF:
        return self.geometry.topLeft()

    def move_to(self, pos: QPointF):
        self.geometry.moveTopLeft(pos)

    def restore_original_size(self):
        self.geometry.setSize(QSizeF(self.original_size))

    def take_content(self) -> Any:
        """Detaches the content handle from this window and hands it to the caller."""
        content, self.content = self.content, None
        return content

    def give_content(self, content: Any):
        self.content = content


# --- Tabs ---

@dataclass
class ContentPanel:
    """The slot inside a region's content area that hosts one window's content."""
    window_id: str
    content: Any = None


@dataclass
class TabEntry:
    """Pairs a docked window with its tab label and content panel."""
    window_id: str
    label: str
    panel: ContentPanel
    active: bool = False


# --- Placement ---

class PlacementStore:
    """Source of truth for which window is docked in which region. Absent means floating."""

    def __init__(self):
        self._placements: dict[str, Region] = {}

    def place(self, window_id: str, region: Region):
        if not isinstance(region, Region):
            raise ValueError(f"Cannot place window '{window_id}' into unknown region {region!r}")
        self._placements.pop(window_id, None)
        self._placements[window_id] = region

    def clear(self, window_id: str):
        self._placements.pop(window_id, None)

    def region_of(self, window_id: str) -> Optional[Region]:
        return self._placements.get(window_id)

    def windows_in(self, region: Region) -> list[str]:
        return [wid for wid, r in self._placements.items() if r is region]

    def items(self) -> Iterator[tuple[str, Region]]:
        return iter(list(self._placements.items()))

    def reset(self):
        self._placements.clear()

    def __contains__(self, window_id) -> bool:
        return window_id in self._placements

    def __len__(self) -> int:
        return len(self._placements)
