"""
Tests for regions, windows and the placement store.
"""
import pytest
from PySide6.QtCore import QPointF, QRectF, QSizeF

from RegionDock.dock_model import DockWindow, EDGE_REGIONS, PlacementStore, Region


class TestRegion:

    def test_parse_accepts_known_names(self):
        assert Region.parse("left") is Region.LEFT
        assert Region.parse(" Center ") is Region.CENTER
        assert Region.parse(Region.BOTTOM) is Region.BOTTOM

    def test_parse_rejects_unknown_names(self):
        assert Region.parse("middle") is None
        assert Region.parse(None) is None

    def test_iteration_order_is_left_right_top_bottom_center(self):
        assert [r.value for r in Region] == ["left", "right", "top", "bottom", "center"]

    def test_axes_and_signs(self):
        assert Region.LEFT.axis == "x" and Region.RIGHT.axis == "x"
        assert Region.TOP.axis == "y" and Region.BOTTOM.axis == "y"
        assert Region.CENTER.axis is None
        assert Region.LEFT.splitter_sign == 1
        assert Region.TOP.splitter_sign == 1
        assert Region.RIGHT.splitter_sign == -1
        assert Region.BOTTOM.splitter_sign == -1
        assert Region.CENTER not in EDGE_REGIONS


class TestDockWindow:

    def test_header_text_falls_back_to_id(self):
        assert DockWindow(id="7", content=object()).header_text() == "Window 7"
        assert DockWindow(id="7", content=object(), title="Tools").header_text() == "Tools"

    def test_take_content_empties_the_window(self):
        content = object()
        win = DockWindow(id="1", content=content)
        assert win.take_content() is content
        assert win.content is None

    def test_restore_original_size_keeps_position(self):
        win = DockWindow(id="1", content=object(), geometry=QRectF(10, 20, 500, 400),
                         original_size=QSizeF(120, 90))
        win.restore_original_size()
        assert win.geometry.size() == QSizeF(120, 90)
        assert win.position == QPointF(10, 20)


class TestPlacementStore:

    def setup_method(self):
        self.store = PlacementStore()

    def test_place_replaces_prior_placement(self):
        self.store.place("a", Region.LEFT)
        self.store.place("a", Region.TOP)
        assert self.store.region_of("a") is Region.TOP
        assert self.store.windows_in(Region.LEFT) == []
        assert len(self.store) == 1

    def test_clear_is_idempotent(self):
        self.store.place("a", Region.LEFT)
        self.store.clear("a")
        self.store.clear("a")
        assert self.store.region_of("a") is None
        assert "a" not in self.store

    def test_place_rejects_values_outside_the_five_regions(self):
        with pytest.raises(ValueError):
            self.store.place("a", "left")

    def test_reset_forgets_everything(self):
        self.store.place("a", Region.LEFT)
        self.store.place("b", Region.CENTER)
        self.store.reset()
        assert len(self.store) == 0
