"""
Tests for splitter-driven region resizing.
"""
import pytest
from PySide6.QtCore import QSizeF

from RegionDock.dock_model import Region
from RegionDock.layout_engine import LayoutEngine
from RegionDock.pointer import PointerEventSource
from RegionDock.splitter_controller import SplitterController

from conftest import press

SIZE = QSizeF(1000, 800)
ALL_OCCUPIED = {region: 1 for region in Region}


class TestSplitterController:

    def setup_method(self):
        self.engine = LayoutEngine()
        self.engine.recompute(SIZE, ALL_OCCUPIED)
        self.source = PointerEventSource()
        self.controller = SplitterController(self.engine, self.source)

    def test_left_grows_when_dragged_right(self):
        assert self.controller.begin(Region.LEFT, press(220, 400))
        assert self.controller.update(press(300, 400)) == pytest.approx(300)
        assert self.engine.current(Region.LEFT) == pytest.approx(300)

    def test_right_grows_when_dragged_left(self):
        self.controller.begin(Region.RIGHT, press(780, 400))
        assert self.controller.update(press(700, 400)) == pytest.approx(300)

    def test_bottom_uses_vertical_axis_and_negative_sign(self):
        self.controller.begin(Region.BOTTOM, press(500, 660))
        assert self.controller.update(press(900, 600)) == pytest.approx(200)

    @pytest.mark.parametrize("region, start, end, minimum", [
        (Region.LEFT, (220, 400), (-500, 400), 80),
        (Region.RIGHT, (780, 400), (5000, 400), 80),
        (Region.TOP, (500, 140), (500, -900), 60),
        (Region.BOTTOM, (500, 660), (500, 4000), 60),
    ])
    def test_size_never_drops_below_minimum(self, region, start, end, minimum):
        self.controller.begin(region, press(*start))
        assert self.controller.update(press(*end)) == minimum

    def test_end_pins_override_and_releases_subscription(self):
        self.controller.begin(Region.LEFT, press(220, 400))
        assert self.source.subscription_count() == 1
        self.source.dispatch_move(press(300, 400))
        self.source.dispatch_up(press(300, 400))
        assert self.engine.override(Region.LEFT) == pytest.approx(300)
        assert self.source.subscription_count() == 0
        assert not self.controller.is_active
        counts = {**ALL_OCCUPIED, Region.LEFT: 3}
        assert self.engine.recompute(SIZE, counts).left_width == pytest.approx(300)

    def test_cancel_restores_start_size_without_override(self):
        self.controller.begin(Region.TOP, press(500, 140))
        self.controller.update(press(500, 240))
        self.source.dispatch_cancel()
        assert self.engine.current(Region.TOP) == pytest.approx(140)
        assert self.engine.override(Region.TOP) is None
        assert self.source.subscription_count() == 0

    def test_second_begin_while_active_is_ignored(self):
        assert self.controller.begin(Region.LEFT, press(220, 400))
        assert not self.controller.begin(Region.RIGHT, press(780, 400))
        assert self.controller.session.region is Region.LEFT
        assert self.source.subscription_count() == 1

    def test_center_and_hidden_splitters_cannot_be_grabbed(self):
        assert not self.controller.begin(Region.CENTER, press(500, 400))
        self.engine.recompute(SIZE, {region: 0 for region in Region})
        assert not self.controller.begin(Region.LEFT, press(0, 400))
        assert self.source.subscription_count() == 0

    def test_update_and_end_without_session_are_no_ops(self):
        assert self.controller.update(press(1, 1)) is None
        assert self.controller.end() is None
