"""
Tests for the drag session lifecycle.
"""
from PySide6.QtCore import QPointF

from RegionDock.dock_model import Region
from RegionDock.docking_state import DockingState

from conftest import drag_window_to, far_from_overlays, overlay_center, press


class TestDragSession:

    def test_begin_records_offset_and_reveals_overlays(self, manager):
        assert manager.begin_drag("0", press(230, 210))
        session = manager.drag_controller.session
        assert session.offset == QPointF(30, 10)
        assert manager.overlays_visible
        assert manager.state is DockingState.DRAGGING_WINDOW
        assert manager.pointer_source.subscription_count() == 1

    def test_update_moves_window_clamped_to_container(self, manager):
        manager.begin_drag("0", press(230, 210))
        manager.pointer_source.dispatch_move(press(10, 5))
        assert manager.window("0").position == QPointF(0, 0)
        manager.pointer_source.dispatch_move(press(530, 410))
        assert manager.window("0").position == QPointF(500, 400)

    def test_pointer_offset_respects_container_origin(self, pointer_source):
        from RegionDock.docking_manager import DockingManager
        from PySide6.QtCore import QRectF
        from conftest import make_descriptors

        manager = DockingManager(make_descriptors(1), QRectF(100, 50, 1000, 800), pointer_source)
        manager.begin_drag("0", press(320, 260))
        assert manager.drag_controller.session.offset == QPointF(20, 10)
        pointer_source.dispatch_move(press(420, 360))
        assert manager.window("0").position == QPointF(300, 300)

    def test_at_most_one_region_highlighted(self, manager):
        manager.begin_drag("0", press(220, 210))
        left = overlay_center(manager, Region.LEFT)
        manager.pointer_source.dispatch_move(press(left.x() - 50 + 20, left.y() - 40 + 10))
        assert manager.highlighted_region is Region.LEFT
        centre = overlay_center(manager, Region.CENTER)
        manager.pointer_source.dispatch_move(press(centre.x() - 50 + 20, centre.y() - 40 + 10))
        assert manager.highlighted_region is Region.CENTER

    def test_drop_on_target_docks_and_hides_window(self, manager):
        target = drag_window_to(manager, "0", overlay_center(manager, Region.RIGHT))
        assert target is Region.RIGHT
        assert manager.region_of("0") is Region.RIGHT
        assert manager.window("0").visible is False
        assert manager.tabs(Region.RIGHT).active_id == "0"

    def test_drop_elsewhere_leaves_window_floating(self, manager):
        drag_window_to(manager, "0", far_from_overlays())
        win = manager.window("0")
        assert manager.region_of("0") is None
        assert win.visible
        assert win.geometry.center() == far_from_overlays()

    def test_session_teardown_on_every_exit_path(self, manager):
        source = manager.pointer_source
        drag_window_to(manager, "0", overlay_center(manager, Region.LEFT))
        drag_window_to(manager, "1", far_from_overlays())
        manager.begin_drag("2", press(300, 300))
        source.dispatch_cancel()
        assert source.subscription_count() == 0
        assert manager.state is DockingState.IDLE
        assert not manager.overlays_visible
        assert manager.highlighted_region is None
        assert source.captured_target is None

    def test_cancel_keeps_window_floating_where_it_was_dragged(self, manager):
        manager.begin_drag("0", press(220, 210))
        left = overlay_center(manager, Region.LEFT)
        manager.pointer_source.dispatch_move(press(left.x(), left.y()))
        moved_to = manager.window("0").position
        manager.pointer_source.dispatch_cancel()
        assert manager.region_of("0") is None
        assert manager.window("0").position == moved_to

    def test_second_begin_is_ignored(self, manager):
        assert manager.begin_drag("0", press(220, 210))
        assert not manager.begin_drag("1", press(260, 250))
        assert manager.drag_controller.session.window_id == "0"
        assert manager.pointer_source.subscription_count() == 1

    def test_updates_without_session_are_ignored(self, manager):
        assert manager.drag_controller.update(press(1, 1)) is None
        assert manager.drag_controller.end() is None


class TestTabDrag:

    def test_pressing_inactive_tab_only_selects_it(self, manager):
        drag_window_to(manager, "0", overlay_center(manager, Region.LEFT))
        drag_window_to(manager, "1", overlay_center(manager, Region.LEFT))
        assert not manager.begin_tab_drag(Region.LEFT, "0", press(20, 10))
        assert manager.tabs(Region.LEFT).active_id == "0"
        assert manager.region_of("0") is Region.LEFT
        assert manager.state is DockingState.IDLE

    def test_pressing_active_tab_pulls_window_out(self, manager):
        drag_window_to(manager, "0", overlay_center(manager, Region.LEFT))
        win = manager.window("0")
        assert manager.begin_tab_drag("left", "0", press(60, 215))
        assert manager.state is DockingState.DRAGGING_TAB
        assert manager.region_of("0") is None
        assert win.content is not None
        assert win.visible
        # Pointer sits on the title bar, horizontally centred.
        assert win.position == QPointF(10, 200)

    def test_tab_from_unknown_region_is_ignored(self, manager):
        assert not manager.begin_tab_drag("middle", "0", press(0, 0))
