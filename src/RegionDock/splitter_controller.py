import logging
from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_CONFIG, DockConfig
from .dock_model import Region
from .layout_engine import LayoutEngine, splitter_key
from .pointer import PointerEvent, PointerEventSource, PointerSubscription

logger = logging.getLogger(__name__)


@dataclass
class SplitterSession:
    region: Region
    start_coordinate: float
    start_size: float
    subscription: PointerSubscription
    current_size: float = 0.0


class SplitterController:
    """Pointer-driven resize of one edge region, independent of docking."""

    def __init__(self, engine: LayoutEngine, pointer_source: PointerEventSource, config: DockConfig = DEFAULT_CONFIG):
        self.engine = engine
        self.pointer_source = pointer_source
        self.config = config
        self.session: Optional[SplitterSession] = None

    @property
    def is_active(self) -> bool:
        return self.session is not None

    def begin(self, region, event: PointerEvent) -> bool:
        region = Region.parse(region)
        if region is None or not region.is_edge:
            logger.warning("Ignoring resize request for non-edge region %r", region)
            return False
        if self.session:
            logger.warning("Splitter session for %s already active; ignoring begin on %s",
                           self.session.region.value, region.value)
            return False
        if not self.engine.is_visible(splitter_key(region)):
            logger.warning("Splitter for empty %s region is hidden; ignoring begin", region.value)
            return False

        start_size = self.engine.current(region)
        subscription = self.pointer_source.subscribe(self.update, self.end, self.cancel)
        self.session = SplitterSession(
            region=region,
            start_coordinate=event.coordinate(region.axis),
            start_size=start_size,
            subscription=subscription,
            current_size=start_size,
        )
        self.pointer_source.capture(event.target, event.pointer_id)
        logger.debug("Splitter resize began on %s at size %.1f", region.value, start_size)
        return True

    def update(self, event: PointerEvent) -> Optional[float]:
        session = self.session
        if not session:
            return None
        region = session.region
        delta = (event.coordinate(region.axis) - session.start_coordinate) * region.splitter_sign
        new_size = self.config.sizing_for(region).clamp(session.start_size + delta)
        session.current_size = new_size
        self.engine.set_live(region, new_size)
        return new_size

    def end(self, event: Optional[PointerEvent] = None) -> Optional[float]:
        """Pins the last live size as the region's override. The release position itself is not applied."""
        session = self.session
        if not session:
            return None
        self.engine.set_override(session.region, session.current_size)
        logger.debug("Splitter resize on %s pinned at %.1f", session.region.value, session.current_size)
        self._finish_session()
        return session.current_size

    def cancel(self):
        """Aborts the resize and restores the size the region had at grab time."""
        session = self.session
        if not session:
            return
        self.engine.set_live(session.region, session.start_size)
        logger.debug("Splitter resize on %s cancelled", session.region.value)
        self._finish_session()

    def _finish_session(self):
        session, self.session = self.session, None
        session.subscription.release()
        self.pointer_source.release_capture()
