# tab_container.py

import logging
from typing import Any, Iterator, Optional

from .dock_model import ContentPanel, DockWindow, Region, TabEntry

logger = logging.getLogger(__name__)


class RegionTabs:
    """
    The tab bar and content panels of one region.

    Tabs keep insertion order; activation never reorders them. Each docked
    window's content handle lives in exactly one ContentPanel here and is
    moved (never copied) between the window and its panel.
    """

    def __init__(self, region: Region):
        self.region = region
        self._entries: list[TabEntry] = []
        self.active_id: Optional[str] = None

    def _find(self, window_id: str) -> Optional[TabEntry]:
        return next((e for e in self._entries if e.window_id == window_id), None)

    def add_window(self, win: DockWindow) -> TabEntry:
        existing = self._find(win.id)
        if existing:
            self.activate(win.id)
            return existing

        panel = ContentPanel(window_id=win.id, content=win.take_content())
        entry = TabEntry(window_id=win.id, label=win.header_text(), panel=panel)
        self._entries.append(entry)
        logger.debug("Tab '%s' added to %s region", entry.label, self.region.value)

        self.activate(win.id)
        return entry

    def remove_window(self, win: DockWindow) -> Any:
        """
        Removes the window's tab and panel and hands its content back to the window.
        Returns the restored content, or None if the window had no tab here.
        """
        entry = self._find(win.id)
        if not entry:
            return None

        self._entries.remove(entry)
        content, entry.panel.content = entry.panel.content, None
        win.give_content(content)

        if entry.active or self.active_id == win.id:
            if self._entries:
                self.activate(self._entries[0].window_id)
            else:
                self.clear()
        return content

    def activate(self, window_id: str) -> bool:
        if not self._find(window_id):
            return False
        for entry in self._entries:
            entry.active = entry.window_id == window_id
        self.active_id = window_id
        return True

    def clear(self):
        """Deactivates every tab."""
        for entry in self._entries:
            entry.active = False
        self.active_id = None

    def count(self) -> int:
        return len(self._entries)

    def contains(self, window_id: str) -> bool:
        return self._find(window_id) is not None

    def entry(self, window_id: str) -> Optional[TabEntry]:
        return self._find(window_id)

    def panel_for(self, window_id: str) -> Optional[ContentPanel]:
        entry = self._find(window_id)
        return entry.panel if entry else None

    def window_ids(self) -> list[str]:
        return [e.window_id for e in self._entries]

    def is_active(self, window_id: str) -> bool:
        return self.active_id is not None and self.active_id == window_id

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TabEntry]:
        return iter(list(self._entries))
