from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from .activity import ActivityDataGenerator
from .config import ExplorerConfig
from .depth import ExplorerEvent
from .explorer import TriadExplorer
from .history import ExplorerActivity
from .renderer import DrawCommand
from .stats import StatsText
from .viewport import DrawingSurface


class ExplorerController(QObject):
    stats_updated = Signal(object)
    depth_changed = Signal(int)
    log_emitted = Signal(str)

    def __init__(
        self,
        config: Optional[ExplorerConfig] = None,
        parent: Optional[QObject] = None,
        *,
        generator: Optional[ActivityDataGenerator] = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or ExplorerConfig()
        self._explorer = TriadExplorer(self._config, generator=generator, repaint=self._repaint)
        self._surface: Optional[DrawingSurface] = None
        self._on_painted: Optional[Callable[[], None]] = None

    @property
    def config(self) -> ExplorerConfig:
        return self._config

    @property
    def explorer(self) -> TriadExplorer:
        return self._explorer

    def bind_surface(self, surface: DrawingSurface, on_painted: Optional[Callable[[], None]] = None) -> None:
        """Remember the surface; it is mounted on the first resize with a real size."""
        self._surface = surface
        self._on_painted = on_painted

    def resize(self) -> None:
        if self._surface is None:
            return
        if not self._explorer.mounted:
            width, height = self._surface.rendered_size()
            if width <= 0 or height <= 0:
                return
            last = self._last_activity()
            self._publish(self._explorer.mount(self._surface), self._explorer.current_depth, last)
            return
        self._dispatch(ExplorerEvent.RESIZE)

    def increase(self) -> None:
        self._dispatch(ExplorerEvent.INCREASE)

    def decrease(self) -> None:
        self._dispatch(ExplorerEvent.DECREASE)

    def repaint(self) -> None:
        if self._explorer.mounted:
            self._explorer.last_commands = self._repaint(self._explorer)

    def request_stats(self) -> None:
        self._publish(self._explorer.stats(), None, self._last_activity())

    def _dispatch(self, event: ExplorerEvent) -> None:
        previous = self._explorer.current_depth
        last = self._last_activity()
        if self._explorer.mounted:
            stats = self._explorer.handle(event)
        else:
            # Not laid out yet: track the depth, the mount paints it later.
            self._explorer.depth.apply(event)
            stats = self._explorer.stats()
        current = self._explorer.current_depth
        self._publish(stats, current if current != previous else None, last)

    def _last_activity(self) -> Optional[ExplorerActivity]:
        recent = self._explorer.history.recent()
        return recent[-1] if recent else None

    def _publish(self, stats: StatsText, new_depth: Optional[int], last: Optional[ExplorerActivity]) -> None:
        if new_depth is not None:
            self.depth_changed.emit(new_depth)
        self.stats_updated.emit(stats)
        latest = self._last_activity()
        if latest is not None and latest is not last:
            self.log_emitted.emit(latest.format())

    def _repaint(self, explorer: TriadExplorer) -> List[DrawCommand]:
        commands = explorer.paint()
        if self._on_painted is not None:
            self._on_painted()
        return commands
