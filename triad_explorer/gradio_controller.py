from __future__ import annotations

import threading
from typing import Dict, List, Optional

from triad_explorer.core.activity import ActivityDataGenerator
from triad_explorer.core.config import ExplorerConfig
from triad_explorer.core.explorer import TriadExplorer
from triad_explorer.core.stats import StatsText
from triad_explorer.core.surfaces import PilSurface


class GradioExplorerController:
    """UI-agnostic controller tailored for Gradio callbacks."""

    def __init__(
        self,
        config: Optional[ExplorerConfig] = None,
        *,
        generator: Optional[ActivityDataGenerator] = None,
    ) -> None:
        self._config = config or ExplorerConfig()
        view = self._config.view
        self._dark_mode = view.dark_mode
        self._surface = PilSurface(
            view.canvas_width,
            view.canvas_height,
            view.device_pixel_ratio,
            background=self._background(),
        )
        self._explorer = TriadExplorer(self._config, generator=generator)
        self._lock = threading.Lock()
        self._stats = self._explorer.mount(self._surface)

    @property
    def config(self) -> ExplorerConfig:
        return self._config

    @property
    def explorer(self) -> TriadExplorer:
        return self._explorer

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    def increase(self) -> Dict:
        with self._lock:
            self._stats = self._explorer.increase()
            return self._payload()

    def decrease(self) -> Dict:
        with self._lock:
            self._stats = self._explorer.decrease()
            return self._payload()

    def resize(self, width: int, height: int, device_pixel_ratio: Optional[float] = None) -> Dict:
        with self._lock:
            # Keep the surface laid out at a non-zero size before re-measuring.
            self._surface.resize(max(1, int(width)), max(1, int(height)), device_pixel_ratio)
            self._stats = self._explorer.resize()
            return self._payload()

    def set_dark_mode(self, dark: bool) -> Dict:
        with self._lock:
            self._dark_mode = bool(dark)
            self._surface.background = self._background()
            self._explorer.last_commands = self._explorer.paint()
            return self._payload()

    def snapshot(self) -> Dict:
        with self._lock:
            return self._payload()

    def _background(self):
        palette = self._config.palette
        return tuple(palette.dark_background if self._dark_mode else palette.light_background)

    def _payload(self) -> Dict:
        return _stats_payload(
            self._stats,
            depth=self._explorer.current_depth,
            image=self._surface.to_image(),
            activity=list(self._explorer.dataset[self._explorer.current_depth]),
            log=[entry.format() for entry in self._explorer.history.recent()],
        )


def _stats_payload(stats: StatsText, *, depth: int, image, activity: List[float], log: List[str]) -> Dict:
    return {
        "depth": depth,
        "depth_text": stats.depth,
        "total_transactions": stats.total_transactions,
        "leaf_triads": stats.leaf_triads,
        "image": image,
        "activity": activity,
        "log": log,
    }
