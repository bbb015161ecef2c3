"""
The explorer instance: owns depth, dataset, viewport and history for one
drawing surface and turns events into repaints.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .activity import ActivityDataGenerator, ActivityDataset
from .config import ExplorerConfig
from .depth import DepthController, ExplorerEvent, Transition
from .history import ActivityKind, ActivityLog
from .renderer import DrawCommand, FractalRenderer
from .stats import StatsPresenter, StatsText
from .viewport import DrawingSurface, Viewport, ViewportManager

logger = logging.getLogger(__name__)

RepaintHook = Callable[["TriadExplorer"], List[DrawCommand]]


class TriadExplorer:
    def __init__(
        self,
        config: Optional[ExplorerConfig] = None,
        *,
        generator: Optional[ActivityDataGenerator] = None,
        repaint: Optional[RepaintHook] = None,
    ) -> None:
        self.config = config or ExplorerConfig()
        depth_cfg = self.config.depth
        self.depth = DepthController(depth_cfg.min_depth, depth_cfg.max_depth, depth_cfg.initial_depth)
        self.renderer = FractalRenderer(self.config.palette, self.config.geometry.scale)
        self.stats_presenter = StatsPresenter(
            self.config.activity.transactions_per_triad,
            self.config.activity.thousands_separator,
        )
        self.history = ActivityLog(self.config.view.history_size)
        self._generator = generator or ActivityDataGenerator(self.config.activity.seed)
        self._repaint: RepaintHook = repaint or TriadExplorer.paint
        self._dataset: Optional[ActivityDataset] = None
        self._viewport_manager: Optional[ViewportManager] = None
        self.last_commands: List[DrawCommand] = []

    @property
    def mounted(self) -> bool:
        return self._viewport_manager is not None

    @property
    def dataset(self) -> Optional[ActivityDataset]:
        return self._dataset

    @property
    def current_depth(self) -> int:
        return self.depth.current_depth

    @property
    def viewport(self) -> Optional[Viewport]:
        return self._viewport_manager.viewport if self._viewport_manager else None

    @property
    def surface(self) -> Optional[DrawingSurface]:
        return self._viewport_manager.surface if self._viewport_manager else None

    def mount(self, surface: DrawingSurface) -> StatsText:
        """Bind a laid-out surface, precompute activity and paint the first frame."""
        self._viewport_manager = ViewportManager(surface)
        if self._dataset is None:
            self._dataset = self._generator.generate_all(*self.depth.bounds)
        return self.handle(ExplorerEvent.MOUNT)

    def handle(self, event: ExplorerEvent) -> StatsText:
        if self._viewport_manager is None:
            raise RuntimeError("TriadExplorer.mount() must run before other events")
        previous = self.current_depth
        result = self.depth.apply(event)
        if result.reset_viewport:
            self._viewport_manager.resize_canvas()
        if result.repaint:
            self.last_commands = self._repaint(self)
        self._record(event, previous, result)
        return self.stats()

    def increase(self) -> StatsText:
        return self.handle(ExplorerEvent.INCREASE)

    def decrease(self) -> StatsText:
        return self.handle(ExplorerEvent.DECREASE)

    def resize(self) -> StatsText:
        return self.handle(ExplorerEvent.RESIZE)

    def paint(self) -> List[DrawCommand]:
        if self._viewport_manager is None or self._dataset is None:
            return []
        viewport = self._viewport_manager.viewport
        if viewport is None:
            viewport = self._viewport_manager.resize_canvas()
        return self.renderer.render(self._viewport_manager.surface, viewport, self.current_depth, self._dataset)

    def stats(self) -> StatsText:
        return self.stats_presenter.present(self.depth.state)

    def _record(self, event: ExplorerEvent, previous: int, result: Transition) -> None:
        depth = result.state.current_depth
        if event is ExplorerEvent.MOUNT:
            vp = self.viewport
            size = f"{vp.width:.0f}x{vp.height:.0f} @{vp.device_pixel_ratio:g}x" if vp else "unknown size"
            message = f"Explorer mounted at depth {depth} ({size})"
            kind = ActivityKind.MOUNTED
        elif event is ExplorerEvent.RESIZE:
            vp = self.viewport
            message = f"Surface resized to {vp.width:.0f}x{vp.height:.0f}" if vp else "Surface resized"
            kind = ActivityKind.RESIZED
        elif result.changed:
            message = f"Depth {previous} -> {depth}"
            kind = ActivityKind.DEPTH_CHANGED
        else:
            limit = "maximum" if event is ExplorerEvent.INCREASE else "minimum"
            message = f"Depth already at {limit} ({depth})"
            kind = ActivityKind.DEPTH_LIMIT
        self.history.record(kind, message)
        # Resizes arrive in bursts while a window is dragged.
        level = logging.DEBUG if kind is ActivityKind.RESIZED else logging.INFO
        logger.log(level, message)
