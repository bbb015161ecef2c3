# SPDX-License-Identifier: MIT
"""
Core services, domain models, and drawing seams for the triad explorer.
"""

from .activity import ActivityDataGenerator, ActivityDataset  # noqa: F401
from .config import (
    ActivityConfig,
    DepthConfig,
    ExplorerConfig,
    GeometryConfig,
    PaletteConfig,
    ViewConfig,
)  # noqa: F401
from .depth import DepthController, ExplorerEvent, Transition, ViewState, transition  # noqa: F401
from .explorer import TriadExplorer  # noqa: F401
from .geometry import Point, Triad, root_triad  # noqa: F401
from .history import ActivityKind, ActivityLog, ExplorerActivity  # noqa: F401
from .renderer import DrawCommand, FractalRenderer, Rgba, Stroke, green_channel, leaf_path, render_commands  # noqa: F401
from .stats import StatsPresenter, StatsText, total_transactions  # noqa: F401
from .surfaces import PilSurface, RecordingSurface  # noqa: F401
from .viewport import DrawingSurface, Viewport, ViewportManager  # noqa: F401
