"""Tests for the explorer instance driving a recording surface."""

from __future__ import annotations

import numpy as np
import pytest

from triad_explorer.core.config import ExplorerConfig
from triad_explorer.core.explorer import TriadExplorer
from triad_explorer.core.history import ActivityKind
from triad_explorer.core.renderer import Rgba
from triad_explorer.core.surfaces import RecordingSurface


def _frame(surface: RecordingSurface):
    return [(t.points, t.fill) for t in surface.triangles]


class TestTriadExplorer:
    def test_events_before_mount_are_rejected(self, config):
        explorer = TriadExplorer(config)
        with pytest.raises(RuntimeError):
            explorer.increase()

    def test_mount_paints_white_root(self, config, surface):
        explorer = TriadExplorer(config)
        stats = explorer.mount(surface)
        assert stats.depth == "0"
        assert stats.total_transactions == "1,000"
        assert len(surface.triangles) == 1
        assert surface.triangles[0].fill == Rgba(255, 255, 255, 0.9)
        assert surface.calls[:3] == ["set_backing_size", "reset_transform", "scale"]

    def test_mount_generates_all_depths(self, config, surface):
        explorer = TriadExplorer(config)
        explorer.mount(surface)
        assert list(explorer.dataset) == list(range(0, 7))

    def test_increase_subdivides(self, config, surface):
        explorer = TriadExplorer(config)
        explorer.mount(surface)
        stats = explorer.increase()
        assert (stats.depth, stats.total_transactions, stats.leaf_triads) == ("1", "3,000", "3")
        assert len(surface.triangles) == 3
        assert all(t.fill.r == 0 and t.fill.b == 0 for t in surface.triangles)

    def test_increase_at_max_still_repaints(self, config, surface):
        explorer = TriadExplorer(config)
        explorer.mount(surface)
        for _ in range(10):
            explorer.increase()
        assert explorer.current_depth == 6
        clears = surface.calls.count("clear")
        explorer.increase()
        assert surface.calls.count("clear") == clears + 1
        assert len(surface.triangles) == 729
        assert explorer.history.recent()[-1].kind is ActivityKind.DEPTH_LIMIT

    def test_decrease_at_min_is_silent(self, config, surface):
        explorer = TriadExplorer(config)
        explorer.mount(surface)
        stats = explorer.decrease()
        assert stats.depth == "0"
        assert len(surface.triangles) == 1

    def test_dataset_is_stable_across_events(self, config, surface):
        explorer = TriadExplorer(config)
        explorer.mount(surface)
        dataset = explorer.dataset
        snapshot = {depth: np.array(dataset[depth]) for depth in dataset}
        explorer.increase()
        explorer.increase()
        surface.resize(500.0, 400.0, 2.0)
        explorer.resize()
        explorer.decrease()
        assert explorer.dataset is dataset
        for depth, values in snapshot.items():
            np.testing.assert_array_equal(dataset[depth], values)

    def test_same_depth_repaints_same_colors(self, config, surface):
        explorer = TriadExplorer(config)
        explorer.mount(surface)
        explorer.increase()
        explorer.increase()
        first = _frame(surface)
        explorer.increase()
        explorer.decrease()
        assert _frame(surface) == first

    def test_resize_and_increase_commute(self):
        def run(order):
            config = ExplorerConfig()
            config.activity.seed = 7
            surface = RecordingSurface(300.0, 200.0, 1.0)
            explorer = TriadExplorer(config)
            explorer.mount(surface)
            for step in order:
                if step == "resize":
                    surface.resize(480.0, 360.0, 2.0)
                    explorer.resize()
                else:
                    explorer.increase()
            return surface, _frame(surface)

        a_surface, a_frame = run(["resize", "increase"])
        b_surface, b_frame = run(["increase", "resize"])
        assert a_frame == b_frame
        assert a_surface.backing_size == b_surface.backing_size == (960, 720)
        assert a_surface.transform == b_surface.transform == (2.0, 2.0)

    def test_initial_depth_from_config(self, config, surface):
        config.depth.initial_depth = 2
        explorer = TriadExplorer(config)
        explorer.mount(surface)
        assert len(surface.triangles) == 9

    def test_history_records_events(self, config, surface):
        explorer = TriadExplorer(config)
        explorer.mount(surface)
        explorer.increase()
        explorer.resize()
        kinds = [entry.kind for entry in explorer.history.recent()]
        assert kinds == [ActivityKind.MOUNTED, ActivityKind.DEPTH_CHANGED, ActivityKind.RESIZED]
        assert explorer.history.recent()[1].message == "Depth 0 -> 1"

    def test_custom_repaint_hook(self, config, surface):
        calls = []

        def hook(explorer):
            calls.append(explorer.current_depth)
            return explorer.paint()

        explorer = TriadExplorer(config, repaint=hook)
        explorer.mount(surface)
        explorer.increase()
        assert calls == [0, 1]
        assert len(explorer.last_commands) == 3
