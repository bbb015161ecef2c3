"""Tests for device-pixel-ratio handling."""

from __future__ import annotations

import pytest

from triad_explorer.core.surfaces import RecordingSurface
from triad_explorer.core.viewport import Viewport, ViewportManager


class TestViewport:
    def test_backing_size_rounds(self):
        assert Viewport(101.0, 50.0, 1.5).backing_size == (152, 75)


class TestViewportManager:
    def test_resize_sets_backing_then_scale(self):
        surface = RecordingSurface(300.0, 200.0, 2.0)
        viewport = ViewportManager(surface).resize_canvas()
        assert viewport == Viewport(300.0, 200.0, 2.0)
        assert surface.backing_size == (600, 400)
        assert surface.calls == ["set_backing_size", "reset_transform", "scale"]
        assert surface.transform == (2.0, 2.0)

    def test_repeated_resize_does_not_compound_scale(self):
        surface = RecordingSurface(300.0, 200.0, 2.0)
        manager = ViewportManager(surface)
        for _ in range(3):
            manager.resize_canvas()
        assert surface.transform == (2.0, 2.0)

    def test_ratio_change_is_picked_up(self):
        surface = RecordingSurface(300.0, 200.0, 1.0)
        manager = ViewportManager(surface)
        manager.resize_canvas()
        surface.resize(150.0, 100.0, 3.0)
        viewport = manager.resize_canvas()
        assert manager.viewport is viewport
        assert surface.backing_size == (450, 300)
        assert surface.transform == pytest.approx((3.0, 3.0))
