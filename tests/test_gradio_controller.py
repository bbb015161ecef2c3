"""Tests for the Gradio-facing controller."""

from __future__ import annotations

from triad_explorer.gradio_controller import GradioExplorerController


class TestGradioExplorerController:
    def test_snapshot_after_mount(self, config):
        controller = GradioExplorerController(config)
        payload = controller.snapshot()
        assert payload["depth"] == 0
        assert payload["depth_text"] == "0"
        assert payload["total_transactions"] == "1,000"
        assert payload["leaf_triads"] == "1"
        assert len(payload["activity"]) == 1
        assert payload["image"].size == (config.view.canvas_width, config.view.canvas_height)
        assert payload["log"] and "mounted" in payload["log"][0]

    def test_increase_and_decrease(self, config):
        controller = GradioExplorerController(config)
        payload = controller.increase()
        assert payload["depth"] == 1
        assert payload["total_transactions"] == "3,000"
        assert len(payload["activity"]) == 3
        payload = controller.decrease()
        assert payload["depth_text"] == "0"

    def test_resize_uses_device_pixels(self, config):
        controller = GradioExplorerController(config)
        payload = controller.resize(200, 100, 2.0)
        assert payload["image"].size == (400, 200)

    def test_resize_keeps_non_zero_size(self, config):
        controller = GradioExplorerController(config)
        payload = controller.resize(0, 0, 1.0)
        assert payload["image"].size == (1, 1)

    def test_dark_mode_switches_background(self, config):
        controller = GradioExplorerController(config)
        assert controller.snapshot()["image"].getpixel((0, 0)) == tuple(config.palette.dark_background)
        payload = controller.set_dark_mode(False)
        assert controller.dark_mode is False
        assert payload["image"].getpixel((0, 0)) == tuple(config.palette.light_background)

    def test_activity_snapshot_is_stable(self, config):
        controller = GradioExplorerController(config)
        first = controller.increase()["activity"]
        controller.increase()
        again = controller.decrease()["activity"]
        assert first == again
