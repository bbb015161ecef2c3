"""Tests for the Gradio callback helpers."""

from __future__ import annotations

import pytest

from triad_explorer import gradio_app
from triad_explorer.gradio_controller import GradioExplorerController


class TestActivityFrame:
    def test_columns_and_paths(self):
        frame = gradio_app.activity_frame([0.0, 1.0, 0.5], 1)
        assert list(frame.columns) == ["leaf_index", "path", "activity", "green"]
        assert list(frame["path"]) == ["0", "1", "2"]
        assert list(frame["green"]) == [50, 255, 152]

    def test_empty(self):
        assert gradio_app.activity_frame([], 0).empty


class TestCallbacks:
    def test_init_controller_copies_config(self, config):
        controller, *outputs = gradio_app.init_controller(config, False)
        assert isinstance(controller, GradioExplorerController)
        assert controller.config is not config
        assert controller.config.view.dark_mode is False
        assert config.view.dark_mode is True
        assert len(outputs) == 7

    def test_increase_outputs(self, config):
        controller = GradioExplorerController(config)
        image, depth, transactions, leaves, frame, plot, log = gradio_app.increase_depth(controller)
        assert (depth, transactions, leaves) == ("1", "3,000", "3")
        assert len(frame) == 3
        assert plot is not None
        assert "Depth 0 -> 1" in log

    @pytest.mark.parametrize(
        "callback, args",
        [
            (gradio_app.increase_depth, ()),
            (gradio_app.decrease_depth, ()),
            (gradio_app.resize_canvas, (100, 100, 1.0)),
            (gradio_app.toggle_dark_mode, (True,)),
        ],
    )
    def test_missing_controller(self, callback, args):
        outputs = callback(None, *args)
        assert outputs[-1] == gradio_app.NOT_INITIALIZED
