from __future__ import annotations

import argparse
import logging
import sys
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

if __package__ in {None, ""}:
    # Allow running via ``python triad_explorer/gradio_app.py`` by adding repo root to sys.path
    sys.path.append(str(Path(__file__).resolve().parents[1]))

import gradio as gr
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
from PIL import Image

from triad_explorer.core.config import ExplorerConfig, load_config
from triad_explorer.core.renderer import green_channel, leaf_path
from triad_explorer.gradio_controller import GradioExplorerController
from triad_explorer.logging_config import parse_level, setup_logging

logger = logging.getLogger(__name__)

NOT_INITIALIZED = "Controller not initialized."


def activity_frame(activity: Sequence[float], depth: int) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "leaf_index": range(len(activity)),
            "path": [leaf_path(i, depth) for i in range(len(activity))],
            "activity": [round(float(v), 4) for v in activity],
            "green": [green_channel(v) for v in activity],
        }
    )


def activity_histogram(activity: Sequence[float], depth: int):
    fig, ax = plt.subplots(figsize=(6.5, 3.0))
    ax.hist(list(activity), bins=min(20, max(1, len(activity))), range=(0.0, 1.0), color="#22c55e")
    ax.set_xlim(0.0, 1.0)
    ax.set_xlabel("activity")
    ax.set_ylabel("leaf triads")
    ax.set_title(f"Depth {depth}")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    plt.close(fig)
    return fig


def blank_image(config: Optional[ExplorerConfig] = None) -> Image.Image:
    view = (config or ExplorerConfig()).view
    return Image.new("RGB", (view.canvas_width, view.canvas_height), (8, 8, 8))


def payload_outputs(payload: Dict[str, Any]) -> Tuple[Any, ...]:
    activity = payload.get("activity", [])
    depth = int(payload.get("depth", 0))
    return (
        payload.get("image"),
        payload.get("depth_text", "0"),
        payload.get("total_transactions", "0"),
        payload.get("leaf_triads", "1"),
        activity_frame(activity, depth),
        activity_histogram(activity, depth),
        "\n".join(payload.get("log", [])),
    )


def empty_outputs(status: str) -> Tuple[Any, ...]:
    return (blank_image(), "0", "0", "0", activity_frame([], 0), None, status)


def init_controller(base: ExplorerConfig, dark: bool):
    # Each browser session owns its own explorer and activity snapshot.
    config = deepcopy(base)
    config.view.dark_mode = bool(dark)
    controller = GradioExplorerController(config)
    return (controller, *payload_outputs(controller.snapshot()))


def increase_depth(controller: Optional[GradioExplorerController]):
    if controller is None:
        return empty_outputs(NOT_INITIALIZED)
    return payload_outputs(controller.increase())


def decrease_depth(controller: Optional[GradioExplorerController]):
    if controller is None:
        return empty_outputs(NOT_INITIALIZED)
    return payload_outputs(controller.decrease())


def resize_canvas(controller: Optional[GradioExplorerController], width: float, height: float, ratio: float):
    if controller is None:
        return empty_outputs(NOT_INITIALIZED)
    return payload_outputs(controller.resize(int(width), int(height), float(ratio)))


def toggle_dark_mode(controller: Optional[GradioExplorerController], dark: bool):
    if controller is None:
        return empty_outputs(NOT_INITIALIZED)
    return payload_outputs(controller.set_dark_mode(dark))


def build_demo(config: Optional[ExplorerConfig] = None) -> gr.Blocks:
    config = config or ExplorerConfig()
    view = config.view

    with gr.Blocks(title="Triad Matrix Explorer") as demo:
        gr.Markdown("## Triad Matrix Explorer")

        controller_state = gr.State()

        with gr.Row():
            with gr.Column(scale=2):
                triad_image = gr.Image(label="Triad Matrix", type="pil", interactive=False)
                with gr.Row():
                    decrease_btn = gr.Button("− Decrease triad depth")
                    increase_btn = gr.Button("+ Increase triad depth", variant="primary")

            with gr.Column(scale=1):
                with gr.Row():
                    stat_depth = gr.Textbox(label="Triad depth", value="0", interactive=False)
                    stat_transactions = gr.Textbox(label="Total transactions", value="0", interactive=False)
                    stat_leaves = gr.Textbox(label="Leaf triads", value="1", interactive=False)

                dark_mode = gr.Checkbox(label="Dark mode", value=view.dark_mode)

                with gr.Accordion("Surface", open=False):
                    canvas_width = gr.Slider(160, 1600, value=view.canvas_width, step=10, label="Width (px)")
                    canvas_height = gr.Slider(160, 1600, value=view.canvas_height, step=10, label="Height (px)")
                    pixel_ratio = gr.Slider(0.5, 3.0, value=view.device_pixel_ratio, step=0.25, label="Device pixel ratio")
                    resize_btn = gr.Button("Apply size")

                gr.Markdown("### Recent activity")
                log_box = gr.Textbox(lines=8, label="Log", interactive=False)

        gr.Markdown("### Activity at current depth")
        with gr.Row():
            activity_table = gr.Dataframe(label="Leaf activity", interactive=False)
            activity_plot = gr.Plot(label="Activity histogram")

        outputs = [
            triad_image,
            stat_depth,
            stat_transactions,
            stat_leaves,
            activity_table,
            activity_plot,
            log_box,
        ]

        increase_btn.click(fn=increase_depth, inputs=[controller_state], outputs=outputs)
        decrease_btn.click(fn=decrease_depth, inputs=[controller_state], outputs=outputs)
        resize_btn.click(
            fn=resize_canvas,
            inputs=[controller_state, canvas_width, canvas_height, pixel_ratio],
            outputs=outputs,
        )
        dark_mode.change(fn=toggle_dark_mode, inputs=[controller_state, dark_mode], outputs=outputs)

        demo.load(
            fn=lambda dark: init_controller(config, dark),
            inputs=[dark_mode],
            outputs=[controller_state, *outputs],
        )

    return demo


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Triad Matrix Explorer (Gradio UI)")
    parser.add_argument("--config", type=Path, help="JSON file with explorer settings")
    parser.add_argument("--seed", type=int, help="Seed for the simulated activity snapshot")
    parser.add_argument("--share", action="store_true", help="Create a public Gradio share link")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(list(argv) if argv is not None else sys.argv[1:])
    setup_logging(parse_level(args.log_level))
    config = load_config(args.config, seed=args.seed)
    demo = build_demo(config)
    logger.info("Launching web explorer (depth %d..%d)", *config.depth.to_tuple())
    demo.launch(share=args.share)


if __name__ == "__main__":
    main()
