from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from PySide6.QtWidgets import QApplication

from triad_explorer.core.config import ExplorerConfig, load_config
from triad_explorer.core.controller import ExplorerController
from triad_explorer.logging_config import parse_level, setup_logging
from triad_explorer.ui import MainWindow

logger = logging.getLogger(__name__)


def create_application(argv: Sequence[str]) -> QApplication:
    app = QApplication(list(argv))
    app.setApplicationName("Triad Matrix Explorer")
    return app


def parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(description="Triad Matrix Explorer")
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON file with explorer settings (depth, geometry, activity, palette, view)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the simulated activity snapshot (default: random each launch)",
    )
    parser.add_argument(
        "--light",
        action="store_true",
        help="Start with the light theme instead of dark mode",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level for the triad_explorer logger (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Optional file that receives a copy of the log",
    )
    return parser.parse_known_args(argv)


def build_config(args: argparse.Namespace) -> ExplorerConfig:
    config = load_config(args.config, seed=args.seed)
    if args.light:
        config.view.dark_mode = False
    return config


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(argv if argv is not None else sys.argv)
    args, qt_args = parse_args(argv[1:])
    qt_argv = [argv[0], *qt_args]

    try:
        setup_logging(parse_level(args.log_level), args.log_file)
        config = build_config(args)
    except (OSError, ValueError) as exc:
        print(f"triad-explorer: error: {exc}", file=sys.stderr)
        return 2

    app = create_application(qt_argv)
    controller = ExplorerController(config)
    window = MainWindow(controller)
    window.show()
    logger.info("Explorer window shown (depth %d..%d)", *config.depth.to_tuple())
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
