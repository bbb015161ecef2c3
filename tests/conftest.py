from __future__ import annotations

import os

# Qt widgets are created without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from triad_explorer.core.config import ExplorerConfig
from triad_explorer.core.surfaces import RecordingSurface


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def config() -> ExplorerConfig:
    cfg = ExplorerConfig()
    cfg.activity.seed = 1234
    return cfg


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface(300.0, 200.0, 1.0)
