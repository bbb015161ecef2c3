from __future__ import annotations

from dataclasses import asdict
from typing import Dict

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence
from PySide6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from triad_explorer.core.controller import ExplorerController
from triad_explorer.core.stats import StatsText
from triad_explorer.ui.triad_view import TriadViewWidget

_DARK_STYLE = """
QWidget#central { background-color: #111827; color: #e5e7eb; }
QGroupBox { color: #e5e7eb; }
QLabel { color: #e5e7eb; }
QTextEdit { background-color: #1f2937; color: #e5e7eb; }
QPushButton { background-color: #1f2937; color: #e5e7eb; padding: 4px 10px; }
"""

_LIGHT_STYLE = """
QWidget#central { background-color: #f3f4f6; color: #111827; }
"""


class ExplorerStatsWidget(QGroupBox):
    """Read-only readouts for the current depth."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__("Triad Matrix", parent)
        self._fields: Dict[str, str] = {
            "depth": "Triad depth",
            "total_transactions": "Total transactions",
            "leaf_triads": "Leaf triads",
        }
        self._labels: Dict[str, QLabel] = {}
        layout = QFormLayout(self)
        for key, title in self._fields.items():
            lbl = QLabel("0")
            lbl.setObjectName(f"stat_{key}")
            lbl.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            lbl.setAccessibleName(title)
            layout.addRow(title, lbl)
            self._labels[key] = lbl

    def update_stats(self, stats: StatsText) -> None:
        for key, value in asdict(stats).items():
            label = self._labels.get(key)
            if label is not None:
                label.setText(value)

    def text(self, key: str) -> str:
        return self._labels[key].text()


class MainWindow(QMainWindow):
    def __init__(self, controller: ExplorerController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.setWindowTitle("Triad Matrix Explorer")
        self.resize(1000, 700)
        self._dark_mode = controller.config.view.dark_mode

        self._build_menu()
        self._build_ui()
        self._connect_signals()
        self._apply_theme(self._dark_mode)

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        exit_action = file_menu.addAction("E&xit")
        exit_action.triggered.connect(self.close)

        view_menu = self.menuBar().addMenu("&View")
        self._increase_action = view_menu.addAction("&Increase depth")
        self._increase_action.setShortcuts([QKeySequence(Qt.Key.Key_Plus), QKeySequence(Qt.Key.Key_Equal)])
        self._decrease_action = view_menu.addAction("&Decrease depth")
        self._decrease_action.setShortcut(QKeySequence(Qt.Key.Key_Minus))
        view_menu.addSeparator()
        self._dark_action = view_menu.addAction("Dark &mode")
        self._dark_action.setCheckable(True)
        self._dark_action.setChecked(self._dark_mode)

    def _build_ui(self) -> None:
        central = QWidget(self)
        central.setObjectName("central")
        layout = QHBoxLayout(central)

        self.triad_view = TriadViewWidget()
        layout.addWidget(self.triad_view, stretch=3)

        right_side = QWidget()
        right_layout = QVBoxLayout(right_side)
        right_layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.stats_widget = ExplorerStatsWidget()
        right_layout.addWidget(self.stats_widget)

        button_row = QHBoxLayout()
        self.decrease_button = QPushButton("−")
        self.decrease_button.setAccessibleName("Decrease triad depth")
        self.decrease_button.setToolTip("Decrease Triad Depth")
        self.increase_button = QPushButton("+")
        self.increase_button.setAccessibleName("Increase triad depth")
        self.increase_button.setToolTip("Increase Triad Depth")
        button_row.addWidget(self.decrease_button)
        button_row.addWidget(self.increase_button)
        right_layout.addLayout(button_row)

        self.log_output = QTextEdit()
        self.log_output.setReadOnly(True)
        self.log_output.setMinimumHeight(200)
        right_layout.addWidget(QLabel("Recent activity"))
        right_layout.addWidget(self.log_output, stretch=1)

        layout.addWidget(right_side, stretch=1)
        self.setCentralWidget(central)
        self.statusBar().showMessage("Ready")

    def _connect_signals(self) -> None:
        self.increase_button.clicked.connect(self.controller.increase)
        self.decrease_button.clicked.connect(self.controller.decrease)
        self._increase_action.triggered.connect(self.controller.increase)
        self._decrease_action.triggered.connect(self.controller.decrease)
        self._dark_action.toggled.connect(self._apply_theme)
        self.controller.stats_updated.connect(self._on_stats_updated)
        self.controller.depth_changed.connect(self._on_depth_changed)
        self.controller.log_emitted.connect(self._append_log)
        self.controller.bind_surface(self.triad_view, on_painted=self.triad_view.update)
        self.triad_view.set_resize_handler(self.controller.resize)
        self.controller.request_stats()

    def _on_stats_updated(self, stats: StatsText) -> None:
        self.stats_widget.update_stats(stats)

    def _on_depth_changed(self, depth: int) -> None:
        self.statusBar().showMessage(f"Depth {depth}", 3000)

    def _append_log(self, message: str) -> None:
        self.log_output.append(message)

    def _apply_theme(self, dark: bool) -> None:
        self._dark_mode = bool(dark)
        palette = self.controller.config.palette
        self.centralWidget().setStyleSheet(_DARK_STYLE if self._dark_mode else _LIGHT_STYLE)
        self.triad_view.set_background(palette.dark_background if self._dark_mode else palette.light_background)
        self.controller.repaint()
        self.triad_view.update()
