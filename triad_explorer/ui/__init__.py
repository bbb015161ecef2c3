# SPDX-License-Identifier: MIT
"""
Qt user interface components for the explorer application.
"""

from .main_window import MainWindow  # noqa: F401
from .triad_view import TriadViewWidget  # noqa: F401
