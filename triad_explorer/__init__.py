# SPDX-License-Identifier: MIT
"""
Triad Matrix Explorer: a recursive triangle visualization of simulated
mining activity.

The package is organised so that `triad_explorer.core` hosts the geometry,
rendering and state logic, while `triad_explorer.ui` contains Qt widgets and
windows. `triad_explorer.main` wires the Qt application together and
`triad_explorer.gradio_app` serves the same explorer in a browser.
"""

__version__ = "0.1.0"

__all__ = ["main"]
