"""PySide6 image renderer for ganttlab charts.

This package is intentionally a *client* of the headless core:

- Core stays renderer-agnostic (no Qt imports under `ganttlab/`).
- This package only turns a finished `Chart` into a PNG.

Run from source:

    python -m ganttlab_qt <log_file> <mode>
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
