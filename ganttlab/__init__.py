"""Headless core of ganttlab: scheduling-log parsing and Gantt series assembly.

Renderers live outside this package; the core never imports Qt.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
