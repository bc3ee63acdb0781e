from __future__ import annotations

import os

from PySide6.QtGui import QGuiApplication


def ensure_gui_app() -> QGuiApplication:
    """Return the running Qt application, creating a headless one if needed.

    Painting text onto a QImage needs a QGuiApplication even though no window
    is ever shown. Set GANTTLAB_QT_DISABLE_OFFSCREEN=1 to keep the platform
    plugin Qt would otherwise pick.
    """

    disable_offscreen = os.environ.get("GANTTLAB_QT_DISABLE_OFFSCREEN", "").strip() not in (
        "",
        "0",
        "false",
    )
    if not disable_offscreen:
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication([])
    return app
