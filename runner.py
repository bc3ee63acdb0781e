from __future__ import annotations

"""Repo-root convenience shim for rendering a chart image.

This keeps the most common local workflow short:

    python runner.py examples/retries.log results

It delegates to the canonical image entry point:

    python -m ganttlab_qt
"""

import sys


def main() -> int:
    """Render `test.png` from a scheduling log.

    Arguments are forwarded exactly as in `python -m ganttlab_qt`.
    """

    # `ganttlab_qt.__main__.main()` is responsible for printing the friendly
    # PySide6-missing message if the Qt dependency is not installed.
    from ganttlab_qt.__main__ import main as qt_main

    return qt_main(sys.argv[1:])


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
