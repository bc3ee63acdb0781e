from __future__ import annotations

import sys


def main(argv: list[str] | None = None) -> int:
    """Entry point for `python -m ganttlab_qt <log_file> <mode>`.

    Same arguments as `python -m ganttlab`, but writes `test.png`.
    """

    try:
        from ganttlab_qt.renderer import QtChartRenderer
    except ImportError as e:  # pragma: no cover
        # Common first-run experience: PySide6 not installed.
        sys.stderr.write(
            "ganttlab_qt requires PySide6. Install it (e.g. `pip install PySide6`)\n"
        )
        sys.stderr.write(f"ImportError: {e}\n")
        return 2

    from ganttlab.cli import main as cli_main

    return cli_main(sys.argv[1:] if argv is None else argv, renderer=QtChartRenderer())


if __name__ == "__main__":
    raise SystemExit(main())
