from __future__ import annotations

from pathlib import Path

_EXAMPLES = Path(__file__).resolve().parents[1] / "examples"


def test_qt_main_renders_png(tmp_path, monkeypatch) -> None:
    import ganttlab_qt.__main__ as qt_main

    monkeypatch.chdir(tmp_path)

    assert qt_main.main([str(_EXAMPLES / "retries.log"), "workflows"]) == 0
    assert (tmp_path / "test.png").exists()
    assert not (tmp_path / "test.json").exists()


def test_qt_main_delegates_to_core_cli(monkeypatch) -> None:
    import ganttlab.cli as cli
    import ganttlab_qt.__main__ as qt_main
    from ganttlab_qt.renderer import QtChartRenderer

    calls = {}

    def _fake_cli_main(argv, *, renderer):
        calls["argv"] = argv
        calls["renderer"] = renderer
        return 0

    monkeypatch.setattr(cli, "main", _fake_cli_main)

    assert qt_main.main(["x.log", "results"]) == 0
    assert calls["argv"] == ["x.log", "results"]
    assert isinstance(calls["renderer"], QtChartRenderer)


def test_qt_main_import_error_path(monkeypatch) -> None:
    import builtins

    import ganttlab_qt.__main__ as qt_main

    real_import = builtins.__import__

    def _raising_import(name, *args, **kwargs):
        if name == "ganttlab_qt.renderer":
            raise ImportError("no pyside")
        return real_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", _raising_import)
    assert qt_main.main(["x.log", "results"]) == 2


def test_qt_main_malformed_log_exits_1(tmp_path, monkeypatch) -> None:
    import ganttlab_qt.__main__ as qt_main

    bad = tmp_path / "bad.log"
    bad.write_text("1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert qt_main.main([str(bad), "results"]) == 1
    assert not (tmp_path / "test.png").exists()


def test_ensure_gui_app_is_reused() -> None:
    from PySide6.QtGui import QGuiApplication

    from ganttlab_qt.app import ensure_gui_app

    app = ensure_gui_app()

    assert app is not None
    assert QGuiApplication.instance() is not None
    assert type(ensure_gui_app()) is type(app)


def test_packages_expose_version() -> None:
    import ganttlab
    import ganttlab_qt

    assert isinstance(ganttlab.__version__, str)
    assert ganttlab.__version__ == ganttlab_qt.__version__
