from __future__ import annotations

import pytest

from ganttlab.parse import parse_log
from ganttlab.series import (
    MalformedVmIdError,
    SeriesSpec,
    assemble_chart,
    task_series,
    vm_provisioning_series,
    vm_row,
)
from ganttlab.styles import Color, LineType


@pytest.mark.parametrize(
    ("vm_id", "row"), [("VM12", 12), ("VM3", 3), ("vm-007", 7), ("42", 42)]
)
def test_vm_row_uses_trailing_number(vm_id: str, row: int) -> None:
    assert vm_row(vm_id) == row


@pytest.mark.parametrize("vm_id", ["VM", "worker", "VM3a", ""])
def test_vm_row_without_trailing_number_raises(vm_id: str) -> None:
    with pytest.raises(MalformedVmIdError):
        vm_row(vm_id)


def test_provisioning_series_covers_every_vm() -> None:
    log = parse_log("2\nVM2 0 50\nVM1 10 90\n0\n0\n0\n")

    spec = vm_provisioning_series(log)

    assert spec.title == "VM idle"
    assert spec.color == Color.BLUE
    assert spec.line_type == LineType.SOLID
    assert spec.vm_rows == (2, 1)
    assert spec.starts == (0.0, 10.0)
    assert spec.finishes == (50.0, 90.0)


def test_task_series_rows_ignore_whether_vm_was_declared() -> None:
    log = parse_log("0\n0\n1\nwf t VM5 1 2 OK\n0\n")

    spec = task_series(log.tasks, "x", Color.RED)

    assert spec.vm_rows == (5,)


def test_bad_vm_id_in_tasks_fails_during_series_construction() -> None:
    log = parse_log("0\n0\n1\nwf t host 1 2 OK\n0\n")

    with pytest.raises(MalformedVmIdError, match="host"):
        task_series(log.tasks, "x", Color.RED)


def _spec(title: str, color: Color, n: int, line_type: LineType = LineType.SOLID) -> SeriesSpec:
    return SeriesSpec(
        title=title,
        color=color,
        line_type=line_type,
        vm_rows=tuple(range(1, n + 1)),
        starts=tuple(float(i) for i in range(n)),
        finishes=tuple(float(i + 1) for i in range(n)),
    )


def test_assemble_drops_empty_specs_before_allocating_styles() -> None:
    chart = assemble_chart(
        "results",
        [
            _spec("idle", Color.BLUE, 2),
            _spec("empty", Color.RED, 0),
            _spec("done", Color.GREEN, 1),
            _spec("again", Color.GREEN, 3),
        ],
    )

    assert [s.title for s in chart.series] == ["idle", "done", "again"]
    assert [s.style_id for s in chart.series] == [1, 2, 2]
    assert [(d.style_id, d.color) for d in chart.styles] == [
        (1, Color.BLUE),
        (2, Color.GREEN),
    ]
    assert all(s.vm_rows for s in chart.series)


def test_series_intervals_are_positionally_aligned() -> None:
    chart = assemble_chart("storage", [_spec("s", Color.ORANGE, 2)])

    assert chart.series[0].intervals() == [(1, 0.0, 1.0), (2, 1.0, 2.0)]
