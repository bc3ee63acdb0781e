from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from ganttlab.styles import Color, LineType, StyleDef, StyleRegistry
from ganttlab.types import ParsedLog, TaskExecution, TransferExecution

logger = logging.getLogger(__name__)

_ROW_SUFFIX_RE = re.compile(r"(\d+)$")


class MalformedVmIdError(ValueError):
    pass


@dataclass(frozen=True)
class SeriesSpec:
    """A titled group of interval bars that has not been given a style id yet."""

    title: str
    color: Color
    line_type: LineType
    vm_rows: tuple[int, ...]
    starts: tuple[float, ...]
    finishes: tuple[float, ...]

    def is_empty(self) -> bool:
        return not self.vm_rows


@dataclass(frozen=True)
class Series:
    vm_rows: tuple[int, ...]
    starts: tuple[float, ...]
    finishes: tuple[float, ...]
    title: str
    style_id: int

    def intervals(self) -> list[tuple[int, float, float]]:
        return list(zip(self.vm_rows, self.starts, self.finishes))


@dataclass(frozen=True)
class Chart:
    mode: str
    styles: tuple[StyleDef, ...]
    series: tuple[Series, ...]


def vm_row(vm_id: str) -> int:
    """Chart row for a VM id: its trailing number (``"VM12"`` is row 12)."""

    m = _ROW_SUFFIX_RE.search(vm_id)
    if m is None:
        raise MalformedVmIdError(f"VM id {vm_id!r} has no trailing row number")
    return int(m.group(1))


def _spec(
    title: str,
    color: Color,
    line_type: LineType,
    bars: Iterable[tuple[str, float, float]],
) -> SeriesSpec:
    rows: list[int] = []
    starts: list[float] = []
    finishes: list[float] = []
    for vm_id, started, finished in bars:
        rows.append(vm_row(vm_id))
        starts.append(started)
        finishes.append(finished)
    return SeriesSpec(
        title=title,
        color=color,
        line_type=line_type,
        vm_rows=tuple(rows),
        starts=tuple(starts),
        finishes=tuple(finishes),
    )


def vm_provisioning_series(log: ParsedLog) -> SeriesSpec:
    return _spec(
        "VM idle",
        Color.BLUE,
        LineType.SOLID,
        ((vm.id, vm.started, vm.finished) for vm in log.vms.values()),
    )


def task_series(
    tasks: Iterable[TaskExecution],
    title: str,
    color: Color,
    line_type: LineType = LineType.SOLID,
) -> SeriesSpec:
    return _spec(title, color, line_type, ((t.vm_id, t.started, t.finished) for t in tasks))


def transfer_series(
    transfers: Iterable[TransferExecution],
    title: str,
    color: Color,
    line_type: LineType = LineType.SOLID,
) -> SeriesSpec:
    return _spec(
        title, color, line_type, ((t.vm_id, t.started, t.finished) for t in transfers)
    )


def assemble_chart(mode: str, specs: Iterable[SeriesSpec]) -> Chart:
    """Drop empty specs, then style the rest from a fresh registry.

    Empty specs are dropped before registration, so they never take a style id.
    """

    registry = StyleRegistry()
    series: list[Series] = []
    for spec in specs:
        if spec.is_empty():
            logger.debug("dropping empty series %r", spec.title)
            continue
        series.append(
            Series(
                vm_rows=spec.vm_rows,
                starts=spec.starts,
                finishes=spec.finishes,
                title=spec.title,
                style_id=registry.style_id_for(spec.color, spec.line_type),
            )
        )
    return Chart(mode=mode, styles=tuple(registry.all_registered()), series=tuple(series))
