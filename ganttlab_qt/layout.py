from __future__ import annotations

"""Axis ranges, ticks and data-to-pixel mapping for the Gantt image.

This module is intentionally Qt-free so the geometry can be tested without a
display.
"""

import math
from dataclasses import dataclass

from ganttlab.series import Chart

# Bars span row +/- BAR_HALF_HEIGHT.
BAR_HALF_HEIGHT = 0.4


def time_range(chart: Chart) -> tuple[float, float]:
    starts = [t for s in chart.series for t in s.starts]
    finishes = [t for s in chart.series for t in s.finishes]
    if not starts:
        return 0.0, 1.0
    lo = min(0.0, min(starts), min(finishes))
    hi = max(max(finishes), max(starts))
    if hi <= lo:
        hi = lo + 1.0
    return lo, hi


def row_range(chart: Chart) -> tuple[int, int]:
    """One empty row of headroom above and below the used rows."""

    rows = [r for s in chart.series for r in s.vm_rows]
    if not rows:
        return 0, 2
    return min(rows) - 1, max(rows) + 1


def nice_step(span: float, target_ticks: int = 8) -> float:
    if span <= 0 or not math.isfinite(span):
        return 1.0
    rough = span / max(1, target_ticks)
    magnitude = 10.0 ** math.floor(math.log10(rough))
    for m in (1.0, 2.0, 5.0):
        if rough <= m * magnitude:
            return m * magnitude
    return 10.0 * magnitude


def tick_values(lo: float, hi: float, step: float) -> list[float]:
    first = math.ceil(lo / step)
    last = math.floor(hi / step)
    return [i * step for i in range(first, last + 1)]


@dataclass(frozen=True)
class PlotFrame:
    left: float
    top: float
    width: float
    height: float
    t_lo: float
    t_hi: float
    row_lo: int
    row_hi: int

    def x_for(self, t: float) -> float:
        return self.left + (t - self.t_lo) / (self.t_hi - self.t_lo) * self.width

    def y_for(self, row: float) -> float:
        # Row numbers grow upwards.
        span = max(1, self.row_hi - self.row_lo)
        return self.top + (self.row_hi - row) / span * self.height

    def row_pitch(self) -> float:
        return self.height / max(1, self.row_hi - self.row_lo)
