from __future__ import annotations

"""PNG rendering of a `ganttlab.series.Chart` with QPainter.

One horizontal bar per interval, keyed by VM row, with a legend entry per
series to the right of the plot area.
"""

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFontMetricsF, QImage, QPainter, QPen

from ganttlab.series import Chart
from ganttlab.styles import StyleDef
from ganttlab_qt.app import ensure_gui_app
from ganttlab_qt.layout import (
    BAR_HALF_HEIGHT,
    PlotFrame,
    nice_step,
    row_range,
    tick_values,
    time_range,
)
from ganttlab_qt.palette import fill_color, style_pen

_MARGIN_LEFT = 70
_MARGIN_TOP = 20
_MARGIN_BOTTOM = 60
_LEGEND_GAP = 16
_LEGEND_SWATCH_W = 28
_LEGEND_ROW_H = 20


@dataclass(frozen=True)
class QtChartRenderer:
    width: int = 1024
    height: int = 768

    def render(self, chart: Chart, base_name: str) -> Path:
        out = Path(f"{base_name}.png")
        image = self.paint(chart)
        out.parent.mkdir(parents=True, exist_ok=True)
        if not image.save(str(out), "PNG"):
            raise OSError(f"Could not write chart image to {out}")
        return out

    def paint(self, chart: Chart) -> QImage:
        ensure_gui_app()

        image = QImage(self.width, self.height, QImage.Format.Format_ARGB32)
        image.fill(QColor(Qt.GlobalColor.white))

        p = QPainter(image)
        try:
            p.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            metrics = QFontMetricsF(p.font())
            legend_w = _legend_width(chart, metrics)

            t_lo, t_hi = time_range(chart)
            row_lo, row_hi = row_range(chart)
            frame = PlotFrame(
                left=_MARGIN_LEFT,
                top=_MARGIN_TOP,
                width=self.width - _MARGIN_LEFT - legend_w - 2 * _LEGEND_GAP,
                height=self.height - _MARGIN_TOP - _MARGIN_BOTTOM,
                t_lo=t_lo,
                t_hi=t_hi,
                row_lo=row_lo,
                row_hi=row_hi,
            )

            _paint_bars(p, chart, frame)
            _paint_axes(p, frame, metrics)
            _paint_legend(
                p, chart, left=frame.left + frame.width + _LEGEND_GAP, top=frame.top
            )
        finally:
            p.end()
        return image


def _styles_by_id(chart: Chart) -> dict[int, StyleDef]:
    return {s.style_id: s for s in chart.styles}


def _legend_width(chart: Chart, metrics: QFontMetricsF) -> float:
    text_w = max((metrics.horizontalAdvance(s.title) for s in chart.series), default=0.0)
    return _LEGEND_SWATCH_W + 8 + text_w


def _paint_bars(p: QPainter, chart: Chart, frame: PlotFrame) -> None:
    styles = _styles_by_id(chart)
    p.save()
    p.setClipRect(QRectF(frame.left, frame.top, frame.width, frame.height))
    for series in chart.series:
        style = styles[series.style_id]
        p.setPen(style_pen(style))
        p.setBrush(fill_color(style.color))
        for row, started, finished in series.intervals():
            x0 = frame.x_for(started)
            x1 = frame.x_for(finished)
            y0 = frame.y_for(row + BAR_HALF_HEIGHT)
            y1 = frame.y_for(row - BAR_HALF_HEIGHT)
            p.drawRect(QRectF(QPointF(x0, y0), QPointF(x1, y1)).normalized())
    p.restore()


def _paint_axes(p: QPainter, frame: PlotFrame, metrics: QFontMetricsF) -> None:
    p.save()
    p.setBrush(Qt.BrushStyle.NoBrush)
    p.setPen(QPen(QColor(Qt.GlobalColor.black)))
    p.drawRect(QRectF(frame.left, frame.top, frame.width, frame.height))

    bottom = frame.top + frame.height
    text_h = metrics.height()

    step = nice_step(frame.t_hi - frame.t_lo)
    for t in tick_values(frame.t_lo, frame.t_hi, step):
        x = frame.x_for(t)
        p.drawLine(QPointF(x, bottom), QPointF(x, bottom - 5))
        label = f"{t:g}"
        w = metrics.horizontalAdvance(label)
        p.drawText(QPointF(x - w / 2, bottom + 4 + metrics.ascent()), label)

    # One tick per row; labels are thinned when rows get too dense to read.
    label_every = max(1, int(text_h // max(1.0, frame.row_pitch())) + 1)
    for row in range(frame.row_lo, frame.row_hi + 1):
        y = frame.y_for(row)
        p.drawLine(QPointF(frame.left, y), QPointF(frame.left + 5, y))
        if (row - frame.row_lo) % label_every:
            continue
        label = str(row)
        w = metrics.horizontalAdvance(label)
        p.drawText(QPointF(frame.left - 6 - w, y + metrics.ascent() / 2 - 1), label)

    x_label = "Time"
    p.drawText(
        QPointF(
            frame.left + (frame.width - metrics.horizontalAdvance(x_label)) / 2,
            bottom + 8 + text_h + metrics.ascent(),
        ),
        x_label,
    )

    y_label = "VM"
    p.translate(18, frame.top + (frame.height + metrics.horizontalAdvance(y_label)) / 2)
    p.rotate(-90)
    p.drawText(QPointF(0, 0), y_label)
    p.restore()


def _paint_legend(p: QPainter, chart: Chart, *, left: float, top: float) -> None:
    styles = _styles_by_id(chart)
    p.save()
    metrics = QFontMetricsF(p.font())
    for i, series in enumerate(chart.series):
        style = styles[series.style_id]
        y = top + i * _LEGEND_ROW_H
        p.setPen(style_pen(style))
        p.setBrush(fill_color(style.color))
        p.drawRect(QRectF(left, y + 4, _LEGEND_SWATCH_W, _LEGEND_ROW_H - 8))
        p.setPen(QPen(QColor(Qt.GlobalColor.black)))
        p.drawText(
            QPointF(left + _LEGEND_SWATCH_W + 8, y + (_LEGEND_ROW_H + metrics.ascent()) / 2 - 2),
            series.title,
        )
    p.restore()
