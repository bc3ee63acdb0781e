from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from ganttlab.series import Chart


class ChartRenderer(Protocol):
    def render(self, chart: Chart, base_name: str) -> Path:
        """Draw `chart` and write it to `base_name` plus the renderer's extension."""
        raise NotImplementedError


def chart_to_json(chart: Chart) -> dict[str, Any]:
    return {
        "mode": chart.mode,
        "styles": [
            {
                "style_id": s.style_id,
                "color": s.color.value,
                "line_type": s.line_type.value,
            }
            for s in chart.styles
        ],
        "series": [
            {
                "title": s.title,
                "style_id": s.style_id,
                "vm_rows": list(s.vm_rows),
                "starts": list(s.starts),
                "finishes": list(s.finishes),
            }
            for s in chart.series
        ],
    }


def write_chart_json(path: Path, chart: Chart) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(chart_to_json(chart), indent=2, allow_nan=False)
    path.write_text(text, encoding="utf-8")


@dataclass(frozen=True)
class JsonChartRenderer:
    """Writes the chart description itself; the headless default."""

    def render(self, chart: Chart, base_name: str) -> Path:
        out = Path(f"{base_name}.json")
        write_chart_json(out, chart)
        return out
