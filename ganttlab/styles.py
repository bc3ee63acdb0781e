from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    ORANGE = "orange"
    BROWN = "brown"
    DARK_GREY = "dark_grey"


class LineType(str, Enum):
    SOLID = "solid"
    DOTTED = "dotted"


StyleKey = tuple[Color, LineType]


@dataclass(frozen=True)
class StyleDef:
    style_id: int
    color: Color
    line_type: LineType


@dataclass
class StyleRegistry:
    """Hands out style ids, one per distinct (color, line type), starting at 1.

    Ids follow first-use order and are stable for the lifetime of the
    registry. Use one registry per chart.
    """

    _ids: dict[StyleKey, int] = field(default_factory=dict)
    _next_id: int = 1

    def style_id_for(self, color: Color, line_type: LineType) -> int:
        key = (color, line_type)
        style_id = self._ids.get(key)
        if style_id is None:
            style_id = self._next_id
            self._ids[key] = style_id
            self._next_id += 1
        return style_id

    def all_registered(self) -> list[StyleDef]:
        return [
            StyleDef(style_id=style_id, color=color, line_type=line_type)
            for (color, line_type), style_id in sorted(
                self._ids.items(), key=lambda kv: kv[1]
            )
        ]
