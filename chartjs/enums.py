"""Closed enumerations for chart type, axis type and axis position.

Integer codes are stable; each member maps to exactly one Chart.js token.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class ChartType(IntEnum):
    """Chart (or per-dataset override) type."""

    line = 0
    bar = 1
    bubble = 2

    @property
    def token(self) -> str:
        return _CHART_TYPE_TOKENS[self]


class AxisType(IntEnum):
    """Scale type; `category` is the default used for bar plots."""

    category = 0
    linear = 1
    logarithmic = 2
    time = 3
    radial_linear = 4

    @property
    def token(self) -> str:
        return _AXIS_TYPE_TOKENS[self]


class AxisPosition(IntEnum):
    """Scale position. `unset` means no position is emitted."""

    unset = 0
    bottom = 1
    top = 2
    left = 3
    right = 4

    @property
    def token(self) -> str:
        return _AXIS_POSITION_TOKENS[self]


_CHART_TYPE_TOKENS: Final[tuple[str, ...]] = ("line", "bar", "bubble")
_AXIS_TYPE_TOKENS: Final[tuple[str, ...]] = ("category", "linear", "logarithmic", "time", "radialLinear")
_AXIS_POSITION_TOKENS: Final[tuple[str, ...]] = ("", "bottom", "top", "left", "right")
