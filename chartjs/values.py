"""Point series and the encoder that writes them as a Chart.js `data` array.

A point series is anything exposing `xs()`, `ys()` and `rs()`. Which of those
sequences are populated decides the JSON shape of every element:

- only one axis: bare numbers (`[1.00, 2.00]`), used by bar charts
- x and y: `{"x": ..., "y": ...}` objects
- x, y and r: `{"x": ..., "y": ..., "r": ...}` objects, used by bubble charts

Numbers are written with a fixed number of decimals rather than through
`json.dumps`, so `1` is emitted as `1.00` with the default precision.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol, runtime_checkable

from .conf import resolve_precision

log = logging.getLogger(__name__)

Number = float | int | None


@runtime_checkable
class Values(Protocol):
    """Source of plottable coordinates.

    `ys()` and `rs()` may return empty sequences when the axis is not used.
    """

    def xs(self) -> Sequence[Number]: ...

    def ys(self) -> Sequence[Number]: ...

    def rs(self) -> Sequence[Number]: ...


@dataclass(frozen=True, slots=True)
class Points:
    """Array-backed point series.

    Args:
        x: X values. When only these are given the chart must be a bar chart.
        y: Optional Y values.
        r: Optional bubble radii; requires both `x` and `y`.
    """

    x: Sequence[Number] = ()
    y: Sequence[Number] = ()
    r: Sequence[Number] = ()

    def xs(self) -> Sequence[Number]:
        return self.x

    def ys(self) -> Sequence[Number]:
        return self.y

    def rs(self) -> Sequence[Number]:
        return self.r


@dataclass(frozen=True, slots=True)
class FunctionValues:
    """Point series whose Y values are computed from X on demand."""

    fn: Callable[[float], Number]
    x: Sequence[float] = field(default_factory=tuple)

    def xs(self) -> Sequence[Number]:
        return self.x

    def ys(self) -> Sequence[Number]:
        return [self.fn(value) for value in self.x]

    def rs(self) -> Sequence[Number]:
        return ()


class Shape(StrEnum):
    """JSON element shape of an encoded point series."""

    bare = "bare"
    xy = "xy"
    xyr = "xyr"


class ShapeError(ValueError):
    """Raised when the axes of a point series cannot form a valid shape."""

    def __init__(self, message: str, *, x_count: int, y_count: int, r_count: int) -> None:
        """Initialize the error.

        Args:
            message: Description of the violated rule.
            x_count: Number of X values in the series.
            y_count: Number of Y values in the series.
            r_count: Number of R values in the series.
        """

        super().__init__(f"{message} (x={x_count}, y={y_count}, r={r_count})")
        self.x_count = x_count
        self.y_count = y_count
        self.r_count = r_count


def resolve_shape(values: Values) -> Shape:
    """Return the JSON shape a point series encodes to.

    Args:
        values: Point series to inspect.

    Returns:
        The Shape used by `encode_values`.

    Raises:
        ShapeError: When radii are present without X values, or when the axes
            required by the shape differ in length.
    """

    shape, _ = _columns(values)
    return shape


def encode_values(values: Values | None, *, precision: int | None = None) -> str:
    """Encode a point series as a JSON array fragment.

    Args:
        values: Point series to encode; None encodes as an empty array.
        precision: Decimal places for every coordinate. Defaults to the
            configured `CHARTJS_FLOAT_PRECISION`.

    Returns:
        JSON array text, e.g. `[{"x":1.00,"y":3.00}]`.

    Raises:
        ShapeError: When the series axes are inconsistent.
        ValueError: When a coordinate is infinite or precision is not a
            non-negative integer.
    """

    digits = resolve_precision(precision)
    if values is None:
        return "[]"

    shape, columns = _columns(values)
    log.debug("Encoding %d points as %s", len(columns[0]), shape)

    if shape is Shape.bare:
        items = [_format_number(x, digits) for x in columns[0]]
    else:
        keys = ("x", "y", "r")[: len(columns)]
        items = [
            "{" + ",".join(f'"{key}":{_format_number(value, digits)}' for key, value in zip(keys, row)) + "}"
            for row in zip(*columns)
        ]
    return "[" + ",".join(items) + "]"


def _columns(values: Values) -> tuple[Shape, tuple[Sequence[Number], ...]]:
    """Dispatch on populated axes and return the shape with its columns."""

    xs, ys, rs = _axis(values.xs()), _axis(values.ys()), _axis(values.rs())
    counts = {"x_count": len(xs), "y_count": len(ys), "r_count": len(rs)}

    if not xs:
        if rs:
            raise ShapeError("Radius values require X and Y values", **counts)
        # A series carrying only Y values is written as a single-axis bar series.
        xs, ys = ys, []

    if rs:
        if len(xs) != len(ys) or len(xs) != len(rs):
            raise ShapeError("X, Y and R values must have the same length", **counts)
        return Shape.xyr, (xs, ys, rs)
    if ys:
        if len(xs) != len(ys):
            raise ShapeError("X and Y values must have the same length", **counts)
        return Shape.xy, (xs, ys)
    return Shape.bare, (xs,)


def _axis(values: Sequence[Number] | None) -> list[Number]:
    """Copy one accessor's values into a list; None means the axis is unused.

    The sequence is never truth-tested, so array types that refuse `bool()`
    are accepted.
    """

    if values is None:
        return []
    return list(values)


def _format_number(value: Number, digits: int) -> str:
    """Format one coordinate with a fixed number of decimals.

    None and NaN become `null` so Chart.js draws a gap.
    """

    if value is None:
        return "null"
    number = float(value)
    if math.isnan(number):
        return "null"
    if math.isinf(number):
        raise ValueError(f"Out of range float values are not JSON compliant: {value!r}")
    return f"{number:.{digits}f}"
