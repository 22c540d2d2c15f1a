"""JSON serialization of Chart, Dataset and Axis objects.

Composites are written member by member in a fixed key order. Leaf values go
through `ChartJSONEncoder`; point data is produced by
`chartjs.values.encode_values` and emitted verbatim as the `data` member, so
its fixed-precision numbers survive unchanged.

Omission rules:
- tri-state flags are left out when None
- colors, per-dataset type, line tension and point radius are left out when None
- string labels and ids are left out when empty
- `options`, `scales`, `xAxes` and `yAxes` are left out when they carry nothing
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from django.core.serializers.json import DjangoJSONEncoder

from .colors import RGBA
from .enums import AxisPosition, AxisType, ChartType
from .schema import Axis, Axes, Chart, Dataset, Options, TriState
from .values import Values, encode_values

log = logging.getLogger(__name__)

Member = tuple[str, str]
EnumT = TypeVar("EnumT", ChartType, AxisType, AxisPosition)


class ChartJSONEncoder(DjangoJSONEncoder):
    """JSON encoder for chart leaf values.

    Adds RGBA colors on top of the types DjangoJSONEncoder already handles
    (dates, times, Decimal, UUID, lazy strings).
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, RGBA):
            return o.to_css()
        return super().default(o)


def encode_chart(chart: Chart, *, precision: int | None = None) -> str:
    """Serialize a chart to the JSON document Chart.js expects.

    Args:
        chart: Chart to serialize.
        precision: Decimal places for point coordinates. Defaults to the
            configured `CHARTJS_FLOAT_PRECISION`.

    Returns:
        Compact JSON text.

    Raises:
        ShapeError: When any dataset carries an inconsistent point series.
        TypeError: When a field holds a value that cannot be encoded.
    """

    log.debug(
        "Encoding %s chart with %d datasets, %d labels",
        _code(ChartType, chart.type).token,
        len(chart.data.datasets),
        len(chart.data.labels),
    )
    data = _object(
        [
            ("datasets", _array(encode_dataset(d, precision=precision) for d in chart.data.datasets)),
            ("labels", _array(_leaf(label) for label in chart.data.labels)),
        ]
    )
    members: list[Member] = [("type", _leaf(_code(ChartType, chart.type)))]
    _add_text(members, "label", chart.label)
    members.append(("data", data))
    options = _options_members(chart.options)
    if options:
        members.append(("options", _object(options)))
    return _object(members)


def encode_chart_bytes(chart: Chart, *, precision: int | None = None) -> bytes:
    """Serialize a chart and return the UTF-8 encoded document."""

    return encode_chart(chart, precision=precision).encode("utf-8")


def encode_dataset(dataset: Dataset, *, precision: int | None = None) -> str:
    """Serialize a single dataset, including its `data` array.

    Raises:
        ShapeError: When the dataset's point series is inconsistent.
        TypeError: When `dataset.data` is not a point series.
    """

    if dataset.data is not None and not isinstance(dataset.data, Values):
        raise TypeError(f"Dataset.data must provide xs(), ys() and rs(); got {type(dataset.data).__name__}.")
    points = encode_values(dataset.data, precision=precision)

    members: list[Member] = []
    if dataset.type is not None:
        members.append(("type", _leaf(_code(ChartType, dataset.type))))
    _add_optional(members, "backgroundColor", dataset.background_color)
    _add_optional(members, "borderColor", dataset.border_color)
    _add_text(members, "label", dataset.label)
    _add_flag(members, "fill", dataset.fill)
    _add_optional(members, "lineTension", dataset.line_tension)
    _add_optional(members, "pointRadius", dataset.point_radius)
    _add_flag(members, "showLine", dataset.show_line)
    _add_flag(members, "spanGaps", dataset.span_gaps)
    members.append(("data", points))
    return _object(members)


def encode_axis(axis: Axis) -> str:
    """Serialize a single axis (scale) definition."""

    members: list[Member] = [("type", _leaf(_code(AxisType, axis.type)))]
    position = _code(AxisPosition, axis.position)
    if position is not AxisPosition.unset:
        members.append(("position", _leaf(position)))
    _add_text(members, "label", axis.label)
    _add_text(members, "id", axis.id)
    _add_flag(members, "gridLine", axis.grid_lines)
    _add_flag(members, "stacked", axis.stacked)
    _add_flag(members, "display", axis.display)
    return _object(members)


def _options_members(options: Options) -> list[Member]:
    members: list[Member] = []
    _add_flag(members, "responsive", options.responsive)
    _add_flag(members, "maintainAspectRatio", options.maintain_aspect_ratio)
    scales = _scales_members(options.scales)
    if scales:
        members.append(("scales", _object(scales)))
    return members


def _scales_members(axes: Axes) -> list[Member]:
    log.debug("Encoding %d x axes, %d y axes", len(axes.x_axes), len(axes.y_axes))
    members: list[Member] = []
    if axes.x_axes:
        members.append(("xAxes", _array(encode_axis(axis) for axis in axes.x_axes)))
    if axes.y_axes:
        members.append(("yAxes", _array(encode_axis(axis) for axis in axes.y_axes)))
    return members


def _add_flag(members: list[Member], key: str, value: TriState) -> None:
    """Append a tri-state flag unless it is unset."""

    if value is None:
        return
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be True, False or None; got {value!r}.")
    members.append((key, _leaf(value)))


def _add_optional(members: list[Member], key: str, value: object) -> None:
    if value is not None:
        members.append((key, _leaf(value)))


def _add_text(members: list[Member], key: str, value: str) -> None:
    if value:
        members.append((key, _leaf(value)))


def _code(enum_cls: type[EnumT], value: object) -> EnumT:
    """Project a member or raw integer code onto `enum_cls`.

    Raises:
        TypeError: When `value` is a bool, which would otherwise pass as 0 or 1.
        ValueError: When the code is outside the declared set.
    """

    if isinstance(value, bool):
        raise TypeError(f"{enum_cls.__name__} code must not be a bool; got {value!r}.")
    return enum_cls(value)


def _leaf(value: object) -> str:
    # IntEnum members would otherwise encode as their integer codes.
    if isinstance(value, (ChartType, AxisType, AxisPosition)):
        value = value.token
    return json.dumps(value, cls=ChartJSONEncoder, separators=(",", ":"), allow_nan=False)


def _array(fragments: Iterable[str]) -> str:
    return "[" + ",".join(fragments) + "]"


def _object(members: Iterable[Member]) -> str:
    return "{" + ",".join(f"{json.dumps(key)}:{fragment}" for key, fragment in members) + "}"
