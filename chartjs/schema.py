"""Data model for a Chart.js configuration document.

A `Chart` owns its `Data` (datasets plus category labels) and `Options`
(display flags plus axes). Builder methods append in call order, which is
also emission order.

Boolean options are tri-state: `None` leaves the key out of the document so
Chart.js applies its own default, while `True`/`False` are always written.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .colors import RGBA
from .enums import AxisPosition, AxisType, ChartType
from .values import Values

TriState = bool | None


@dataclass(slots=True)
class Dataset:
    """One data series plus its styling hints.

    Args:
        data: Point series rendered under the `data` key.
        type: Optional per-dataset chart type override.
        background_color: Fill color; None leaves it to Chart.js.
        border_color: Line/border color; None leaves it to Chart.js.
        label: Legend name of the dataset.
        fill: Whether the area under a line is filled.
        line_tension: Bezier curve tension of the line.
        point_radius: Point radius in pixels.
        show_line: Whether the line is drawn.
        span_gaps: Whether lines are drawn across missing (`null`) points.
    """

    data: Values | None = None
    type: ChartType | None = None
    background_color: RGBA | None = None
    border_color: RGBA | None = None
    label: str = ""
    fill: TriState = None
    line_tension: float | None = None
    point_radius: float | None = None
    show_line: TriState = None
    span_gaps: TriState = None


@dataclass(slots=True)
class Data:
    """The `data` block: datasets plus category labels."""

    datasets: list[Dataset] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Axis:
    """A single scale definition.

    Args:
        type: Scale type; `category` is the Chart.js default.
        position: Where the axis is drawn; `unset` omits the key.
        label: Axis label.
        id: Axis id referenced by datasets.
        grid_lines: Whether grid lines are drawn.
        stacked: Whether values on this axis are stacked.
        display: Whether the axis is shown.
    """

    type: AxisType = AxisType.category
    position: AxisPosition = AxisPosition.unset
    label: str = ""
    id: str = ""
    grid_lines: TriState = None
    stacked: TriState = None
    display: TriState = None


@dataclass(slots=True)
class Axes:
    """X and Y axes, in emission order.

    `Chart.add_x_axis` and `Chart.add_y_axis` are usually more convenient.
    """

    x_axes: list[Axis] = field(default_factory=list)
    y_axes: list[Axis] = field(default_factory=list)

    def add_x(self, axis: Axis) -> None:
        """Append an X axis."""

        self.x_axes.append(axis)

    def add_y(self, axis: Axis) -> None:
        """Append a Y axis."""

        self.y_axes.append(axis)


@dataclass(slots=True)
class Options:
    """The `options` block."""

    responsive: TriState = None
    maintain_aspect_ratio: TriState = None
    scales: Axes = field(default_factory=Axes)


@dataclass(slots=True)
class Chart:
    """Root of a Chart.js configuration document.

    Args:
        type: Chart type.
        label: Optional chart label.
        data: Datasets and category labels.
        options: Display options and axes.
    """

    type: ChartType = ChartType.line
    label: str = ""
    data: Data = field(default_factory=Data)
    options: Options = field(default_factory=Options)

    def add_dataset(self, dataset: Dataset) -> None:
        """Append a dataset."""

        self.data.datasets.append(dataset)

    def add_label(self, *labels: str) -> None:
        """Append one or more category labels."""

        self.data.labels.extend(labels)

    def add_x_axis(self, axis: Axis) -> None:
        """Append an X axis."""

        self.options.scales.add_x(axis)

    def add_y_axis(self, axis: Axis) -> None:
        """Append a Y axis."""

        self.options.scales.add_y(axis)
