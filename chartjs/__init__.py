"""Typed builders and a JSON serializer for Chart.js configuration documents.

Build a `Chart`, add datasets and axes, then call `encode_chart` to get the
JSON text the Chart.js constructor accepts.
"""

from .colors import RGBA
from .encoder import ChartJSONEncoder, encode_axis, encode_chart, encode_chart_bytes, encode_dataset
from .enums import AxisPosition, AxisType, ChartType
from .schema import Axes, Axis, Chart, Data, Dataset, Options
from .values import FunctionValues, Points, Shape, ShapeError, Values, encode_values, resolve_shape

__all__ = [
    "RGBA",
    "Axes",
    "Axis",
    "AxisPosition",
    "AxisType",
    "Chart",
    "ChartJSONEncoder",
    "ChartType",
    "Data",
    "Dataset",
    "FunctionValues",
    "Options",
    "Points",
    "Shape",
    "ShapeError",
    "Values",
    "encode_axis",
    "encode_chart",
    "encode_chart_bytes",
    "encode_dataset",
    "encode_values",
    "resolve_shape",
]
