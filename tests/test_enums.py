"""Unit tests for chart/axis enum tokens."""

from __future__ import annotations

import pytest

from chartjs.encoder import encode_axis, encode_chart, encode_dataset
from chartjs.enums import AxisPosition, AxisType, ChartType
from chartjs.schema import Axis, Chart, Dataset

pytestmark = pytest.mark.unit


def test_chart_type_tokens() -> None:
    """Chart types map to fixed lowercase tokens."""

    assert [t.token for t in ChartType] == ["line", "bar", "bubble"]
    assert ChartType.bar.token == "bar"
    assert int(ChartType.line) == 0


def test_axis_type_tokens_default_to_category() -> None:
    """Axis types map to Chart.js scale names; category is the zero value."""

    assert [t.token for t in AxisType] == ["category", "linear", "logarithmic", "time", "radialLinear"]
    assert AxisType(0) is AxisType.category
    assert Axis().type is AxisType.category


def test_axis_position_zero_value_has_empty_token() -> None:
    """The unset position has an empty token; the rest are sides."""

    assert AxisPosition.unset.token == ""
    assert [p.token for p in AxisPosition if p] == ["bottom", "top", "left", "right"]


def test_out_of_range_codes_fail_fast() -> None:
    """Codes outside the declared set are rejected, not silently encoded."""

    with pytest.raises(ValueError):
        ChartType(3)
    with pytest.raises(ValueError):
        encode_axis(Axis(type=9))  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        encode_axis(Axis(position=5))  # type: ignore[arg-type]


def test_boolean_codes_are_rejected() -> None:
    """True/False are not accepted as enum codes even though they equal 1/0."""

    with pytest.raises(TypeError):
        encode_chart(Chart(type=True))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        encode_dataset(Dataset(type=False), precision=2)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        encode_axis(Axis(type=False))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        encode_axis(Axis(position=True))  # type: ignore[arg-type]
