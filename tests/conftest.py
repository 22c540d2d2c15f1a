"""Pytest configuration shared across the chartjs test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from chartjs.enums import AxisType, ChartType
from chartjs.schema import Axis, Chart, Dataset
from chartjs.values import Points


@pytest.fixture
def scatter_chart() -> Chart:
    """Return a line chart with one x/y dataset and two linear axes."""

    chart = Chart(type=ChartType.line)
    chart.add_dataset(Dataset(data=Points(x=[1, 2], y=[3, 4])))
    chart.add_x_axis(Axis(type=AxisType.linear))
    chart.add_y_axis(Axis(type=AxisType.linear, display=True))
    return chart


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests that only exercise in-memory encoding.
    - `integration`: tests touching Django settings or the app registry.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
