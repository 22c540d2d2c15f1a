"""App configuration for the chartjs Django app."""

from __future__ import annotations

from django.apps import AppConfig


class ChartjsConfig(AppConfig):
    """Configuration for the `chartjs` app."""

    name = "chartjs"
    verbose_name = "Chart.js configuration"
