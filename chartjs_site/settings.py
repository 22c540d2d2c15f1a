"""Django settings used to run the chartjs app and its test suite.

Output precision is driven by an environment variable so a deployment can
tune it without code changes.
"""

from __future__ import annotations

import os


def _env_int(name: str, *, default: int) -> int:
    """Parse an integer environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed integer value.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    return int(raw.strip())


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY") or "dev-only-insecure-secret-key"

INSTALLED_APPS = [
    "chartjs.apps.ChartjsConfig",
]

CHARTJS_FLOAT_PRECISION = _env_int("CHARTJS_FLOAT_PRECISION", default=2)

USE_TZ = True
