"""Settings lookup for the chartjs app.

The only tunable is the number of decimals used when point data is written
into the JSON document. Callers may pass a precision explicitly; otherwise the
value comes from `settings.CHARTJS_FLOAT_PRECISION`, falling back to
`DEFAULT_FLOAT_PRECISION` when Django is not configured.
"""

from __future__ import annotations

from typing import Final

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_FLOAT_PRECISION: Final[int] = 2


def get_float_precision() -> int:
    """Return the configured default float precision.

    Reading the setting triggers Django's lazy settings setup, so a
    `DJANGO_SETTINGS_MODULE` in the environment is honored even when nothing
    has touched `settings` yet.

    Returns:
        Number of decimal places to emit for point coordinates.

    Raises:
        ImproperlyConfigured: When the setting is not a non-negative integer.
    """

    try:
        raw = getattr(settings, "CHARTJS_FLOAT_PRECISION", DEFAULT_FLOAT_PRECISION)
    except ImproperlyConfigured:
        # Neither DJANGO_SETTINGS_MODULE nor settings.configure() is in place.
        return DEFAULT_FLOAT_PRECISION
    if not _is_precision(raw):
        raise ImproperlyConfigured(f"CHARTJS_FLOAT_PRECISION must be a non-negative integer; got {raw!r}.")
    return raw


def resolve_precision(precision: int | None) -> int:
    """Return `precision` when given, otherwise the configured default.

    Raises:
        ValueError: When an explicit precision is not a non-negative integer.
    """

    if precision is None:
        return get_float_precision()
    if not _is_precision(precision):
        raise ValueError(f"precision must be a non-negative integer; got {precision!r}.")
    return precision


def _is_precision(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
