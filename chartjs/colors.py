"""Color values for Chart.js datasets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RGBA:
    """An 8-bit RGBA color.

    Args:
        r: Red channel (0-255).
        g: Green channel (0-255).
        b: Blue channel (0-255).
        a: Alpha channel (0-255); written to JSON as a 0-1 fraction.
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"RGBA.{name} must be an integer in 0..255; got {value!r}.")

    def to_css(self) -> str:
        """Return the color in the `rgba(r, g, b, a)` form Chart.js accepts."""

        return f"rgba({self.r}, {self.g}, {self.b}, {self.a / 255:.3f})"

    @classmethod
    def from_hex(cls, value: str, *, alpha: int = 255) -> RGBA:
        """Build a color from a `#RGB`, `#RRGGBB` or `#RRGGBBAA` string.

        Args:
            value: Hex color string, with or without the leading `#`.
            alpha: Alpha channel used when the string carries none.

        Returns:
            Parsed RGBA color.

        Raises:
            ValueError: When the string is not a supported hex color.
        """

        digits = value.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Unsupported hex color: {value!r}.")
        try:
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError as exc:
            raise ValueError(f"Unsupported hex color: {value!r}.") from exc
        if len(channels) == 3:
            channels.append(alpha)
        return cls(*channels)
