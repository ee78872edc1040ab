"""8-bit RGB color values and channel arithmetic.

Colors are plain integer triples in 0..255. Arithmetic truncates toward zero
the same way an assignment to an unsigned byte would, so rendering is exactly
reproducible across runs and worker counts.
"""

from __future__ import annotations

from typing import NamedTuple


class Color(NamedTuple):
    """An 8-bit RGB color."""

    r: int
    g: int
    b: int


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


def _clamp_channel(value: float) -> int:
    v = int(value)
    if v < 0:
        return 0
    if v > 255:
        return 255
    return v


def make_color(r: float, g: float, b: float) -> Color:
    """Build a color from arbitrary numbers, truncating and clamping to 0..255."""
    return Color(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


def validate_color(color: tuple[int, int, int]) -> Color:
    """Check that ``color`` is three integers in 0..255 and return it as a Color.

    Raises:
        ValueError: If the color has the wrong arity or a channel is out of range.
    """
    if len(color) != 3:
        raise ValueError(f"Color must have 3 channels, got {len(color)}: {color}")
    for channel in color:
        if not 0 <= int(channel) <= 255 or int(channel) != channel:
            raise ValueError(f"Color channels must be integers in [0, 255], got {color}")
    return Color(int(color[0]), int(color[1]), int(color[2]))


def scale_color(color: Color, factor: float) -> Color:
    """Multiply every channel by ``factor`` (truncated, clamped)."""
    return make_color(color.r * factor, color.g * factor, color.b * factor)


def blend(a: Color, b: Color, alpha: int) -> Color:
    """Blend two colors per channel: ``(a * alpha + b * (255 - alpha)) // 255``.

    Args:
        a: Color weighted by ``alpha``.
        b: Color weighted by ``255 - alpha``.
        alpha: Integer weight in [0, 255].

    Returns:
        The blended color.
    """
    inv = 255 - alpha
    return Color(
        (a.r * alpha + b.r * inv) // 255,
        (a.g * alpha + b.g * inv) // 255,
        (a.b * alpha + b.b * inv) // 255,
    )
