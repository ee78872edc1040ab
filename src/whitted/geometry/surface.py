"""Surface attributes shared by every primitive and intersection tolerances."""

from __future__ import annotations

from whitted.core.color import Color, validate_color

# Below this |N . D| a ray is treated as parallel to a plane
PARALLEL_EPSILON = 1e-12

# Triangles whose squared face-normal length falls below this have zero area
DEGENERATE_EPSILON = 1e-20

MAX_SPECULARITY = 255


def check_surface(color: tuple[int, int, int], specularity: int) -> Color:
    """Validate a primitive's color and specularity.

    Args:
        color: RGB color, three integers in [0, 255].
        specularity: Mirror weight in [0, 255]; 0 is fully diffuse and 255 a
            perfect mirror.

    Returns:
        The color as a Color tuple.

    Raises:
        ValueError: If either attribute is out of range.
    """
    if int(specularity) != specularity or not 0 <= specularity <= MAX_SPECULARITY:
        raise ValueError(
            f"specularity must be an integer in [0, {MAX_SPECULARITY}], got {specularity}"
        )
    return validate_color(color)
