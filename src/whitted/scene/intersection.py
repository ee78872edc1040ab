"""Scene-level nearest-hit search.

Every primary ray and every shadow ray goes through :func:`nearest_hit`,
a linear scan over all primitives. This is the dominant cost of a frame.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from whitted.core.vector import Vector, to_rect
from whitted.geometry.primitive import Primitive, intersects

if TYPE_CHECKING:
    from whitted.scene.scene import Scene


class SceneHit(NamedTuple):
    """Closest intersection of a ray with the scene.

    Attributes:
        primitive: The primitive that was hit.
        distance: Ray parameter ``t > 0`` of the hit; the hit point is
            ``origin + distance * direction``.
    """

    primitive: Primitive
    distance: float


def nearest_hit(
    scene: Scene,
    origin: Vector,
    direction: Vector,
    exclude: Primitive | None = None,
) -> SceneHit | None:
    """Find the closest primitive hit by a ray.

    Args:
        scene: The scene to search.
        origin: Ray origin.
        direction: Ray direction.
        exclude: A primitive to skip, compared by identity. Rays leaving a
            surface (reflections, shadow rays) pass the surface here so they
            cannot re-hit it at ``t`` close to zero.

    Returns:
        The closest hit with ``t > 0``, or None if the ray hits nothing.
        On exact distance ties the earlier primitive wins.
    """
    origin = to_rect(origin)
    direction = to_rect(direction)
    best: SceneHit | None = None
    for primitive in scene.primitives:
        if primitive is exclude:
            continue
        t = intersects(primitive, origin, direction)
        if t is not None and (best is None or t < best.distance):
            best = SceneHit(primitive, t)
    return best
