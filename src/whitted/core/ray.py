"""Ray data structure and reflection helper.

Example:
    >>> from whitted.core.vector import vec3
    >>> ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, 1.0))
    >>> ray_at(ray, 5.0).z
    5.0
"""

from __future__ import annotations

from typing import NamedTuple

from whitted.core.vector import Vector, dot, scale, sub, to_rect


class Ray(NamedTuple):
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (rectangular).
        direction: The direction of the ray (rectangular). Not required to be
            unit length; hit distances are measured in multiples of it.
    """

    origin: Vector
    direction: Vector


def make_ray(origin: Vector, direction: Vector) -> Ray:
    """Create a ray, converting both vectors to rectangular form."""
    return Ray(to_rect(origin), to_rect(direction))


def ray_at(ray: Ray, t: float) -> Vector:
    """Compute the point ``origin + t * direction``."""
    return to_rect(ray.origin) + scale(to_rect(ray.direction), t)


def reflect(incident: Vector, normal: Vector) -> Vector:
    """Reflect an incident vector about a normal.

    Computes ``D - 2 (D . N) N``. The normal should be unit length for a
    mirror reflection that preserves the length of ``incident``.

    Args:
        incident: The incoming direction (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction, rectangular.
    """
    n = to_rect(normal)
    return sub(to_rect(incident), scale(n, 2.0 * dot(incident, n)))
