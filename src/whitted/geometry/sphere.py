"""Sphere primitive with ray-sphere intersection.

The ray-sphere intersection is found by solving

    |O + t*D - C|^2 = r^2

which expands to the quadratic ``a*t^2 + b*t + c = 0`` with

    a = D . D
    b = 2 * (O - C) . D
    c = |O - C|^2 - r^2

Only strictly positive roots count as hits. When the ray starts inside the
sphere the roots have opposite signs and the positive (far) root is the
surface the ray leaves through.

Example:
    >>> from whitted.core.vector import vec3
    >>> sphere = Sphere(center=vec3(0.0, 0.0, 0.0), radius=1.0)
    >>> hit_sphere(vec3(-5.0, 0.0, 0.0), vec3(1.0, 0.0, 0.0), sphere)
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.color import WHITE, Color
from whitted.core.vector import Vector, dot, sub, to_rect
from whitted.geometry.surface import check_surface


@dataclass(eq=False)
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        color: Surface color.
        specularity: Mirror weight in [0, 255].
    """

    center: Vector
    radius: float
    color: Color = WHITE
    specularity: int = 0

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")
        self.center = to_rect(self.center)
        self.color = check_surface(self.color, self.specularity)


def hit_sphere(origin: Vector, direction: Vector, sphere: Sphere) -> float | None:
    """Test for ray-sphere intersection.

    Args:
        origin: The starting point of the ray.
        direction: The direction of the ray (need not be normalized).
        sphere: The sphere to test against.

    Returns:
        The ray parameter ``t > 0`` of the nearest surface in front of the
        origin, or None if the ray misses.

    Raises:
        ValueError: If ``direction`` is the zero vector.
    """
    oc = sub(origin, sphere.center)
    a = dot(direction, direction)
    if a == 0.0:
        raise ValueError("Ray direction must be nonzero")
    b = 2.0 * dot(oc, direction)
    c = dot(oc, oc) - sphere.radius * sphere.radius

    disc = b * b - 4.0 * a * c
    if disc < 0.0:
        return None

    sqrt_d = math.sqrt(disc)
    t1 = (-b - sqrt_d) / (2.0 * a)
    t2 = (-b + sqrt_d) / (2.0 * a)

    # t1 <= t2 since a > 0
    if t1 > 0.0:
        return t1
    if t2 > 0.0:
        # Origin inside the sphere
        return t2
    return None


def sphere_normal(sphere: Sphere, point: Vector) -> Vector:
    """Outward direction at ``point``: ``point - center``, unnormalized."""
    return sub(to_rect(point), sphere.center)
