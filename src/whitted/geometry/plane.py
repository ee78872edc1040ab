"""Infinite plane primitive.

A plane is a point on it plus a normal. The ray parameter of the crossing is

    t = N . (P - O) / (N . D)

A ray parallel to the plane (``N . D == 0``) never hits it, and crossings at
or behind the ray origin are rejected.
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.color import WHITE, Color
from whitted.core.vector import Vector, dot, length_squared, sub, to_rect
from whitted.geometry.surface import PARALLEL_EPSILON, check_surface


@dataclass(eq=False)
class Plane:
    """An infinite plane.

    Attributes:
        point: Any point on the plane.
        normal: The plane normal (nonzero, need not be unit length).
        color: Surface color.
        specularity: Mirror weight in [0, 255].
    """

    point: Vector
    normal: Vector
    color: Color = WHITE
    specularity: int = 0

    def __post_init__(self) -> None:
        self.point = to_rect(self.point)
        self.normal = to_rect(self.normal)
        if length_squared(self.normal) == 0.0:
            raise ValueError("Plane normal must be nonzero")
        self.color = check_surface(self.color, self.specularity)


def hit_plane(origin: Vector, direction: Vector, plane: Plane) -> float | None:
    """Test for ray-plane intersection.

    Args:
        origin: The starting point of the ray.
        direction: The direction of the ray.
        plane: The plane to test against.

    Returns:
        The ray parameter ``t > 0`` of the crossing, or None if the ray is
        parallel to the plane or crosses it at or behind its origin.
    """
    denom = dot(plane.normal, direction)
    if abs(denom) < PARALLEL_EPSILON:
        return None
    t = dot(plane.normal, sub(plane.point, origin)) / denom
    if t <= 0.0:
        return None
    return t


def plane_normal(plane: Plane, point: Vector) -> Vector:
    """The plane's fixed normal (the point is irrelevant)."""
    return plane.normal
