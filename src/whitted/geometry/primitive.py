"""Tagged-variant dispatch over the supported primitive shapes.

A Primitive is one of :class:`Sphere`, :class:`Plane` or :class:`Triangle`.
Each carries its own color and specularity; the functions here pick the
per-shape intersection and normal routine.
"""

from __future__ import annotations

from typing import Union

from whitted.core.vector import Vector
from whitted.geometry.plane import Plane, hit_plane, plane_normal
from whitted.geometry.sphere import Sphere, hit_sphere, sphere_normal
from whitted.geometry.triangle import Triangle, hit_triangle, triangle_normal

Primitive = Union[Sphere, Plane, Triangle]


def intersects(primitive: Primitive, origin: Vector, direction: Vector) -> float | None:
    """Intersect a ray with any primitive.

    Args:
        primitive: The shape to test.
        origin: Ray origin.
        direction: Ray direction.

    Returns:
        Distance ``t > 0`` along the ray, or None for no intersection.

    Raises:
        TypeError: If ``primitive`` is not a supported shape.
    """
    if isinstance(primitive, Sphere):
        return hit_sphere(origin, direction, primitive)
    if isinstance(primitive, Plane):
        return hit_plane(origin, direction, primitive)
    if isinstance(primitive, Triangle):
        return hit_triangle(origin, direction, primitive)
    raise TypeError(f"Unsupported primitive type: {type(primitive).__name__}")


def normal_at(primitive: Primitive, point: Vector) -> Vector:
    """Surface normal direction at ``point`` (not normalized).

    Triangles report their negated face normal, so callers must not assume a
    globally consistent outward orientation.

    Raises:
        TypeError: If ``primitive`` is not a supported shape.
    """
    if isinstance(primitive, Sphere):
        return sphere_normal(primitive, point)
    if isinstance(primitive, Plane):
        return plane_normal(primitive, point)
    if isinstance(primitive, Triangle):
        return triangle_normal(primitive, point)
    raise TypeError(f"Unsupported primitive type: {type(primitive).__name__}")
