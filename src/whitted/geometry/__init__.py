"""Geometry module for shape primitives.

This module provides the primitives a scene is built from and their
intersection routines:

Components:
    sphere: Sphere primitive with ray-sphere intersection
    plane: Infinite plane primitive
    triangle: Triangle primitive with precomputed edge basis
    primitive: Dispatch over the shape variants

Ray-object intersection follows the pattern:
    t = intersects(primitive, ray_origin, ray_direction)  # float or None
"""

from .plane import Plane, hit_plane, plane_normal
from .primitive import Primitive, intersects, normal_at
from .sphere import Sphere, hit_sphere, sphere_normal
from .triangle import (
    Triangle,
    hit_triangle,
    preprocess_triangle,
    triangle_barycentric,
    triangle_normal,
)

__all__ = [
    "Primitive",
    "intersects",
    "normal_at",
    "Sphere",
    "hit_sphere",
    "sphere_normal",
    "Plane",
    "hit_plane",
    "plane_normal",
    "Triangle",
    "hit_triangle",
    "preprocess_triangle",
    "triangle_barycentric",
    "triangle_normal",
]
