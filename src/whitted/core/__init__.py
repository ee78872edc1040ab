"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Dual-representation (rectangular/spherical) vector type
    ray: Ray data structure and reflection
    color: 8-bit RGB colors and blending
    shading: Direct illumination, shadows and recursive reflection
    renderer: Tiled multi-threaded frame renderer
    adaptive: Bounce-depth feedback controller holding a frame budget
"""

from .color import BLACK, WHITE, Color, blend, make_color, scale_color
from .ray import Ray, make_ray, ray_at, reflect
from .vector import (
    Representation,
    Vector,
    add,
    cross,
    dot,
    length,
    length_squared,
    negate,
    normalize,
    scale,
    spherical,
    sub,
    to_rect,
    to_sph,
    vec3,
)

# Note: shading, renderer and adaptive are NOT imported here to avoid circular
# imports (they depend on the scene and camera packages, which depend on this
# one). Import them directly, e.g. ``from whitted.core.renderer import render``.

__all__ = [
    "Vector",
    "Representation",
    "vec3",
    "spherical",
    "to_rect",
    "to_sph",
    "add",
    "sub",
    "negate",
    "scale",
    "dot",
    "cross",
    "length",
    "length_squared",
    "normalize",
    "Ray",
    "make_ray",
    "ray_at",
    "reflect",
    "Color",
    "BLACK",
    "WHITE",
    "blend",
    "make_color",
    "scale_color",
]
