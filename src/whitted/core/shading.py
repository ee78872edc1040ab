"""Direct illumination, hard shadows and recursive mirror reflection.

This module implements the per-ray shading algorithm (Whitted-style):

1. Find the nearest primitive along the ray. A miss returns the background.
2. At the hit point, sum the Lambert term of every point light that is not
   blocked by another primitive, clamp the sum to 1, and mix it with the
   scene's ambient term.
3. If the surface is specular and bounces remain, trace the mirror
   reflection and blend it in, weighted by the surface's specularity.

Recursion depth is bounded by ``bounce_limit``, which is decremented on every
reflection, so a trace always terminates.

Example:
    >>> from whitted.core.vector import vec3
    >>> from whitted.scene.demo import create_demo_scene
    >>> from whitted.scene.scene import preprocess
    >>> scene, camera = create_demo_scene()
    >>> preprocess(scene)
    >>> color = trace(scene, camera.origin, vec3(1, 0, 0), bounce_limit=10)
"""

from __future__ import annotations

import math

from whitted.core.color import Color, blend, scale_color
from whitted.core.ray import reflect
from whitted.core.vector import Vector, add, dot, length, normalize, scale, sub, to_rect, to_sph
from whitted.geometry.primitive import Primitive, normal_at
from whitted.scene.intersection import nearest_hit
from whitted.scene.scene import Light, Scene

# =============================================================================
# Shading Constants
# =============================================================================

# Default reflection depth for a single frame
DEFAULT_BOUNCES = 10

# Upper bound accepted anywhere a bounce limit is configured
MAX_BOUNCES = 50

# Specularity at which a surface is a pure mirror
FULL_SPECULARITY = 255


def background_color(scene: Scene, direction: Vector) -> Color:
    """Color seen along a ray that hits nothing.

    With a sky gradient, the weight of the zenith color grows linearly with
    the absolute elevation of the ray, from 0 at the horizon to 255 straight
    up or down.
    """
    if scene.sky is None:
        return scene.background
    elevation = to_sph(direction).components[1]
    weight = int(abs(elevation) * 2.0 / math.pi * 255.0)
    weight = max(0, min(255, weight))
    return blend(scene.sky.zenith, scene.sky.horizon, weight)


def light_contribution(
    scene: Scene,
    light: Light,
    point: Vector,
    normal: Vector,
    primitive: Primitive | None = None,
) -> float:
    """Shade contributed by one light at a surface point.

    Args:
        scene: The scene (used for the shadow query).
        light: The light.
        point: The surface point.
        normal: Unit surface normal at ``point``.
        primitive: The surface the point lies on; it is excluded from the
            shadow query.

    Returns:
        ``max(0, normal . light_dir) * intensity`` (divided by the squared
        light distance when ``scene.falloff`` is set), or exactly 0.0 when
        another primitive lies between the point and the light.
    """
    to_light = sub(light.position, point)
    distance = length(to_light)
    if distance == 0.0:
        # Light sits on the surface; no direction to shade from
        return 0.0
    light_dir = normalize(to_light)

    blocker = nearest_hit(scene, point, light_dir, exclude=primitive)
    if blocker is not None and blocker.distance < distance:
        return 0.0

    shade = dot(normal, light_dir)
    if shade <= 0.0:
        return 0.0
    shade *= light.intensity
    if scene.falloff:
        shade /= distance * distance
    return shade


def direct_illumination(
    scene: Scene,
    point: Vector,
    normal: Vector,
    primitive: Primitive | None = None,
) -> float:
    """Total shade from all lights at a point, clamped to 1."""
    total = 0.0
    for light in scene.lights:
        total += light_contribution(scene, light, point, normal, primitive)
    return min(total, 1.0)


def shade_color(base: Color, ambient: float, shade_total: float) -> Color:
    """Mix ambient and diffuse light: ``base * (ambient + (1 - ambient) * shade)``."""
    return scale_color(base, ambient + (1.0 - ambient) * shade_total)


def trace(
    scene: Scene,
    origin: Vector,
    direction: Vector,
    bounce_limit: int,
    exclude: Primitive | None = None,
) -> Color:
    """Trace a single ray and return its color.

    Also usable on its own for hit-testing a screen position (pick a
    primitive under the cursor) without going through the tiled renderer.

    Args:
        scene: A preprocessed scene.
        origin: Ray origin.
        direction: Ray direction (nonzero).
        bounce_limit: Remaining reflection depth. At 0 no reflection ray is
            spawned and the shaded surface color is returned as is.
        exclude: Primitive the ray may not hit, normally the surface it is
            leaving.

    Returns:
        The ray's 8-bit color.

    Raises:
        ValueError: If ``bounce_limit`` is negative.
    """
    if bounce_limit < 0:
        raise ValueError(f"bounce_limit must be non-negative, got {bounce_limit}")

    origin = to_rect(origin)
    direction = to_rect(direction)

    hit = nearest_hit(scene, origin, direction, exclude)
    if hit is None:
        return background_color(scene, direction)

    primitive = hit.primitive
    point = add(origin, scale(direction, hit.distance))
    normal = normalize(normal_at(primitive, point))

    shade_total = direct_illumination(scene, point, normal, primitive)
    shaded = shade_color(primitive.color, scene.ambient, shade_total)

    if primitive.specularity <= 0 or bounce_limit == 0:
        return shaded

    reflected_dir = reflect(direction, normal)
    reflected = trace(scene, point, reflected_dir, bounce_limit - 1, primitive)
    return blend(shaded, reflected, FULL_SPECULARITY - primitive.specularity)


def pick(
    scene: Scene,
    origin: Vector,
    direction: Vector,
) -> Primitive | None:
    """Return the primitive seen along a ray, or None (object picking)."""
    hit = nearest_hit(scene, origin, direction)
    return None if hit is None else hit.primitive

