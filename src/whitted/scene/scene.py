"""Scene container: primitives, point lights, background and ambient term.

A Scene is built once (see :mod:`whitted.scene.demo`), passed through
:func:`preprocess` and then rendered any number of times. It is read-only
while a render is in flight; edits such as recoloring a primitive must happen
strictly between render calls.

Example:
    >>> from whitted.core.vector import vec3
    >>> from whitted.geometry import Sphere
    >>> scene = Scene(
    ...     primitives=[Sphere(vec3(0, 0, 1), 1.0, color=(0, 0, 255))],
    ...     lights=[Light(vec3(0, 10, -10), 2.0)],
    ... )
    >>> preprocess(scene)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from whitted.core.color import Color, validate_color
from whitted.core.vector import Vector, to_rect
from whitted.geometry.primitive import Primitive
from whitted.geometry.triangle import Triangle, preprocess_triangle

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = Color(0xA0, 0xA0, 0xA0)
DEFAULT_AMBIENT = 0.2


@dataclass(eq=False)
class Light:
    """A point light.

    Lights have no geometry: they are never hit by rays and never occlude.

    Attributes:
        position: Light position in world space.
        intensity: Scalar intensity multiplying the Lambert term.
    """

    position: Vector
    intensity: float = 1.0

    def __post_init__(self) -> None:
        self.position = to_rect(self.position)
        if not math.isfinite(self.intensity) or self.intensity < 0.0:
            raise ValueError(f"Light intensity must be finite and non-negative, got {self.intensity}")


@dataclass
class SkyGradient:
    """Background that blends from ``horizon`` to ``zenith`` by ray elevation.

    Attributes:
        horizon: Color for rays parallel to the ground plane.
        zenith: Color for rays pointing straight up or down.
    """

    horizon: Color
    zenith: Color

    def __post_init__(self) -> None:
        self.horizon = validate_color(self.horizon)
        self.zenith = validate_color(self.zenith)


@dataclass(eq=False)
class Scene:
    """Everything a render needs besides the camera.

    Attributes:
        primitives: Ordered shapes; earlier entries win exact distance ties.
        lights: Point lights.
        background: Color for rays that hit nothing (flat background).
        ambient: Minimum illumination fraction in [0, 1].
        sky: Optional gradient background, replacing ``background``.
        falloff: If True, light contributions are divided by the squared
            distance to the light.
    """

    primitives: list[Primitive] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    background: Color = DEFAULT_BACKGROUND
    ambient: float = DEFAULT_AMBIENT
    sky: SkyGradient | None = None
    falloff: bool = False

    def __post_init__(self) -> None:
        self.background = validate_color(self.background)
        if not 0.0 <= self.ambient <= 1.0:
            raise ValueError(f"ambient must be in [0, 1], got {self.ambient}")

    def add(self, primitive: Primitive) -> Primitive:
        """Append a primitive and return it (handy for keeping a reference)."""
        self.primitives.append(primitive)
        return primitive

    def add_light(self, light: Light) -> Light:
        self.lights.append(light)
        return light


def preprocess(scene: Scene) -> None:
    """Compute derived primitive fields.

    Must be called once after the scene is constructed and before the first
    render; call it again after adding or moving triangles.
    """
    count = 0
    for primitive in scene.primitives:
        if isinstance(primitive, Triangle):
            preprocess_triangle(primitive)
            count += 1
    logger.debug(
        "Preprocessed scene: %d primitives (%d triangles), %d lights",
        len(scene.primitives),
        count,
        len(scene.lights),
    )
