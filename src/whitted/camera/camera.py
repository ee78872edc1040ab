"""Camera model and pixel-to-ray mapping.

The camera is an origin plus a view direction (the direction through the
image center) and horizontal/vertical fields of view in radians. A pixel's
ray is obtained by rotating the view direction in spherical form:

    rot_x = (x - width // 2) * scale_x
    rot_y = (y - height // 2) * scale_y
    elevation -= rot_y
    azimuth   += rot_x

Two scaling rules are supported and produce visibly different images:

    ANGULAR:      scale = fov / size            (equal angle per pixel)
    PERSPECTIVE:  scale = tan(fov / 2) / size

Example:
    >>> import math
    >>> from whitted.core.vector import vec3
    >>> cam = Camera(origin=vec3(-5, 0, 0), direction=vec3(0, 0, 1),
    ...              fov_x=math.pi / 2, fov_y=math.pi / 2 * 240 / 320)
    >>> d = pixel_to_ray(cam, 160, 120, 320, 240)
    >>> round(d.z, 6)
    1.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from whitted.core.vector import Vector, length, spherical, to_rect, to_sph


class Projection(Enum):
    """How field of view is spread across the pixels."""

    ANGULAR = "angular"
    PERSPECTIVE = "perspective"


@dataclass
class Camera:
    """Configuration for the viewpoint.

    Mutated only between frames (see :mod:`whitted.camera.controls`).

    Attributes:
        origin: Camera position in world space.
        direction: Direction to the image center. May be stored in either
            representation; turning the camera keeps it spherical.
        fov_x: Horizontal field of view in radians.
        fov_y: Vertical field of view in radians.
        projection: Pixel scaling rule.
    """

    origin: Vector
    direction: Vector
    fov_x: float
    fov_y: float
    projection: Projection = Projection.ANGULAR

    def __post_init__(self) -> None:
        self.origin = to_rect(self.origin)
        if length(self.direction) == 0.0:
            raise ValueError("Camera direction must be nonzero")
        for name, fov in (("fov_x", self.fov_x), ("fov_y", self.fov_y)):
            if not 0.0 < fov < math.pi:
                raise ValueError(f"{name} must be in (0, pi) radians, got {fov}")


def pixel_scale(camera: Camera, width: int, height: int) -> tuple[float, float]:
    """Angular offset per pixel along x and y for the camera's projection."""
    if camera.projection == Projection.PERSPECTIVE:
        return math.tan(camera.fov_x / 2.0) / width, math.tan(camera.fov_y / 2.0) / height
    return camera.fov_x / width, camera.fov_y / height


def pixel_to_ray(camera: Camera, x: int, y: int, width: int, height: int) -> Vector:
    """Map a pixel to the direction of its primary ray.

    Args:
        camera: The camera.
        x: Pixel column, 0 is the left edge.
        y: Pixel row, 0 is the top edge.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        The ray direction in rectangular form. Its length equals the length
        of the camera direction.

    Raises:
        ValueError: If the image size is not positive or the pixel lies
            outside the image.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(f"Pixel ({x}, {y}) is outside the {width}x{height} image")

    scale_x, scale_y = pixel_scale(camera, width, height)
    rot_x = (x - width // 2) * scale_x
    rot_y = (y - height // 2) * scale_y

    r, elevation, azimuth = to_sph(camera.direction).components
    return to_rect(spherical(r, elevation - rot_y, azimuth + rot_x))
