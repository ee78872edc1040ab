"""Between-frame camera edits.

These are the camera movements an interactive front end maps its keys and
mouse to. They mutate the camera in place and must only be called between
render calls, never while a frame is in flight.

Rotations are done in spherical form so that azimuth and elevation can be
changed independently; a turned camera keeps its direction spherical.
"""

from __future__ import annotations

import math

from whitted.camera.camera import Camera
from whitted.core.vector import Vector, add, scale, spherical, to_sph

# Distance moved per forward/backward step
MOVE_STEP = 0.1

# Azimuth change per turn step (1 degree)
TURN_STEP = math.pi / 180

# Field-of-view change per zoom step (5 degrees)
ZOOM_STEP = math.pi / 36

# Maximum rotation per frame for a mouse at the image edge
MOUSE_SENSITIVITY = math.pi / 30


def turn(camera: Camera, d_azimuth: float = 0.0, d_elevation: float = 0.0) -> None:
    """Rotate the view direction by the given angles (radians)."""
    r, elevation, azimuth = to_sph(camera.direction).components
    camera.direction = spherical(r, elevation + d_elevation, azimuth + d_azimuth)


def advance(camera: Camera, distance: float = MOVE_STEP) -> None:
    """Move the camera along its view direction; negative values retreat."""
    camera.origin = add(camera.origin, scale(camera.direction, distance))


def translate(camera: Camera, offset: Vector) -> None:
    """Shift the camera origin by ``offset`` without turning it."""
    camera.origin = add(camera.origin, offset)


def zoom(camera: Camera, delta: float, aspect: float) -> None:
    """Widen (positive ``delta``) or narrow the field of view.

    The vertical field of view follows the horizontal one as
    ``fov_y = fov_x * aspect`` where ``aspect`` is height / width.

    Raises:
        ValueError: If the resulting field of view leaves (0, pi); the
            camera is left unchanged.
    """
    fov_x = camera.fov_x + delta
    fov_y = fov_x * aspect
    if not (0.0 < fov_x < math.pi and 0.0 < fov_y < math.pi):
        raise ValueError(f"Zoom would leave field of view outside (0, pi): fov_x={fov_x}, fov_y={fov_y}")
    camera.fov_x = fov_x
    camera.fov_y = fov_y


def mouse_look(camera: Camera, mouse_x: int, mouse_y: int, width: int, height: int) -> None:
    """Turn toward the mouse position with quadratic sensitivity.

    The offset from the image center, as a fraction of the image size, is
    squared (keeping its sign) and scaled by :data:`MOUSE_SENSITIVITY`, so a
    centered mouse leaves the camera still and small offsets turn slowly.
    """
    dx = (mouse_x - width // 2) / width
    dy = (mouse_y - height // 2) / height
    turn(
        camera,
        d_azimuth=MOUSE_SENSITIVITY * math.copysign(dx * dx, dx),
        d_elevation=MOUSE_SENSITIVITY * math.copysign(dy * dy, dy),
    )
