"""Hard-coded demo scenes.

The classic demo is three unit spheres on the z axis, viewed side-on from
``x = -5`` under a single light above and behind them:

- A blue sphere at z=1, slightly glossy (specularity 20)
- A green near-mirror sphere at z=-1 (specularity 239)
- A green sphere at z=-3 with a medium gloss (specularity 96)

The "floor" variant adds a reflective ground plane, a triangle and a sky
gradient so that every primitive type shows up in one image.

Example:
    >>> from whitted.scene.demo import create_demo_scene
    >>> from whitted.scene.scene import preprocess
    >>> scene, camera = create_demo_scene()
    >>> preprocess(scene)
    >>> len(scene.primitives)
    3
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.camera.camera import Camera, Projection
from whitted.core.color import Color
from whitted.core.vector import vec3
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.geometry.triangle import Triangle
from whitted.scene.scene import Light, Scene, SkyGradient

# Resolution the demo camera's field of view is proportioned for
DEMO_WIDTH = 320
DEMO_HEIGHT = 240


@dataclass
class DemoParams:
    """Parameters for customizing the demo scene.

    Attributes:
        light_intensity: Intensity of the single point light.
        ambient: Ambient coefficient of the scene.
        background: Flat background color.
        width: Image width the camera is set up for.
        height: Image height the camera is set up for.
        projection: Pixel scaling rule of the camera.
    """

    light_intensity: float = 2.0
    ambient: float = 0.2
    background: Color = Color(0xA0, 0xA0, 0xA0)
    width: int = DEMO_WIDTH
    height: int = DEMO_HEIGHT
    projection: Projection = Projection.ANGULAR


def create_demo_camera(params: DemoParams | None = None) -> Camera:
    """Camera at ``(-5, 0, 0)`` looking down +x with a 90 degree horizontal FOV."""
    if params is None:
        params = DemoParams()
    fov_x = math.pi / 2
    return Camera(
        origin=vec3(-5.0, 0.0, 0.0),
        direction=vec3(1.0, 0.0, 0.0),
        fov_x=fov_x,
        fov_y=fov_x * params.height / params.width,
        projection=params.projection,
    )


def create_demo_scene(params: DemoParams | None = None) -> tuple[Scene, Camera]:
    """Create the three-sphere demo scene and its camera.

    The scene still needs :func:`~whitted.scene.scene.preprocess` before
    rendering.

    Returns:
        Tuple of (scene, camera).
    """
    if params is None:
        params = DemoParams()

    scene = Scene(background=params.background, ambient=params.ambient)
    scene.add(Sphere(vec3(0.0, 0.0, 1.0), 1.0, color=Color(0, 0, 0xFF), specularity=20))
    scene.add(Sphere(vec3(0.0, 0.0, -1.0), 1.0, color=Color(0, 0xE0, 0), specularity=0xEF))
    scene.add(Sphere(vec3(0.0, 0.0, -3.0), 1.0, color=Color(0, 0xE0, 0), specularity=0x60))
    scene.add_light(Light(vec3(0.0, 10.0, -10.0), params.light_intensity))

    return scene, create_demo_camera(params)


def create_floor_scene(params: DemoParams | None = None) -> tuple[Scene, Camera]:
    """The demo scene plus a glossy floor plane, a triangle and a sky gradient."""
    scene, camera = create_demo_scene(params)
    scene.sky = SkyGradient(horizon=Color(0xD0, 0xE0, 0xF0), zenith=Color(0x30, 0x60, 0xC0))
    scene.add(Plane(vec3(0.0, -1.0, 0.0), vec3(0.0, 1.0, 0.0), color=Color(0xC0, 0xC0, 0xC0), specularity=0x40))
    scene.add(
        Triangle(
            vec3(2.0, -1.0, 3.0),
            vec3(2.0, -1.0, -1.0),
            vec3(2.0, 2.0, 1.0),
            color=Color(0xE0, 0x40, 0x20),
            specularity=0,
        )
    )
    return scene, camera
