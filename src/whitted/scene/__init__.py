"""Scene module for scene description and ray-scene queries.

Components:
    scene: Scene container (primitives, lights, background, ambient term)
    intersection: Nearest-hit search over all primitives
    demo: Hard-coded demo scenes

A scene must be passed through ``preprocess`` once after construction and
before the first render so that triangles have their derived fields.
"""

from .demo import DemoParams, create_demo_camera, create_demo_scene, create_floor_scene
from .intersection import SceneHit, nearest_hit
from .scene import Light, Scene, SkyGradient, preprocess

__all__ = [
    "Scene",
    "Light",
    "SkyGradient",
    "preprocess",
    "SceneHit",
    "nearest_hit",
    "DemoParams",
    "create_demo_scene",
    "create_demo_camera",
    "create_floor_scene",
]
