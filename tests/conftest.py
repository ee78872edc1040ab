"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: small hand-built
scenes with known shading, and the preprocessed demo scene.
"""

import pytest

from whitted.core.color import Color
from whitted.core.vector import vec3
from whitted.geometry import Plane, Sphere
from whitted.scene import Light, Scene, create_demo_scene, preprocess


@pytest.fixture
def demo():
    """The three-sphere demo scene, preprocessed, with its camera."""
    scene, camera = create_demo_scene()
    preprocess(scene)
    return scene, camera


@pytest.fixture
def floor_scene():
    """A horizontal floor at y=0 lit from straight above.

    With ambient 0.5 and a 0.5 intensity light overhead, a point on the floor
    facing the light is shaded by exactly 0.75, so its color is
    ``(200, 100, 50) * 0.75 = (150, 75, 37)``.
    """
    floor = Plane(vec3(0.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0), color=Color(200, 100, 50))
    scene = Scene(
        primitives=[floor],
        lights=[Light(vec3(0.0, 10.0, 0.0), 0.5)],
        background=Color(10, 20, 30),
        ambient=0.5,
    )
    preprocess(scene)
    return scene


@pytest.fixture
def occluded_floor_scene(floor_scene):
    """The floor scene with an opaque sphere between the floor and the light."""
    floor_scene.add(Sphere(vec3(0.0, 5.0, 0.0), 1.0, color=Color(255, 0, 0)))
    preprocess(floor_scene)
    return floor_scene
