"""Camera module for view and ray generation.

Components:
    camera: Camera model and pixel-to-ray mapping
    controls: Between-frame camera movement (turn, advance, zoom, mouse look)

Ray generation uses pixel coordinates:
    x in [0, width): left to right across image
    y in [0, height): top to bottom across image
"""

from .camera import Camera, Projection, pixel_scale, pixel_to_ray
from .controls import advance, mouse_look, translate, turn, zoom

__all__ = [
    "Camera",
    "Projection",
    "pixel_scale",
    "pixel_to_ray",
    "turn",
    "advance",
    "translate",
    "zoom",
    "mouse_look",
]
