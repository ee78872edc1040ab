"""Preview module for rendered output.

Components:
    export: PPM/PNG image export utilities

Example:
    >>> from whitted.preview import save_ppm
    >>> save_ppm(framebuffer, 320, 240, "test.ppm")
"""

from whitted.preview.export import framebuffer_to_array, save_image, save_ppm

__all__ = [
    "framebuffer_to_array",
    "save_image",
    "save_ppm",
]
