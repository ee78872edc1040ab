"""Recursive (Whitted-style) ray tracer with a tiled multi-threaded renderer.

This package renders scenes of spheres, planes and triangles lit by point
lights, with hard shadows and mirror reflections:
- Dual-representation vectors (rectangular and spherical)
- Per-pixel recursive tracing bounded by a bounce limit
- Frame rendering split into bands across worker threads
- Adaptive bounce depth to hold a frame-time budget

Subpackages:
    core: Vectors, colors, shading, the tiled renderer and adaptive quality
    geometry: Shape primitives and intersection algorithms
    scene: Scene description, nearest-hit query and demo scenes
    camera: Camera model, pixel-to-ray mapping and camera controls
    preview: Framebuffer export
"""

__version__ = "0.1.0"
