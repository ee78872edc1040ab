"""Tiled parallel frame renderer.

The frame is split into ``n`` contiguous bands of rows (or columns) and each
band is rendered by its own worker thread. Workers share the read-only scene
and camera and write into disjoint regions of the caller's framebuffer, so no
locking is needed: the only synchronization points are the fan-out when the
pool starts and the join when it shuts down. A fresh pool is created per
frame and fully joined before :func:`render` returns.

The framebuffer is caller-owned memory of at least ``width * height * 3``
bytes (a ``bytearray``, a writable ``memoryview`` or a C-contiguous uint8
NumPy array). Pixels are written row-major, one byte per channel.

Example:
    >>> from whitted.core.renderer import render
    >>> from whitted.scene import create_demo_scene, preprocess
    >>> scene, camera = create_demo_scene()
    >>> preprocess(scene)
    >>> fb = bytearray(32 * 24 * 3)
    >>> render(fb, 32, 24, scene, camera, worker_count=4, bounce_limit=10)
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np
import numpy.typing as npt

from whitted.camera.camera import Camera, pixel_to_ray
from whitted.core.shading import DEFAULT_BOUNCES, MAX_BOUNCES, trace
from whitted.scene.scene import Scene

logger = logging.getLogger(__name__)

CHANNELS = 3


class BandAxis(Enum):
    """Direction the frame is cut into bands."""

    ROWS = "rows"
    COLUMNS = "columns"


class PixelFormat(Enum):
    """Byte order of the three channels of a pixel."""

    RGB = "rgb"
    BGR = "bgr"


@dataclass
class RenderConfig:
    """Per-call render parameters.

    Attributes:
        worker_count: Number of bands / worker threads (at least 1).
        bounce_limit: Reflection depth passed to every primary ray.
        axis: Cut the frame into row bands or column bands.
        pixel_format: Channel order written to the framebuffer.
    """

    worker_count: int = 1
    bounce_limit: int = DEFAULT_BOUNCES
    axis: BandAxis = BandAxis.ROWS
    pixel_format: PixelFormat = PixelFormat.RGB

    def __post_init__(self) -> None:
        if self.worker_count < 1:
            raise ValueError(f"worker_count must be at least 1, got {self.worker_count}")
        if not 0 <= self.bounce_limit <= MAX_BOUNCES:
            raise ValueError(f"bounce_limit must be in [0, {MAX_BOUNCES}], got {self.bounce_limit}")


def partition_bands(length: int, count: int) -> list[tuple[int, int]]:
    """Split ``range(length)`` into contiguous half-open bands.

    Args:
        length: Number of rows or columns to split.
        count: Requested number of bands.

    Returns:
        ``min(count, length)`` ``(start, stop)`` pairs covering
        ``[0, length)`` in order, with sizes differing by at most one
        (larger bands first).

    Raises:
        ValueError: If ``length`` is negative or ``count`` is less than 1.
    """
    if count < 1:
        raise ValueError(f"Band count must be at least 1, got {count}")
    if length < 0:
        raise ValueError(f"Cannot partition a negative length: {length}")
    count = min(count, length)
    if count == 0:
        return []
    base, extra = divmod(length, count)
    bands = []
    start = 0
    for i in range(count):
        stop = start + base + (1 if i < extra else 0)
        bands.append((start, stop))
        start = stop
    return bands


def _framebuffer_view(framebuffer: Any, width: int, height: int) -> npt.NDArray[np.uint8]:
    """View the first ``width * height * 3`` bytes of ``framebuffer`` as (H, W, 3)."""
    flat = np.frombuffer(framebuffer, dtype=np.uint8)
    needed = width * height * CHANNELS
    if flat.size < needed:
        raise ValueError(
            f"Framebuffer holds {flat.size} bytes, need {needed} for {width}x{height} RGB"
        )
    if not flat.flags.writeable:
        raise ValueError("Framebuffer must be writable")
    return flat[:needed].reshape(height, width, CHANNELS)


def _render_band(
    pixels: npt.NDArray[np.uint8],
    band: tuple[int, int],
    axis: BandAxis,
    width: int,
    height: int,
    scene: Scene,
    camera: Camera,
    bounce_limit: int,
    pixel_format: PixelFormat,
) -> None:
    """Render one band into its own slice of ``pixels``."""
    start, stop = band
    if axis == BandAxis.ROWS:
        xs, ys = range(width), range(start, stop)
    else:
        xs, ys = range(start, stop), range(height)

    origin = camera.origin
    for y in ys:
        for x in xs:
            direction = pixel_to_ray(camera, x, y, width, height)
            color = trace(scene, origin, direction, bounce_limit)
            if pixel_format == PixelFormat.BGR:
                pixels[y, x] = (color.b, color.g, color.r)
            else:
                pixels[y, x] = color


def render(
    framebuffer: Any,
    width: int,
    height: int,
    scene: Scene,
    camera: Camera,
    worker_count: int,
    bounce_limit: int,
    *,
    axis: BandAxis = BandAxis.ROWS,
    pixel_format: PixelFormat = PixelFormat.RGB,
) -> None:
    """Render a full frame into ``framebuffer``.

    Blocks until every band is finished. The scene and camera must not be
    modified until this returns.

    Args:
        framebuffer: Writable buffer of at least ``width * height * 3`` bytes.
        width: Image width in pixels.
        height: Image height in pixels.
        scene: A preprocessed scene.
        camera: The camera.
        worker_count: Number of worker threads / bands. The result does not
            depend on it.
        bounce_limit: Reflection depth for every primary ray.
        axis: Cut the frame into row bands (default) or column bands.
        pixel_format: Channel order, RGB (default) or BGR.

    Raises:
        ValueError: On non-positive dimensions, a too-small or read-only
            framebuffer, ``worker_count < 1`` or a bounce limit outside
            ``[0, MAX_BOUNCES]``.
        Exception: Any error raised while rendering a band is re-raised here
            once all workers have stopped.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    config = RenderConfig(
        worker_count=worker_count,
        bounce_limit=bounce_limit,
        axis=axis,
        pixel_format=pixel_format,
    )
    pixels = _framebuffer_view(framebuffer, width, height)

    length = height if config.axis == BandAxis.ROWS else width
    bands = partition_bands(length, config.worker_count)
    logger.debug(
        "Rendering %dx%d frame in %d %s bands (bounce_limit=%d)",
        width,
        height,
        len(bands),
        config.axis.value,
        config.bounce_limit,
    )

    with ThreadPoolExecutor(max_workers=len(bands), thread_name_prefix="band") as executor:
        futures = [
            executor.submit(
                _render_band,
                pixels,
                band,
                config.axis,
                width,
                height,
                scene,
                camera,
                config.bounce_limit,
                config.pixel_format,
            )
            for band in bands
        ]
    # Leaving the with-block joined every worker; surface the first failure
    for future in futures:
        future.result()


def render_frame(
    framebuffer: Any,
    width: int,
    height: int,
    scene: Scene,
    camera: Camera,
    config: RenderConfig | None = None,
) -> None:
    """Render a frame using a :class:`RenderConfig` bundle."""
    if config is None:
        config = RenderConfig()
    render(
        framebuffer,
        width,
        height,
        scene,
        camera,
        config.worker_count,
        config.bounce_limit,
        axis=config.axis,
        pixel_format=config.pixel_format,
    )


def render_image(
    width: int,
    height: int,
    scene: Scene,
    camera: Camera,
    config: RenderConfig | None = None,
) -> npt.NDArray[np.uint8]:
    """Render into a newly allocated (H, W, 3) uint8 array and return it."""
    image = np.zeros((height, width, CHANNELS), dtype=np.uint8)
    render_frame(image, width, height, scene, camera, config)
    return image
