"""Adaptive bounce-depth controller.

Holds a frame-time budget by adjusting the reflection depth between frames:
a frame that finishes under budget doubles the depth (up to a maximum), a
frame over budget halves it (down to a minimum). It is a plain
multiplicative feedback loop with a single threshold compare; there is no
smoothing and no hysteresis band.

Example:
    >>> from whitted.core.adaptive import AdaptiveQualityController
    >>> controller = AdaptiveQualityController(target_frame_time=1 / 30)
    >>> controller.update(0.01)   # fast frame: deeper reflections next time
    2
    >>> controller.update(0.5)    # slow frame: back off
    1
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from whitted.camera.camera import Camera
from whitted.core.renderer import BandAxis, PixelFormat, render
from whitted.core.shading import MAX_BOUNCES
from whitted.scene.scene import Scene

logger = logging.getLogger(__name__)


class AdaptiveQualityController:
    """Bounce-depth feedback loop across frames.

    Attributes:
        target_frame_time: Frame budget in seconds.
        min_bounces: Lowest depth the controller will drop to (at least 1).
        max_bounces: Highest depth the controller will climb to.
        bounces: Depth to use for the next frame.
    """

    def __init__(
        self,
        target_frame_time: float,
        min_bounces: int = 1,
        max_bounces: int = MAX_BOUNCES,
        initial_bounces: int | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        """Initialize the controller.

        Args:
            target_frame_time: Frame budget in seconds (positive).
            min_bounces: Minimum depth, at least 1 so doubling can recover.
            max_bounces: Maximum depth, at least ``min_bounces`` and at
                most ``MAX_BOUNCES``.
            initial_bounces: Starting depth; defaults to ``min_bounces``.
            clock: Monotonic time source in seconds, used by :meth:`render`.

        Raises:
            ValueError: If the arguments are inconsistent.
        """
        if not target_frame_time > 0.0:
            raise ValueError(f"target_frame_time must be positive, got {target_frame_time}")
        if min_bounces < 1:
            raise ValueError(f"min_bounces must be at least 1, got {min_bounces}")
        if not min_bounces <= max_bounces <= MAX_BOUNCES:
            raise ValueError(
                f"max_bounces must be in [{min_bounces}, {MAX_BOUNCES}], got {max_bounces}"
            )
        if initial_bounces is None:
            initial_bounces = min_bounces
        if not min_bounces <= initial_bounces <= max_bounces:
            raise ValueError(
                f"initial_bounces must be in [{min_bounces}, {max_bounces}], got {initial_bounces}"
            )

        self.target_frame_time = target_frame_time
        self.min_bounces = min_bounces
        self.max_bounces = max_bounces
        self.bounces = initial_bounces
        self._clock = clock
        self.last_frame_time: float | None = None

    def update(self, elapsed: float) -> int:
        """Feed back one frame's render time and return the next depth.

        Args:
            elapsed: Wall-clock seconds the last frame took.

        Returns:
            The bounce depth for the next frame.
        """
        self.last_frame_time = elapsed
        previous = self.bounces
        if elapsed < self.target_frame_time and self.bounces < self.max_bounces:
            self.bounces = min(self.bounces * 2, self.max_bounces)
        elif elapsed > self.target_frame_time and self.bounces > self.min_bounces:
            self.bounces = max(self.bounces // 2, self.min_bounces)

        if self.bounces != previous:
            logger.info(
                "Frame took %.1f ms (budget %.1f ms): bounce depth %d -> %d",
                elapsed * 1000.0,
                self.target_frame_time * 1000.0,
                previous,
                self.bounces,
            )
        return self.bounces

    def render(
        self,
        framebuffer: Any,
        width: int,
        height: int,
        scene: Scene,
        camera: Camera,
        worker_count: int,
        *,
        axis: BandAxis = BandAxis.ROWS,
        pixel_format: PixelFormat = PixelFormat.RGB,
    ) -> float:
        """Render a frame at the current depth, then adapt the depth.

        Returns:
            Seconds the frame took according to the controller's clock.
        """
        start = self._clock()
        render(
            framebuffer,
            width,
            height,
            scene,
            camera,
            worker_count,
            self.bounces,
            axis=axis,
            pixel_format=pixel_format,
        )
        elapsed = self._clock() - start
        self.update(elapsed)
        return elapsed

    def __repr__(self) -> str:
        return (
            f"AdaptiveQualityController(bounces={self.bounces}, "
            f"range=[{self.min_bounces}, {self.max_bounces}], "
            f"target={self.target_frame_time:.4f}s)"
        )
