"""Image export utilities for rendered framebuffers.

Supported formats:
    - PPM (binary P6), the renderer's native dump format
    - Anything else Pillow can write (PNG, BMP, ...), chosen by extension

Example:
    >>> from whitted.core.renderer import render
    >>> from whitted.preview.export import save_ppm
    >>> fb = bytearray(64 * 48 * 3)
    >>> render(fb, 64, 48, scene, camera, worker_count=4, bounce_limit=10)
    >>> save_ppm(fb, 64, 48, "frame.ppm")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from whitted.core.renderer import CHANNELS, PixelFormat


def framebuffer_to_array(
    framebuffer: Any,
    width: int,
    height: int,
    pixel_format: PixelFormat = PixelFormat.RGB,
) -> npt.NDArray[np.uint8]:
    """Copy a framebuffer into an RGB NumPy array.

    Args:
        framebuffer: Buffer of at least ``width * height * 3`` bytes.
        width: Image width in pixels.
        height: Image height in pixels.
        pixel_format: Channel order of the buffer; BGR is swapped to RGB.

    Returns:
        Array of shape (height, width, 3) with dtype uint8.

    Raises:
        ValueError: If the buffer is too small.
    """
    flat = np.frombuffer(framebuffer, dtype=np.uint8)
    needed = width * height * CHANNELS
    if flat.size < needed:
        raise ValueError(
            f"Framebuffer holds {flat.size} bytes, need {needed} for {width}x{height} RGB"
        )
    image = flat[:needed].reshape(height, width, CHANNELS).copy()
    if pixel_format == PixelFormat.BGR:
        image = image[:, :, ::-1].copy()
    return image


def save_image(
    framebuffer: Any,
    width: int,
    height: int,
    filepath: str | Path,
    pixel_format: PixelFormat = PixelFormat.RGB,
) -> Path:
    """Save a framebuffer with Pillow; the format follows the file extension.

    Returns:
        The path written.
    """
    image = framebuffer_to_array(framebuffer, width, height, pixel_format)
    path = Path(filepath)
    PILImage.fromarray(image).save(path)
    return path


def save_ppm(
    framebuffer: Any,
    width: int,
    height: int,
    filepath: str | Path,
    pixel_format: PixelFormat = PixelFormat.RGB,
) -> Path:
    """Save a framebuffer as a binary PPM (P6, maxval 255)."""
    image = framebuffer_to_array(framebuffer, width, height, pixel_format)
    path = Path(filepath)
    PILImage.fromarray(image).save(path, format="PPM")
    return path
