#!/usr/bin/env python3
"""Render the demo scene.

This script renders the three-sphere demo scene (or its floor variant) with
the tiled multi-threaded renderer and saves the frame as PPM, or any format
Pillow understands from the file extension.

With ``--frames N`` it renders a short sequence, panning the camera a little
each frame, and lets the adaptive quality controller tune the bounce depth
toward the ``--target-ms`` frame budget.

Usage:
    python examples/render_demo.py [options]

Options:
    --width WIDTH         Image width in pixels (default: 320)
    --height HEIGHT       Image height in pixels (default: 240)
    --workers N           Worker threads / bands (default: 4)
    --bounces N           Reflection depth for a single frame (default: 10)
    --scene NAME          "spheres" or "floor" (default: spheres)
    --projection NAME     "angular" or "perspective" (default: angular)
    --bgr                 Write BGR instead of RGB channel order
    --frames N            Render N frames with adaptive depth (default: 1)
    --target-ms MS        Frame budget for adaptive depth (default: 100)
    --output OUTPUT       Output file path (default: test.ppm)
    --quiet               Suppress progress output
    --verbose             Enable debug logging

Example:
    python examples/render_demo.py --width 160 --height 120 --scene floor
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from whitted.camera.camera import Projection
from whitted.camera.controls import TURN_STEP, turn
from whitted.core.adaptive import AdaptiveQualityController
from whitted.core.renderer import PixelFormat, render
from whitted.core.shading import DEFAULT_BOUNCES
from whitted.preview.export import save_image
from whitted.scene.demo import DemoParams, create_demo_scene, create_floor_scene
from whitted.scene.scene import preprocess

SCENES = {
    "spheres": create_demo_scene,
    "floor": create_floor_scene,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=320, help="Image width in pixels (default: 320)")
    parser.add_argument("--height", type=int, default=240, help="Image height in pixels (default: 240)")
    parser.add_argument("--workers", type=int, default=4, help="Worker threads / bands (default: 4)")
    parser.add_argument(
        "--bounces",
        type=int,
        default=DEFAULT_BOUNCES,
        help=f"Reflection depth for a single frame (default: {DEFAULT_BOUNCES})",
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="spheres", help="Scene to render")
    parser.add_argument(
        "--projection",
        choices=[p.value for p in Projection],
        default=Projection.ANGULAR.value,
        help="Field-of-view scaling rule (default: angular)",
    )
    parser.add_argument("--bgr", action="store_true", help="Write BGR channel order")
    parser.add_argument("--frames", type=int, default=1, help="Frames to render (default: 1)")
    parser.add_argument(
        "--target-ms",
        type=float,
        default=100.0,
        help="Frame budget in milliseconds for adaptive depth (default: 100)",
    )
    parser.add_argument("--output", type=str, default="test.ppm", help="Output file path (default: test.ppm)")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def render_demo(
    width: int = 320,
    height: int = 240,
    workers: int = 4,
    bounces: int = DEFAULT_BOUNCES,
    scene_name: str = "spheres",
    projection: Projection = Projection.ANGULAR,
    pixel_format: PixelFormat = PixelFormat.RGB,
    frames: int = 1,
    target_ms: float = 100.0,
    output_path: str = "test.ppm",
    quiet: bool = False,
) -> Path:
    """Render the demo scene and save the last frame.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        workers: Worker threads / bands.
        bounces: Reflection depth when rendering a single frame.
        scene_name: Key into ``SCENES``.
        projection: Field-of-view scaling rule.
        pixel_format: Channel order of the framebuffer.
        frames: Number of frames; more than one enables adaptive depth.
        target_ms: Frame budget for adaptive depth, in milliseconds.
        output_path: Output file path.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    params = DemoParams(width=width, height=height, projection=projection)
    scene, camera = SCENES[scene_name](params)
    preprocess(scene)

    if not quiet:
        print(f"Rendering {scene_name} scene ({width}x{height}, {workers} workers)...")

    framebuffer = bytearray(width * height * 3)
    start_time = time.perf_counter()

    if frames <= 1:
        render(framebuffer, width, height, scene, camera, workers, bounces, pixel_format=pixel_format)
    else:
        controller = AdaptiveQualityController(target_frame_time=target_ms / 1000.0)
        for frame in range(frames):
            depth = controller.bounces
            elapsed = controller.render(
                framebuffer, width, height, scene, camera, workers, pixel_format=pixel_format
            )
            if not quiet:
                print(f"  Frame {frame + 1}/{frames}: {elapsed * 1000.0:.1f} ms at depth {depth}")
            # Camera edits only between frames
            turn(camera, d_azimuth=TURN_STEP)

    output_file = save_image(framebuffer, width, height, output_path, pixel_format)

    total_time = time.perf_counter() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        render_demo(
            width=args.width,
            height=args.height,
            workers=args.workers,
            bounces=args.bounces,
            scene_name=args.scene,
            projection=Projection(args.projection),
            pixel_format=PixelFormat.BGR if args.bgr else PixelFormat.RGB,
            frames=args.frames,
            target_ms=args.target_ms,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
