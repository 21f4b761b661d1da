# main.py
import argparse
import sys
import time
from typing import List, Optional

from spheretracer.renderer.image_writer import ImageBuffer, ImageWriteError, PPMFileWriter
from spheretracer.scenes import SCENES, build_scene

# Samples, bounces and width per quality level
QUALITY_LEVELS = {
    "draft": {"samples": 4, "bounces": 8, "width": 200},
    "balanced": {"samples": 32, "bounces": 20, "width": 400},
    "final": {"samples": 500, "bounces": 50, "width": 1200},
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a scene of spheres by path tracing")
    parser.add_argument("--scene", choices=sorted(SCENES), default="final",
                        help="scene to render")
    parser.add_argument("--quality", "-q", choices=list(QUALITY_LEVELS),
                        help="preset for samples, bounces and width")
    parser.add_argument("--width", "-w", type=int, help="image width in pixels")
    parser.add_argument("--samples", "-s", type=int, help="samples per pixel")
    parser.add_argument("--depth", "-d", type=int, help="maximum ray bounces")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for a reproducible image")
    parser.add_argument("--output", "-o", default="image.ppm",
                        help="output file; .ppm is written directly, other "
                             "extensions are saved with Pillow")
    parser.add_argument("--quiet", action="store_true",
                        help="do not print scanline progress")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    world, camera = build_scene(args.scene, seed=args.seed)

    if args.quality is not None:
        quality = QUALITY_LEVELS[args.quality]
        camera.samples_per_pixel = quality["samples"]
        camera.max_depth = quality["bounces"]
        camera.image_width = quality["width"]
    if args.width is not None:
        camera.image_width = args.width
    if args.samples is not None:
        camera.samples_per_pixel = args.samples
    if args.depth is not None:
        camera.max_depth = args.depth

    try:
        camera.validate()
    except ValueError as exc:
        parser.error(str(exc))

    print(f"Scene: {args.scene} ({len(world)} spheres)")
    status = None if args.quiet else sys.stderr

    start_time = time.time()
    try:
        if args.output.lower().endswith(".ppm"):
            camera.render(world, PPMFileWriter(args.output), status=status)
        else:
            buffer = ImageBuffer()
            camera.render(world, buffer, status=status)
            buffer.save(args.output)
    except ImageWriteError as exc:
        print(exc, file=sys.stderr)
        return 1
    elapsed = time.time() - start_time

    print(f"Image: {camera.image_width}x{camera.image_height}, "
          f"{camera.samples_per_pixel} samples, depth {camera.max_depth}")
    print(f"Rendered in {elapsed:.2f}s")
    print(f"Image created at: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
