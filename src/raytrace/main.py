# main.py
import argparse
import logging
import sys

from raytrace.config import QUALITY_PRESETS, ExecutorKind, RenderConfig
from raytrace.logconfig import setup_logging
from raytrace.renderer.export import save_png
from raytrace.renderer.raytracer import Renderer
from raytrace.scenes import SCENES, build_scene

logger = logging.getLogger("raytrace.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raytrace",
        description="Render a sphere scene with a Monte Carlo path tracer and save it as PNG.",
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="random",
                        help="scene to render (default: random)")
    parser.add_argument("--quality", choices=list(QUALITY_PRESETS), default="balanced",
                        help="samples/depth preset (default: balanced)")
    parser.add_argument("--width", type=int, default=600, help="image width in pixels")
    parser.add_argument("--height", type=int, default=400, help="image height in pixels")
    parser.add_argument("--samples", type=int, help="samples per pixel, overrides the preset")
    parser.add_argument("--depth", type=int, help="maximum bounce depth, overrides the preset")
    parser.add_argument("--seed", type=int, default=42, help="root random seed (default: 42)")
    parser.add_argument("--workers", type=int, help="number of parallel workers")
    parser.add_argument("--processes", action="store_true",
                        help="render rows in a process pool instead of a thread pool")
    parser.add_argument("--no-progress", action="store_true",
                        help="hide the row progress bar")
    parser.add_argument("--output", default="image.png", help="output PNG path")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-file", help="also write the log to this file")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("raytrace", level=getattr(logging, args.log_level), log_file=args.log_file)

    overrides = {"seed": args.seed, "workers": args.workers}
    if args.samples is not None:
        overrides["samples_per_pixel"] = args.samples
    if args.depth is not None:
        overrides["max_depth"] = args.depth
    if args.processes:
        overrides["executor"] = ExecutorKind.PROCESS

    try:
        config = RenderConfig.from_preset(args.quality, args.width, args.height, **overrides)
        world, camera = build_scene(args.scene, config.aspect_ratio, seed=args.seed)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    logger.info("Scene %r: %d objects, %s", args.scene, len(world), camera)
    pixels = Renderer(config, progress=not args.no_progress).render(world, camera)
    save_png(pixels, args.output, config.row_order)
    return 0


if __name__ == "__main__":
    sys.exit(main())
