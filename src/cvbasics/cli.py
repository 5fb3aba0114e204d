from __future__ import annotations
import argparse
import logging
from typing import Optional, Sequence

from .config import FilterConfig, HistogramConfig, LoadConfig, PipelineConfig
from .helpers import ImageInputError, load_and_prepare
from .logging_utils import add_logging_args, configure_logging
from .pipeline import DemoPipeline
from .viz import BACKENDS, Visualizer

logger = logging.getLogger("cvbasics")

PROMPT = "Enter the path of the image:"


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Classic OpenCV operations on a single image")
    g_io = p.add_argument_group("I/O")
    g_io.add_argument("--image", type=str, default=None,
                      help="Path to the image (prompted on stdin when omitted)")

    g_size = p.add_argument_group("Resize")
    g_size.add_argument("--max_width", type=int, default=1920)
    g_size.add_argument("--max_height", type=int, default=1080)

    g_flt = p.add_argument_group("Filters")
    g_flt.add_argument("--canny_low", type=float, default=100.0)
    g_flt.add_argument("--canny_high", type=float, default=200.0)
    g_flt.add_argument("--gauss_ksize", type=int, default=15)
    g_flt.add_argument("--gauss_sigma", type=float, default=0.0)
    g_flt.add_argument("--box_ksize", type=int, default=5)

    g_hist = p.add_argument_group("Histogram")
    g_hist.add_argument("--hist_width", type=int, default=512)
    g_hist.add_argument("--hist_height", type=int, default=400)

    g_disp = p.add_argument_group("Display")
    g_disp.add_argument("--backend", choices=BACKENDS, default="opencv")
    g_disp.add_argument("--no_wait", action="store_true",
                        help="Close windows right away instead of waiting for a key")

    add_logging_args(p.add_argument_group("Logging"))
    return p


def config_from_args(args: argparse.Namespace) -> PipelineConfig:
    return PipelineConfig(
        load=LoadConfig(max_width=args.max_width, max_height=args.max_height),
        filters=FilterConfig(
            canny_low=args.canny_low,
            canny_high=args.canny_high,
            gaussian_ksize=args.gauss_ksize,
            gaussian_sigma=args.gauss_sigma,
            box_ksize=args.box_ksize,
        ),
        histogram=HistogramConfig(canvas_width=args.hist_width, canvas_height=args.hist_height),
        backend=args.backend,
        wait=not args.no_wait,
    )


def read_image_path() -> str:
    print(PROMPT)
    try:
        return input()
    except EOFError:
        return ""


def run(raw_path: str, cfg: PipelineConfig) -> Optional[Visualizer]:
    """Validate, load and display. Returns None when the input was rejected."""
    try:
        loaded = load_and_prepare(raw_path, cfg.load)
    except ImageInputError as e:
        logger.error(str(e))
        return None

    img = loaded.image
    if loaded.resized:
        logger.info("Resized large image to %dx%d.", img.shape[1], img.shape[0])

    pipeline = DemoPipeline(cfg)
    with Visualizer(cfg.backend) as viz:
        for panel in pipeline.iter_panels(img):
            viz.show(panel.title, panel.image)
        if cfg.wait:
            viz.wait()
    return viz


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet)

    cfg = config_from_args(args)
    raw_path = args.image if args.image is not None else read_image_path()
    run(raw_path, cfg)
    return 0
