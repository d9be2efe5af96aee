#!/usr/bin/env python3
"""
AI Digital Picture Frame - local entry point

Runs a single invocation outside the Functions host: generate, archive,
compress, resize and email the configured number of images.
"""

import argparse

from .config import Config
from .logger import PipelineLogger
from .frame_processing import FrameProcessor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Email freshly generated images to the picture frame.")
    parser.add_argument("--log-level", help="Override LOG_LEVEL (DEBUG, INFO, ...)")
    parser.add_argument(
        "--no-resize", action="store_true", help="Email the compressed image without fitting it to the frame"
    )
    parser.add_argument(
        "--generate-params-key",
        help="Read all generation parameters from this JSON setting instead of prompt + count",
    )
    return parser


def main(argv=None):
    """Entry point for the application."""
    args = build_parser().parse_args(argv)

    config = Config()
    if args.log_level:
        config.LOG_LEVEL = args.log_level
    if args.no_resize:
        config.RESIZE_IMAGES = False
    if args.generate_params_key:
        config.GENERATE_PARAMS_KEY = args.generate_params_key

    logger = PipelineLogger(config.LOG_LEVEL)
    FrameProcessor(config, logger).run()


if __name__ == "__main__":
    main()
