#!/usr/bin/env python3
"""
picture-processor command line
Applies one transform per invocation:

    picture-processor invert <in> <out>
    picture-processor grayscale <in> <out>
    picture-processor rotate <90|180|270> <in> <out>
    picture-processor flip <H|V> <in> <out>
    picture-processor blend <in1> <in2> ... <inN> <out>
    picture-processor blur <in> <out>
"""

import argparse
import logging
import sys
from typing import List, Optional

from .. import settings
from ..models.exceptions import PictureProcessorError, UnrecognizedSelectorError
from ..models.selectors import FlipAxis, Rotation
from ..pipeline import process_command

logger = logging.getLogger(__name__)


def _rotation(value: str) -> Rotation:
    try:
        return Rotation.parse(value)
    except UnrecognizedSelectorError as err:
        raise argparse.ArgumentTypeError(err.message)


def _flip_axis(value: str) -> FlipAxis:
    try:
        return FlipAxis.parse(value)
    except UnrecognizedSelectorError as err:
        raise argparse.ArgumentTypeError(err.message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="picture-processor",
        description="Apply a pixel-level transform to an image and write the result as PNG.",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        choices=settings.LOG_LEVELS,
                        help="logging verbosity (default: %(default)s)")
    commands = parser.add_subparsers(dest="command", required=True, metavar="command")

    for name, help_text in (("invert", "invert every colour channel"),
                            ("grayscale", "average the channels of every pixel"),
                            ("blur", "3x3 box blur, borders unchanged")):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("input")
        sub.add_argument("output")

    rotate = commands.add_parser("rotate", help="rotate clockwise by 90, 180 or 270 degrees")
    rotate.add_argument("angle", type=_rotation, metavar="{90,180,270}")
    rotate.add_argument("input")
    rotate.add_argument("output")

    flip = commands.add_parser("flip", help="mirror horizontally (H) or vertically (V)")
    flip.add_argument("axis", type=_flip_axis, metavar="{H,V}")
    flip.add_argument("input")
    flip.add_argument("output")

    blend = commands.add_parser("blend", help="average several images; the last path is the output")
    blend.add_argument("paths", nargs="+", metavar="path")

    return parser


def run(args: argparse.Namespace) -> None:
    if args.command == "invert":
        process_command.invert_file(args.input, args.output)
    elif args.command == "grayscale":
        process_command.grayscale_file(args.input, args.output)
    elif args.command == "rotate":
        process_command.rotate_file(args.angle, args.input, args.output)
    elif args.command == "flip":
        process_command.flip_file(args.axis, args.input, args.output)
    elif args.command == "blend":
        process_command.blend_files(args.paths[:-1], args.paths[-1])
    elif args.command == "blur":
        process_command.blur_file(args.input, args.output)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "blend" and len(args.paths) < 2:
        parser.error("blend needs at least one input and an output path")
    # argparse does not check defaults against choices, and LOG_LEVEL comes from the environment
    if args.log_level not in settings.LOG_LEVELS:
        parser.error(f"unknown log level {args.log_level!r}; expected one of {', '.join(settings.LOG_LEVELS)}")

    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )
    logger.info(f"Command: {args.command}")

    try:
        run(args)
    except PictureProcessorError as err:
        logger.error(err.message)
        return 1
    except OSError as err:
        logger.error(f"I/O error: {err}")
        return 1

    logger.info(f"{args.command} complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
