"""
Affine warp command line entry point.

Reads a source image, applies the composite transform given by six numbers
and writes the result:

    affine-warp x_scale y_scale x_translation y_translation theta k_value

1. Parses the six transform parameters (all required, in fixed order).
2. Loads the source image (test.gif by default).
3. Traces every output pixel back into the source and interpolates it.
4. Writes the output image (output.gif by default).
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional

from .config import EdgePolicy, ScaleGuard, TransformParams, WarpConfig
from .image import BLACK, Image, Pixel
from .warping import get_warp_bounds, warp

DEFAULT_INPUT = "test.gif"
DEFAULT_OUTPUT = "output.gif"

PARAM_NAMES = ("x_scale", "y_scale", "x_translation", "y_translation", "theta", "k_value")


def finite_float(value: str) -> float:
    """Convert a command line argument to a finite float."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {value!r}")
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"expected a finite number, got {value!r}")
    return number


def rgb_color(value: str) -> Pixel:
    """Parse an 'R,G,B' color with channels in [0, 255]."""
    parts = value.split(",")
    try:
        channels = [int(part) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected R,G,B integers, got {value!r}")
    if len(channels) != 3 or any(not 0 <= c <= 255 for c in channels):
        raise argparse.ArgumentTypeError(
            f"expected three channels in [0, 255], got {value!r}"
        )
    return Pixel(*channels)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="affine-warp",
        description="Scale, shear, rotate and translate an image about its center.",
    )
    helps = {
        "x_scale": "Horizontal scale factor.",
        "y_scale": "Vertical scale factor.",
        "x_translation": "Horizontal translation in pixels.",
        "y_translation": "Vertical translation in pixels.",
        "theta": "Rotation angle in degrees.",
        "k_value": "Shear factor along x, proportional to y.",
    }
    for name in PARAM_NAMES:
        parser.add_argument(name, type=finite_float, help=helps[name])
    parser.add_argument(
        "--input",
        default=DEFAULT_INPUT,
        help=f"Source image path (default: {DEFAULT_INPUT}).",
    )
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Path to the transformed image (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--background",
        type=rgb_color,
        default=BLACK,
        help="Color of pixels mapped from outside the source, as R,G,B (default: 0,0,0).",
    )
    parser.add_argument(
        "--scale-guard",
        choices=[mode.value for mode in ScaleGuard],
        default=ScaleGuard.EITHER_POSITIVE.value,
        help="Apply scaling when either factor is positive, or only when both are "
             "(default: either).",
    )
    parser.add_argument(
        "--edge-policy",
        choices=[policy.value for policy in EdgePolicy],
        default=EdgePolicy.EXACT.value,
        help="Whether samples exactly on the last row/column are kept (exact) or "
             "skipped (strict) (default: exact).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def params_from_args(args: argparse.Namespace) -> TransformParams:
    return TransformParams(
        x_scale=args.x_scale,
        y_scale=args.y_scale,
        x_trans=args.x_translation,
        y_trans=args.y_translation,
        theta=args.theta,
        k_val=args.k_value,
    )


def config_from_args(args: argparse.Namespace) -> WarpConfig:
    return WarpConfig(
        background=args.background,
        scale_guard=ScaleGuard(args.scale_guard),
        edge_policy=EdgePolicy(args.edge_policy),
    )


def transform_file(args: argparse.Namespace) -> Path:
    params = params_from_args(args)
    config = config_from_args(args)

    print(f"Loading {args.input}...")
    source = Image.from_file(args.input)
    print(f"   Loaded with size {source.rows}x{source.cols}")

    min_x, min_y, max_x, max_y = get_warp_bounds(
        source.rows, source.cols, params, config.scale_guard
    )
    print(f"\nWarping (content spans x {min_x}..{max_x}, y {min_y}..{max_y})...")
    warped = warp(source, params, config)

    output_path = warped.write(args.output)
    print(f"\nTransformed image written to {output_path}")
    return output_path


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        transform_file(args)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
