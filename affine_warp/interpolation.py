"""
Bilinear resampling of a source image at real-valued coordinates.

A sample either produces a color (Sampled) or reports that its four-pixel
footprint leaves the source image (OutOfBounds). Out-of-frame samples are not
errors: the destination pixel simply keeps its background color.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from .config import DEFAULT_CONFIG, EdgePolicy, WarpConfig
from .image import Image, Pixel


@dataclass(frozen=True)
class Sampled:
    color: Pixel


@dataclass(frozen=True)
class OutOfBounds:
    x: float
    y: float


SampleResult = Union[Sampled, OutOfBounds]


def lattice_neighbors(coord: float) -> Tuple[int, int]:
    """
    Integer grid neighbors (lo, hi) used for interpolation along one axis.

    When coord is already an integer floor and ceil coincide; hi is then
    pushed one step up so the two samples are always distinct pixels.
    """
    lo = math.floor(coord)
    hi = math.ceil(coord)
    if coord >= hi:
        hi = math.ceil(coord + 1)
    return lo, hi


def snap(coord: float, tolerance: float) -> float:
    """Snap coord to the nearest integer when it is within tolerance of it."""
    nearest = round(coord)
    if abs(coord - nearest) <= tolerance:
        return float(nearest)
    return coord


def _axis_in_frame(coord, lo, hi, size, edge_policy):
    if lo < 0 or lo >= size:
        return False
    if hi < size:
        return True
    # hi == size here; with the coordinate exactly on lo its weight is zero
    return edge_policy is EdgePolicy.EXACT and coord == lo


def round_channel(value: float) -> int:
    """Round half up and clip to the 8-bit range."""
    return int(min(max(math.floor(value + 0.5), 0), 255))


def sample_bilinear(source: Image, x: float, y: float,
                    config: WarpConfig = DEFAULT_CONFIG) -> SampleResult:
    """
    Interpolate the source image at (x, y).

    Args:
        source: Image to sample
        x: Column coordinate
        y: Row coordinate
        config: WarpConfig, for the edge policy and snap tolerance

    Returns:
        Sampled with the interpolated color, or OutOfBounds when the
        footprint is not fully inside the source image
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return OutOfBounds(x, y)

    x = snap(x, config.snap_tolerance)
    y = snap(y, config.snap_tolerance)

    x1, x2 = lattice_neighbors(x)
    y1, y2 = lattice_neighbors(y)

    if not (_axis_in_frame(x, x1, x2, source.cols, config.edge_policy) and
            _axis_in_frame(y, y1, y2, source.rows, config.edge_policy)):
        return OutOfBounds(x, y)

    # Zero-weight neighbors on the far edge are read from the last index
    x2_read = min(x2, source.cols - 1)
    y2_read = min(y2, source.rows - 1)

    weights = np.array([
        (1 - (x - x1)) * (1 - (y - y1)),
        (1 - (x - x1)) * (1 - (y2 - y)),
        (1 - (x2 - x)) * (1 - (y - y1)),
        (1 - (x2 - x)) * (1 - (y2 - y)),
    ])
    corners = np.array([
        source.get_pixel(y1, x1),
        source.get_pixel(y2_read, x1),
        source.get_pixel(y1, x2_read),
        source.get_pixel(y2_read, x2_read),
    ], dtype=np.float64)

    # Each channel is interpolated independently
    red, green, blue = weights @ corners
    return Sampled(Pixel(round_channel(red), round_channel(green), round_channel(blue)))


def resample(x: float, y: float, out_row: int, out_col: int,
             source: Image, dest: Image,
             config: WarpConfig = DEFAULT_CONFIG) -> SampleResult:
    """
    Sample the source at (x, y) and write the color to dest[out_row, out_col].

    On OutOfBounds the destination pixel is left untouched.

    Returns:
        The SampleResult, so callers can count skipped pixels
    """
    result = sample_bilinear(source, x, y, config)
    if isinstance(result, Sampled):
        dest.set_pixel(out_row, out_col, result.color)
    return result
