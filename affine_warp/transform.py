"""
Inverse mapping of output pixel coordinates to source coordinates.

The forward transform is q = c + t + S @ K @ R @ (p - c), so for every output
pixel q the source coordinate is recovered as
p = R^(-1) @ K^(-1) @ S^(-1) @ (q - t - c) + c,
undoing translation, scale, shear and rotation in that order.
"""

import math

import numpy as np

from .config import ScaleGuard


def scale_enabled(params, scale_guard=ScaleGuard.EITHER_POSITIVE):
    """Return True when the scale step takes part in the transform."""
    if scale_guard is ScaleGuard.BOTH_POSITIVE:
        return params.x_scale > 0 and params.y_scale > 0
    return params.x_scale > 0 or params.y_scale > 0


def inverse_map(out_x, out_y, out_cols, out_rows, params,
                scale_guard=ScaleGuard.EITHER_POSITIVE):
    """
    Map an output pixel coordinate back into the source image.

    Args:
        out_x: Output column
        out_y: Output row
        out_cols: Output width, used for the center
        out_rows: Output height, used for the center
        params: TransformParams
        scale_guard: Condition for applying the inverse scale

    Returns:
        Tuple (src_x, src_y) of floats. The point may lie outside the source
        image, or be non-finite when a zero scale is divided by.
    """
    cx = out_cols // 2
    cy = out_rows // 2

    # go to center
    x = float(out_x) - cx
    y = float(out_y) - cy

    # inverse translation
    x -= params.x_trans
    y -= params.y_trans

    # inverse scale
    if scale_enabled(params, scale_guard):
        with np.errstate(divide="ignore", invalid="ignore"):
            x = float(np.float64(x) / np.float64(params.x_scale))
            y = float(np.float64(y) / np.float64(params.y_scale))

    # inverse shear
    x -= params.k_val * y

    # inverse rotation
    theta = math.radians(params.theta)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    x, y = x * cos_t + y * sin_t, -x * sin_t + y * cos_t

    # return to origin
    return x + cx, y + cy


def forward_map(src_x, src_y, cols, rows, params,
                scale_guard=ScaleGuard.EITHER_POSITIVE):
    """
    Map a source coordinate to where it lands in the output image.

    This is the exact inverse of inverse_map for nonzero scale factors.
    """
    cx = cols // 2
    cy = rows // 2

    x = float(src_x) - cx
    y = float(src_y) - cy

    theta = math.radians(params.theta)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    x, y = x * cos_t - y * sin_t, x * sin_t + y * cos_t

    x += params.k_val * y

    if scale_enabled(params, scale_guard):
        x *= params.x_scale
        y *= params.y_scale

    return x + params.x_trans + cx, y + params.y_trans + cy
