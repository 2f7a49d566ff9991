"""
Image warping module.
Implements backward transform warping of an image under a centered affine
transform with bilinear interpolation.
"""

import logging

import numpy as np

from .config import DEFAULT_CONFIG
from .image import Image
from .interpolation import Sampled, resample
from .transform import inverse_map, scale_enabled
from .utils.math_utils import apply_matrix, forward_matrix

logger = logging.getLogger(__name__)


def warp(image, params, config=None):
    """
    Warp an image with the composite scale/shear/rotation/translation transform.

    Args:
        image: Source Image
        params: TransformParams
        config: WarpConfig (defaults to DEFAULT_CONFIG)

    Returns:
        New Image with the same size as the source

    Notes:
        - Uses backward transform (inverse mapping): every output pixel is
          traced back to the source, so the result has no holes
        - Output pixels whose sampling footprint leaves the source keep
          config.background
    """
    config = config or DEFAULT_CONFIG
    rows, cols = image.rows, image.cols

    if logger.isEnabledFor(logging.DEBUG):
        M = forward_matrix(params, cols, rows, scale_enabled(params, config.scale_guard))
        logger.debug("Forward transform matrix:\n%s", np.array2string(M, precision=4))

    warped = Image.blank(rows, cols, config.background)

    sampled = 0
    for row in range(rows):
        for col in range(cols):
            x, y = inverse_map(col, row, cols, rows, params, config.scale_guard)
            result = resample(x, y, row, col, image, warped, config)
            if isinstance(result, Sampled):
                sampled += 1

    total = rows * cols
    logger.info("Warped %dx%d image: %d pixels sampled, %d out of frame",
                rows, cols, sampled, total - sampled)
    return warped


def warp_array(image, params, config=None):
    """
    Warp a raw RGB array.

    Args:
        image: numpy array (height, width, 3)
        params: TransformParams
        config: WarpConfig

    Returns:
        Warped image as uint8 numpy array of the same shape
    """
    return np.array(warp(Image.from_array(image), params, config).array)


def get_warp_bounds(rows, cols, params, scale_guard=DEFAULT_CONFIG.scale_guard):
    """
    Get the bounding box of the transformed image corners.

    Args:
        rows: Image height
        cols: Image width
        params: TransformParams
        scale_guard: ScaleGuard used for the transform

    Returns:
        Tuple (min_x, min_y, max_x, max_y); parts of the box outside
        [0, cols) x [0, rows) are cropped from the output
    """
    corners = [
        (0, 0),                 # top-left
        (cols - 1, 0),          # top-right
        (cols - 1, rows - 1),   # bottom-right
        (0, rows - 1)           # bottom-left
    ]
    M = forward_matrix(params, cols, rows, scale_enabled(params, scale_guard))
    # drop floating-point noise from sin/cos before floor and ceil
    corners_transformed = np.round(apply_matrix(M, corners), 9)

    min_x = int(np.floor(corners_transformed[:, 0].min()))
    max_x = int(np.ceil(corners_transformed[:, 0].max()))
    min_y = int(np.floor(corners_transformed[:, 1].min()))
    max_y = int(np.ceil(corners_transformed[:, 1].max()))

    return min_x, min_y, max_x, max_y
