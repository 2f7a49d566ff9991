"""
Centered affine image warping with bilinear interpolation.
"""

__version__ = "1.0.0"

from .config import EdgePolicy, ScaleGuard, TransformParams, WarpConfig
from .image import Image, Pixel
from .interpolation import OutOfBounds, Sampled, resample, sample_bilinear
from .transform import forward_map, inverse_map
from .warping import get_warp_bounds, warp, warp_array

__all__ = [
    'EdgePolicy', 'ScaleGuard', 'TransformParams', 'WarpConfig',
    'Image', 'Pixel',
    'OutOfBounds', 'Sampled', 'resample', 'sample_bilinear',
    'forward_map', 'inverse_map',
    'get_warp_bounds', 'warp', 'warp_array',
]
