"""
Utility functions for affine image warping.
Image file I/O and homogeneous-coordinate matrix helpers.
"""

from . import image_io
from . import math_utils

__all__ = ['image_io', 'math_utils']
