"""
Image container used by the warping pipeline.
Wraps an RGB uint8 numpy array with row/column pixel access.
"""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

import numpy as np

from .utils.image_io import ensure_uint8, load_image, save_image


class Pixel(NamedTuple):
    """One RGB pixel with 8-bit channels."""

    red: int
    green: int
    blue: int


BLACK = Pixel(0, 0, 0)


class Image:
    """
    A rows x cols grid of RGB pixels, addressed by (row, col).

    The pixels are stored in a numpy array of shape (rows, cols, 3) with dtype
    uint8. Access outside the grid raises IndexError instead of wrapping
    around the way negative numpy indices would.
    """

    def __init__(self, array: np.ndarray):
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Image array must have shape (rows, cols, 3), got {array.shape}")
        if array.shape[0] == 0 or array.shape[1] == 0:
            raise ValueError(f"Image must have at least one pixel, got shape {array.shape}")
        self._pixels = ensure_uint8(array).copy()

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Image":
        return cls(array)

    @classmethod
    def from_file(cls, path) -> "Image":
        """
        Load an image from disk.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file cannot be decoded
        """
        return cls(load_image(path))

    @classmethod
    def blank(cls, rows: int, cols: int, background: Pixel = BLACK) -> "Image":
        """Create an image of the given size filled with the background color."""
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Image dimensions must be positive, got {rows}x{cols}")
        array = np.empty((rows, cols, 3), dtype=np.uint8)
        array[:, :] = tuple(background)
        return cls(array)

    @property
    def rows(self) -> int:
        return self._pixels.shape[0]

    @property
    def cols(self) -> int:
        return self._pixels.shape[1]

    @property
    def shape(self):
        return self._pixels.shape

    @property
    def array(self) -> np.ndarray:
        """Read-only view of the pixel data."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Pixel ({row}, {col}) outside image of size {self.rows}x{self.cols}"
            )

    def get_pixel(self, row: int, col: int) -> Pixel:
        self._check_bounds(row, col)
        red, green, blue = self._pixels[row, col]
        return Pixel(int(red), int(green), int(blue))

    def set_pixel(self, row: int, col: int, pixel: Pixel) -> None:
        self._check_bounds(row, col)
        self._pixels[row, col] = (pixel.red, pixel.green, pixel.blue)

    def write(self, path) -> Path:
        """Encode the image to disk and return the written path."""
        return save_image(path, self._pixels)

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    def __repr__(self):
        return f"Image(rows={self.rows}, cols={self.cols})"
