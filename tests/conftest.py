import numpy as np
import pytest

from affine_warp.image import Image


class RecordingImage(Image):
    """Image that remembers every (row, col) read through get_pixel."""

    def __init__(self, array):
        super().__init__(array)
        self.reads = []

    def get_pixel(self, row, col):
        self.reads.append((row, col))
        return super().get_pixel(row, col)


def gradient_array(rows, cols):
    """Array whose pixels are all distinct: red = 10 * row, green = 10 * col, blue = row * cols + col."""
    array = np.zeros((rows, cols, 3), dtype=np.uint8)
    for row in range(rows):
        for col in range(cols):
            array[row, col] = (10 * row, 10 * col, row * cols + col)
    return array


@pytest.fixture
def gradient_image():
    return Image.from_array(gradient_array(5, 7))


@pytest.fixture
def solid_red():
    array = np.zeros((2, 2, 3), dtype=np.uint8)
    array[:, :] = (255, 0, 0)
    return Image.from_array(array)


@pytest.fixture
def corner_image():
    # 2x2 image with known corner colors
    array = np.array([
        [[10, 20, 30], [50, 60, 70]],
        [[90, 100, 110], [130, 140, 150]],
    ], dtype=np.uint8)
    return RecordingImage(array)
