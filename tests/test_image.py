import numpy as np
import pytest

from affine_warp.image import Image, Pixel
from affine_warp.utils.image_io import ensure_uint8, load_image, save_image

from .conftest import gradient_array


def test_blank_is_filled_with_background():
    image = Image.blank(3, 4, Pixel(1, 2, 3))
    assert (image.rows, image.cols) == (3, 4)
    assert (image.array == (1, 2, 3)).all()


def test_blank_defaults_to_black():
    assert not Image.blank(2, 2).array.any()


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2)])
def test_blank_rejects_empty_dimensions(rows, cols):
    with pytest.raises(ValueError):
        Image.blank(rows, cols)


def test_from_array_rejects_non_rgb_shapes():
    with pytest.raises(ValueError):
        Image.from_array(np.zeros((3, 3), dtype=np.uint8))
    with pytest.raises(ValueError):
        Image.from_array(np.zeros((3, 3, 4), dtype=np.uint8))


def test_get_and_set_pixel():
    image = Image.blank(3, 4)
    image.set_pixel(2, 1, Pixel(10, 20, 30))
    assert image.get_pixel(2, 1) == Pixel(10, 20, 30)
    assert image.array[2, 1].tolist() == [10, 20, 30]
    assert image.get_pixel(1, 2) == Pixel(0, 0, 0)


@pytest.mark.parametrize("row, col", [(3, 0), (0, 4), (-1, 0), (0, -1)])
def test_pixel_access_outside_image_raises(row, col):
    image = Image.blank(3, 4)
    with pytest.raises(IndexError):
        image.get_pixel(row, col)
    with pytest.raises(IndexError):
        image.set_pixel(row, col, Pixel(1, 1, 1))


def test_array_view_is_read_only():
    image = Image.blank(2, 2)
    with pytest.raises(ValueError):
        image.array[0, 0] = (1, 2, 3)


def test_from_array_copies_input():
    array = gradient_array(2, 3)
    image = Image.from_array(array)
    array[0, 0] = (255, 255, 255)
    assert image.get_pixel(0, 0) == Pixel(0, 0, 0)


def test_ensure_uint8_clips():
    result = ensure_uint8(np.array([-5.0, 12.7, 300.0]))
    assert result.dtype == np.uint8
    assert result.tolist() == [0, 12, 255]


def test_png_round_trip(tmp_path):
    image = Image.from_array(gradient_array(4, 6))
    path = image.write(tmp_path / "nested" / "out.png")

    assert path.exists()
    assert Image.from_file(path) == image


def test_gif_round_trip_of_solid_color(tmp_path, solid_red):
    path = solid_red.write(tmp_path / "red.gif")
    loaded = Image.from_file(path)

    assert loaded.shape == (2, 2, 3)
    assert loaded == solid_red


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "missing.gif")


def test_load_undecodable_file_raises(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"not an image")
    with pytest.raises(ValueError):
        Image.from_file(path)


def test_save_image_rejects_unknown_extension(tmp_path):
    with pytest.raises(ValueError):
        save_image(tmp_path / "out.unknownext", gradient_array(2, 2))
