import math

import numpy as np
import pytest

from affine_warp.config import ScaleGuard, TransformParams
from affine_warp.transform import forward_map, inverse_map, scale_enabled
from affine_warp.utils.math_utils import apply_matrix, forward_matrix


def test_identity_maps_every_pixel_to_itself():
    params = TransformParams.identity()
    for out_y in range(4):
        for out_x in range(6):
            assert inverse_map(out_x, out_y, 6, 4, params) == (out_x, out_y)


@pytest.mark.parametrize("theta", [0, 17, 45, 90, 180, 271.5, -33])
def test_center_is_fixed_under_rotation(theta):
    params = TransformParams(theta=theta)
    assert inverse_map(5, 4, 10, 8, params) == pytest.approx((5, 4))


def test_center_is_fixed_under_scale_shear_and_rotation():
    params = TransformParams(x_scale=1.7, y_scale=0.6, theta=38, k_val=0.4)
    assert inverse_map(3, 2, 7, 5, params) == pytest.approx((3, 2))


def test_center_uses_integer_halves():
    # 7 // 2 == 3 and 5 // 2 == 2
    params = TransformParams(theta=90)
    assert inverse_map(3, 2, 7, 5, params) == pytest.approx((3, 2))


def test_translation_is_undone():
    params = TransformParams(x_trans=2, y_trans=-1)
    assert inverse_map(5, 4, 10, 8, params) == (3, 5)


def test_scale_is_undone_about_center():
    params = TransformParams(x_scale=2, y_scale=4)
    assert inverse_map(9, 7, 10, 8, params) == pytest.approx((7, 4.75))


def test_translation_is_undone_before_scale():
    params = TransformParams(x_scale=2, y_scale=2, x_trans=4, y_trans=2)
    # (9 - 5 - 4) / 2 + 5 and (8 - 4 - 2) / 2 + 4
    assert inverse_map(9, 8, 10, 8, params) == pytest.approx((5, 5))


def test_shear_moves_x_by_y():
    params = TransformParams(k_val=0.5)
    assert inverse_map(5, 6, 10, 8, params) == pytest.approx((4, 6))


def test_rotation_uses_pre_rotation_coordinates():
    params = TransformParams(theta=90)
    # relative (1, 2) rotates to (2, -1)
    x, y = inverse_map(6, 6, 10, 8, params)
    assert (x, y) == pytest.approx((5 + 2, 4 - 1))


def test_either_positive_guard_divides_by_zero_axis():
    params = TransformParams(x_scale=2, y_scale=0)
    assert scale_enabled(params, ScaleGuard.EITHER_POSITIVE)
    x, y = inverse_map(5, 6, 10, 8, params, ScaleGuard.EITHER_POSITIVE)
    assert not math.isfinite(y)


def test_either_positive_guard_mirrors_negative_axis():
    params = TransformParams(x_scale=-1, y_scale=1)
    assert inverse_map(7, 4, 10, 8, params, ScaleGuard.EITHER_POSITIVE) == pytest.approx((3, 4))


def test_both_positive_guard_skips_scale_for_both_axes():
    params = TransformParams(x_scale=-1, y_scale=3)
    assert not scale_enabled(params, ScaleGuard.BOTH_POSITIVE)
    assert inverse_map(7, 6, 10, 8, params, ScaleGuard.BOTH_POSITIVE) == (7, 6)


def test_non_positive_scales_disable_scaling_under_either_guard():
    params = TransformParams(x_scale=0, y_scale=-2)
    assert not scale_enabled(params, ScaleGuard.EITHER_POSITIVE)
    assert inverse_map(7, 6, 10, 8, params) == (7, 6)


@pytest.mark.parametrize("params", [
    TransformParams(x_scale=1.5, y_scale=0.75, x_trans=3, y_trans=-2, theta=30, k_val=0.2),
    TransformParams(x_scale=0.5, y_scale=2, x_trans=-7.5, y_trans=1, theta=-120, k_val=-1.1),
])
def test_inverse_map_agrees_with_matrix_form(params):
    cols, rows = 11, 8
    points = np.array([[0, 0], [10, 0], [4, 5], [10, 7]], dtype=float)
    expected = apply_matrix(np.linalg.inv(forward_matrix(params, cols, rows)), points)
    actual = [inverse_map(x, y, cols, rows, params) for x, y in points]
    np.testing.assert_allclose(actual, expected, atol=1e-9)


def test_forward_map_undoes_inverse_map():
    params = TransformParams(x_scale=1.25, y_scale=0.8, x_trans=2, y_trans=3, theta=65, k_val=0.3)
    src = inverse_map(8, 1, 12, 9, params)
    assert forward_map(src[0], src[1], 12, 9, params) == pytest.approx((8, 1))
