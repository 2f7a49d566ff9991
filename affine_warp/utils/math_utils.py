"""
Mathematical utilities for 2D affine transforms in homogeneous coordinates.
"""

import numpy as np


def to_homogeneous(points):
    """
    Convert points to homogeneous coordinates.

    Args:
        points: Array of shape (n, 2) containing [x, y] coordinates

    Returns:
        Array of shape (n, 3) containing [x, y, 1] coordinates
    """
    points = np.asarray(points, dtype=np.float64)
    n = len(points)
    ones = np.ones((n, 1))
    return np.hstack([points, ones])


def from_homogeneous(points_homog):
    """
    Convert points from homogeneous coordinates to Cartesian.

    Args:
        points_homog: Array of shape (n, 3) containing [x, y, w] coordinates

    Returns:
        Array of shape (n, 2) containing [x/w, y/w] coordinates
    """
    # Avoid division by zero
    w = np.array(points_homog[:, 2:3], dtype=np.float64)
    w[w == 0] = 1.0
    return points_homog[:, :2] / w


def translation_matrix(tx, ty):
    return np.array([
        [1.0, 0.0, tx],
        [0.0, 1.0, ty],
        [0.0, 0.0, 1.0]
    ])


def scale_matrix(sx, sy):
    return np.array([
        [sx, 0.0, 0.0],
        [0.0, sy, 0.0],
        [0.0, 0.0, 1.0]
    ])


def shear_matrix(k):
    """Shear along x proportional to y: x' = x + k * y."""
    return np.array([
        [1.0, k, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0]
    ])


def rotation_matrix(theta_degrees):
    """Rotation by theta degrees in image coordinates."""
    theta = np.deg2rad(theta_degrees)
    c, s = np.cos(theta), np.sin(theta)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0]
    ])


def forward_matrix(params, cols, rows, scale_enabled=True):
    """
    Build the 3x3 matrix of the forward transform about the image center.

    q = c + t + S @ K @ R @ (p - c), where the center c uses integer halves of
    the image size.

    Args:
        params: TransformParams
        cols: Image width in pixels
        rows: Image height in pixels
        scale_enabled: Whether the scale factors take part in the transform

    Returns:
        3x3 matrix mapping source coordinates to output coordinates
    """
    cx, cy = cols // 2, rows // 2

    S = scale_matrix(params.x_scale, params.y_scale) if scale_enabled else np.eye(3)
    K = shear_matrix(params.k_val)
    R = rotation_matrix(params.theta)

    to_origin = translation_matrix(-cx, -cy)
    back = translation_matrix(cx + params.x_trans, cy + params.y_trans)
    return back @ S @ K @ R @ to_origin


def apply_matrix(M, points):
    """
    Apply a 3x3 transform matrix to points.

    Args:
        M: 3x3 matrix
        points: Array of shape (n, 2)

    Returns:
        Transformed points, array of shape (n, 2)
    """
    points_homog = to_homogeneous(points)
    transformed_homog = (M @ points_homog.T).T
    return from_homogeneous(transformed_homog)
