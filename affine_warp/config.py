"""
Transform parameters and run policies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .image import BLACK, Pixel


class ScaleGuard(Enum):
    """Condition under which the inverse scale step is applied."""

    # x_scale > 0 or y_scale > 0; the other axis is divided by as-is
    EITHER_POSITIVE = "either"
    # x_scale > 0 and y_scale > 0; otherwise both axes keep their scale
    BOTH_POSITIVE = "both"


class EdgePolicy(Enum):
    """Handling of samples that land exactly on the last row or column."""

    # The widened upper neighbor is past the edge, so the pixel is skipped
    STRICT = "strict"
    # The upper neighbor has zero weight there and is read from the last index
    EXACT = "exact"


@dataclass(frozen=True)
class TransformParams:
    """
    Parameters of the composite transform, applied about the image center.

    Attributes:
        x_scale, y_scale: Scale factors per axis
        x_trans, y_trans: Translation in pixels
        theta: Rotation angle in degrees
        k_val: Shear factor along x, driven by y
    """
    x_scale: float = 1.0
    y_scale: float = 1.0
    x_trans: float = 0.0
    y_trans: float = 0.0
    theta: float = 0.0
    k_val: float = 0.0

    @classmethod
    def identity(cls) -> "TransformParams":
        return cls()


@dataclass(frozen=True)
class WarpConfig:
    background: Pixel = BLACK
    scale_guard: ScaleGuard = ScaleGuard.EITHER_POSITIVE
    edge_policy: EdgePolicy = EdgePolicy.EXACT
    snap_tolerance: float = 1e-9

    def __post_init__(self):
        if self.snap_tolerance < 0 or self.snap_tolerance >= 0.5:
            raise ValueError(f"snap_tolerance must be in [0, 0.5), got {self.snap_tolerance}")
        if any(not 0 <= channel <= 255 for channel in self.background):
            raise ValueError(f"Background channels must be in [0, 255], got {tuple(self.background)}")
        # Accept plain tuples for the background color
        object.__setattr__(self, "background", Pixel(*(int(c) for c in self.background)))


DEFAULT_CONFIG = WarpConfig()
