import torch
import warp as wp

from .errors import (
    TransformError,
    ShapeMismatch,
    DtypeMismatch,
    DeviceMismatch,
    UnsupportedDevice,
    BuildConfigurationError,
)
from .device import get_rotation_backend, cuda_compiled
from .transform import Rt_Mat_fwd, pose_Mat
wp.init()


def rigid_to_matrix(R: torch.Tensor, t: torch.Tensor) -> torch.Tensor:
    """Compose a (3, 3) rotation and a (3,) translation into a (4, 4) transformation"""
    return Rt_Mat_fwd(R, t)


def pose_to_matrix(X: torch.Tensor) -> torch.Tensor:
    """Convert a (6,) pose [rx, ry, rz, tx, ty, tz] into a (4, 4) transformation"""
    return pose_Mat.apply(X)


__all__ = [
    "rigid_to_matrix",
    "pose_to_matrix",
    "get_rotation_backend",
    "cuda_compiled",
    "TransformError",
    "ShapeMismatch",
    "DtypeMismatch",
    "DeviceMismatch",
    "UnsupportedDevice",
    "BuildConfigurationError",
]
