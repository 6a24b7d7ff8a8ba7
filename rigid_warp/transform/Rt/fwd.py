"""
Forward pass for Rt Mat: composes rotation R and translation t into a
4x4 transformation matrix.

4x4 Transformation matrix:
    [ R  | t ]     [ R00 R01 R02 | tx ]
    [----+---]  =  [ R10 R11 R12 | ty ]
    [ 0  | 1 ]     [ R20 R21 R22 | tz ]
                   [  0   0   0  | 1  ]

R is copied verbatim (no orthogonality check). Only torch ops are used, so
this runs on any device torch supports and is differentiable w.r.t. R and t.
"""

import torch

from ..common.kernel_utils import assert_shape, assert_dtype, assert_device


def Rt_Mat_fwd(R: torch.Tensor, t: torch.Tensor) -> torch.Tensor:
    """
    Compose a rotation matrix and a translation vector.
    
    Args:
        R: Rotation matrix of shape (3, 3), float32
        t: Translation vector of shape (3,), float32, on R's device
        
    Returns:
        Transformation matrix of shape (4, 4) on R's device
    """
    dtype = torch.float32
    device = R.device
    assert_shape(R, (3, 3), "R")
    assert_dtype(R, dtype, "R")
    assert_shape(t, (3,), "t")
    assert_device(t, device, "t")
    assert_dtype(t, dtype, "t")
    
    transformation = torch.zeros((4, 4), dtype=dtype, device=device)
    
    # Rotation
    transformation[0:3, 0:3] = R
    # Translation, scale is always 1
    transformation[0:3, 3:4] = t.reshape(3, 1)
    transformation[3, 3] = 1.0
    return transformation
