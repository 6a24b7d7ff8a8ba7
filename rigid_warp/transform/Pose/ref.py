"""
Tensor-expression formulation of Pose Mat.

Builds the same matrix as pose_Mat_fwd out of plain torch ops, one entry at a
time. It runs on any torch device, differentiates through torch autograd,
and is the baseline the Warp kernel is checked and timed against.
"""

import torch


def pose_Mat_torch(x: torch.Tensor) -> torch.Tensor:
    """
    Convert a pose vector to a 4x4 transformation matrix with torch ops.
    
    Args:
        x: Pose tensor of shape (6,) - [rx, ry, rz, tx, ty, tz]
        
    Returns:
        Transformation matrix of shape (4, 4), same dtype and device as x
    """
    rx, ry, rz = x[0], x[1], x[2]
    cx, sx = torch.cos(rx), torch.sin(rx)
    cy, sy = torch.cos(ry), torch.sin(ry)
    cz, sz = torch.cos(rz), torch.sin(rz)
    zero = torch.zeros_like(rx)
    one = torch.ones_like(rx)
    
    rows = [
        torch.stack([cz * cy, -sz * cx + cz * sy * sx, sz * sx + cz * sy * cx, x[3]]),
        torch.stack([sz * cy, cz * cx + sz * sy * sx, -cz * sx + sz * sy * cx, x[4]]),
        torch.stack([-sy, cy * sx, cy * cx, x[5]]),
        torch.stack([zero, zero, zero, one]),
    ]
    return torch.stack(rows)
