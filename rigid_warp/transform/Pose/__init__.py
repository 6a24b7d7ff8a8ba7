"""
Pose Mat: Convert a 6-parameter pose [rx, ry, rz, tx, ty, tz] to a 4x4 transformation matrix.
"""

import torch
from .fwd import pose_Mat_fwd
from .bwd import pose_Mat_bwd
from .ref import pose_Mat_torch


class pose_Mat(torch.autograd.Function):
    """
    Convert a pose vector to a 4x4 transformation matrix.
    
    The rotation block is computed by a Warp kernel on the input's device,
    the translation column is copied from the last three pose entries.
    """

    @staticmethod
    def forward(ctx, x):
        out = pose_Mat_fwd(x)
        # Save forward input for backward
        ctx.save_for_backward(x)
        return out

    @staticmethod
    def backward(ctx, grad_output):
        x, = ctx.saved_tensors
        return pose_Mat_bwd(x, grad_output)
