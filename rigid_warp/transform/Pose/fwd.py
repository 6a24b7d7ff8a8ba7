# pyright: reportInvalidTypeForm=false
# NOTE: warp language's type annotation spec does not match Pyright spec completely.

"""
Forward pass for Pose Mat: converts a 6-parameter pose to a 4x4 transformation matrix.

Pose representation: [rx, ry, rz, tx, ty, tz] (6 elements, radians then translation)

4x4 Transformation matrix:
    [ R  | t ]     [ R00 R01 R02 | tx ]
    [----+---]  =  [ R10 R11 R12 | ty ]
    [ 0  | 1 ]     [ R20 R21 R22 | tz ]
                   [  0   0   0  | 1  ]

where:
- R = Rz(rz) @ Ry(ry) @ Rx(rx), written by a Warp kernel on the input's device
- t = [tx, ty, tz], copied with torch slicing
"""

import torch
import warp as wp
import typing as T

from ...device import get_rotation_backend
from ...utils.warp_utils import wp_scalar_type
from ..common.warp_functions import euler_zyx_to_mat33
from ..common.kernel_utils import KernelRegistry, assert_shape, assert_dtype


# =============================================================================
# Kernel factory: writes the rotation block of a zero-initialized 4x4 matrix
# =============================================================================

def _make_kernel(dtype):
    rotation_impl = euler_zyx_to_mat33(dtype)
    
    @wp.kernel(enable_backward=False)
    def implement(
        x: wp.array(dtype=T.Any, ndim=1),
        out: wp.array(dtype=T.Any, ndim=2),
    ):
        R = rotation_impl(x[0], x[1], x[2])
        for r in range(3):
            for c in range(3):
                out[r, c] = R[r, c]
    return implement


# =============================================================================
# Main forward function
# =============================================================================

def pose_Mat_fwd(x: torch.Tensor) -> torch.Tensor:
    """
    Convert a pose vector to a 4x4 transformation matrix.
    
    Args:
        x: Pose tensor of shape (6,) - [rx, ry, rz, tx, ty, tz], float32
        
    Returns:
        Transformation matrix of shape (4, 4) on x's device
    """
    dtype = torch.float32
    assert_shape(x, (6,), "X")
    assert_dtype(x, dtype, "X")
    device = x.device
    backend = get_rotation_backend(device)
    
    out_tensor = torch.zeros((4, 4), dtype=dtype, device=device).contiguous()
    x_tensor = x.detach().contiguous()
    
    x_wp = wp.from_torch(x_tensor)
    out_wp = wp.from_torch(out_tensor)
    
    kernel = KernelRegistry.get(_make_kernel, wp_scalar_type(dtype))
    backend.launch(kernel, [x_wp, out_wp], device)
    
    # Translation from pose, scale is always 1
    out_tensor[0:3, 3:4] = x_tensor[3:6].reshape(3, 1)
    out_tensor[3, 3] = 1.0
    return out_tensor
