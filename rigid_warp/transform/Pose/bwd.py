# pyright: reportInvalidTypeForm=false
# NOTE: warp language's type annotation spec does not match Pyright spec completely.

import torch
import warp as wp
import typing as T

from ...device import get_rotation_backend
from ...utils.warp_utils import wp_scalar_type
from ..common.warp_functions import euler_zyx_to_mat33_vjp
from ..common.kernel_utils import KernelRegistry


# =============================================================================
# Backward kernel for pose_Mat
#
# Forward: x = [rx, ry, rz, tx, ty, tz] -> T (4x4)
#
#   grad_x[0:3] = sum_ij grad_T[i, j] * dR_ij / d(rx, ry, rz)
#   grad_x[3:6] = grad_T[0:3, 3]
#
# The bottom row of T is constant and receives no gradient.
# =============================================================================

def _make_bwd_kernel(dtype):
    rotation_vjp_impl = euler_zyx_to_mat33_vjp(dtype)
    
    @wp.kernel(enable_backward=False)
    def implement(
        x: wp.array(dtype=T.Any, ndim=1),
        grad_output: wp.array(dtype=T.Any, ndim=2),
        grad_x: wp.array(dtype=T.Any, ndim=1),
    ):
        G = wp.matrix(shape=(3, 3), dtype=dtype)
        for r in range(3):
            for c in range(3):
                G[r, c] = grad_output[r, c]
        
        grad_angles = rotation_vjp_impl(x[0], x[1], x[2], G)
        grad_x[0] = grad_angles[0]
        grad_x[1] = grad_angles[1]
        grad_x[2] = grad_angles[2]
        grad_x[3] = grad_output[0, 3]
        grad_x[4] = grad_output[1, 3]
        grad_x[5] = grad_output[2, 3]
    return implement


# =============================================================================
# Main backward function
# =============================================================================

def pose_Mat_bwd(
    x: torch.Tensor,
    grad_output: torch.Tensor,
) -> torch.Tensor:
    """
    Backward pass for pose_Mat.
    
    Args:
        x: Forward input pose of shape (6,)
        grad_output: Gradient w.r.t output matrix of shape (4, 4)
        
    Returns:
        Gradient w.r.t input pose of shape (6,)
    """
    dtype = x.dtype
    device = x.device
    backend = get_rotation_backend(device)
    
    # Detach and ensure contiguous
    x = x.detach().contiguous()
    grad_output = grad_output.detach().to(dtype=dtype).contiguous()
    
    x_wp = wp.from_torch(x)
    grad_output_wp = wp.from_torch(grad_output)
    
    grad_x_tensor = torch.empty((6,), dtype=dtype, device=device)
    grad_x_wp = wp.from_torch(grad_x_tensor)
    
    kernel = KernelRegistry.get(_make_bwd_kernel, wp_scalar_type(dtype))
    backend.launch(kernel, [x_wp, grad_output_wp, grad_x_wp], device)
    
    return grad_x_tensor
