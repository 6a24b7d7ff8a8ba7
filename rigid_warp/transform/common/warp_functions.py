import warp as wp
import typing as T


# =============================================================================
# Helper function: Euler angles -> 3x3 rotation matrix
#
# R = Rz(rz) @ Ry(ry) @ Rx(rx), expanded in closed form:
#
#   [ cz*cy   -sz*cx + cz*sy*sx    sz*sx + cz*sy*cx ]
#   [ sz*cy    cz*cx + sz*sy*sx   -cz*sx + sz*sy*cx ]
#   [ -sy      cy*sx               cy*cx            ]
#
# where c* / s* are cos / sin of the angle about that axis.
# =============================================================================

def euler_zyx_to_mat33(dtype):
    
    @wp.func
    def implement(rx: T.Any, ry: T.Any, rz: T.Any) -> T.Any:
        """Rotation matrix of the Euler angles (rx, ry, rz)."""
        cx = wp.cos(rx)
        sx = wp.sin(rx)
        cy = wp.cos(ry)
        sy = wp.sin(ry)
        cz = wp.cos(rz)
        sz = wp.sin(rz)
        
        R = wp.matrix(shape=(3, 3), dtype=dtype)
        R[0, 0] = cz * cy
        R[0, 1] = -sz * cx + cz * sy * sx
        R[0, 2] = sz * sx + cz * sy * cx
        R[1, 0] = sz * cy
        R[1, 1] = cz * cx + sz * sy * sx
        R[1, 2] = -cz * sx + sz * sy * cx
        R[2, 0] = -sy
        R[2, 1] = cy * sx
        R[2, 2] = cy * cx
        return R
    return implement


# =============================================================================
# Helper function: vector-Jacobian product of euler_zyx_to_mat33
#
# Given G = dL/dR (3x3), returns dL/d(rx, ry, rz) = sum_ij G_ij * dR_ij/d(angle).
# Entries with a zero partial derivative are left out of the sums.
# =============================================================================

def euler_zyx_to_mat33_vjp(dtype):
    
    @wp.func
    def implement(rx: T.Any, ry: T.Any, rz: T.Any, G: T.Any) -> T.Any:
        """Gradient of the Euler rotation matrix w.r.t. its three angles."""
        cx = wp.cos(rx)
        sx = wp.sin(rx)
        cy = wp.cos(ry)
        sy = wp.sin(ry)
        cz = wp.cos(rz)
        sz = wp.sin(rz)
        
        # d/drx: first column does not depend on rx
        grad_rx = (
            G[0, 1] * (sz * sx + cz * sy * cx)
            + G[0, 2] * (sz * cx - cz * sy * sx)
            + G[1, 1] * (-cz * sx + sz * sy * cx)
            + G[1, 2] * (-cz * cx - sz * sy * sx)
            + G[2, 1] * (cy * cx)
            + G[2, 2] * (-cy * sx)
        )
        
        grad_ry = (
            G[0, 0] * (-cz * sy)
            + G[0, 1] * (cz * cy * sx)
            + G[0, 2] * (cz * cy * cx)
            + G[1, 0] * (-sz * sy)
            + G[1, 1] * (sz * cy * sx)
            + G[1, 2] * (sz * cy * cx)
            + G[2, 0] * (-cy)
            + G[2, 1] * (-sy * sx)
            + G[2, 2] * (-sy * cx)
        )
        
        # d/drz: last row does not depend on rz
        grad_rz = (
            G[0, 0] * (-sz * cy)
            + G[0, 1] * (-cz * cx - sz * sy * sx)
            + G[0, 2] * (cz * sx - sz * sy * cx)
            + G[1, 0] * (cz * cy)
            + G[1, 1] * (-sz * cx + cz * sy * sx)
            + G[1, 2] * (sz * sx + cz * sy * cx)
        )
        
        return wp.vector(grad_rx, grad_ry, grad_rz, dtype=dtype)
    return implement
