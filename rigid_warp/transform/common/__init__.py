from .kernel_utils import (
    # Validation
    assert_shape,
    assert_dtype,
    assert_device,
    # Kernel registry
    KernelRegistry,
)
from .warp_functions import (
    euler_zyx_to_mat33,
    euler_zyx_to_mat33_vjp,
)
