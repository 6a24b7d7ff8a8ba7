"""
Rotation backend dispatch for the CPU and CUDA execution paths.

Both backends launch the very same Warp kernel; they differ in how the Warp
device is resolved, whether the path exists in the current Warp build, and on
which stream work is queued.

Usage:
    from rigid_warp.device import get_rotation_backend
    backend = get_rotation_backend(x.device)
    backend.launch(kernel, [x_wp, out_wp], x.device)
"""

from abc import ABC, abstractmethod

import torch
import warp as wp

from .errors import UnsupportedDevice, BuildConfigurationError
from .utils.log import LogWriter


def cuda_compiled() -> bool:
    """Check if the Warp build can run kernels on CUDA devices."""
    return wp.is_cuda_available()


class RotationBackend(ABC):
    """Strategy computing the rotation block on one class of device."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name for logging."""
        ...

    @abstractmethod
    def is_available(self) -> bool:
        ...

    @abstractmethod
    def warp_device(self, device: torch.device):
        """Warp device matching the given torch device."""
        ...

    def launch(self, kernel, inputs: list, device: torch.device) -> None:
        """Launch a single-threaded kernel on ``device``."""
        wp.launch(
            kernel=kernel,
            dim=1,
            device=self.warp_device(device),
            inputs=inputs,
        )


class CPUBackend(RotationBackend):
    @property
    def name(self) -> str:
        return "cpu"

    def is_available(self) -> bool:
        return True

    def warp_device(self, device: torch.device):
        return wp.get_device("cpu")


class CUDABackend(RotationBackend):
    @property
    def name(self) -> str:
        return "cuda"

    def is_available(self) -> bool:
        return cuda_compiled()

    def warp_device(self, device: torch.device):
        return wp.device_from_torch(device)

    def launch(self, kernel, inputs: list, device: torch.device) -> None:
        # Queue on torch's current stream so the output is ordered with
        # whatever torch does with it next.
        wp.launch(
            kernel=kernel,
            dim=1,
            device=self.warp_device(device),
            inputs=inputs,
            stream=wp.stream_from_torch(device),
        )


_BACKENDS: dict[str, RotationBackend] = {
    "cpu" : CPUBackend(),
    "cuda": CUDABackend(),
}


def get_rotation_backend(device: torch.device | str) -> RotationBackend:
    """
    Select the rotation backend for a torch device.

    Args:
        device: Execution device carried by the input tensor

    Returns:
        RotationBackend instance

    Raises:
        UnsupportedDevice: If the device is neither CPU nor CUDA
        BuildConfigurationError: If CUDA is requested but Warp has no CUDA support
    """
    device = torch.device(device)
    backend = _BACKENDS.get(device.type)

    if backend is None:
        LogWriter.error(f"Unimplemented device {device}.")
        raise UnsupportedDevice(f"Unimplemented device {device}, expected cpu or cuda.")

    if not backend.is_available():
        LogWriter.error(f"Not compiled with CUDA, but CUDA device {device} is used.")
        raise BuildConfigurationError(
            f"Not compiled with CUDA, but CUDA device {device} is used."
        )

    LogWriter.debug(f"Using {backend.name} rotation backend for {device}")
    return backend
