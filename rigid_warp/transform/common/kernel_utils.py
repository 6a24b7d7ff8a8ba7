# pyright: reportInvalidTypeForm=false
"""
Centralized utilities for Warp kernel management.

This module provides:
- Tensor validation (shape / dtype / device) raising the rigid_warp errors
- Kernel caching infrastructure
"""

import threading
import torch
from typing import Any, Callable

from ...errors import ShapeMismatch, DtypeMismatch, DeviceMismatch


# =============================================================================
# Tensor validation
# =============================================================================

def assert_shape(tensor: torch.Tensor, shape: tuple[int, ...], name: str) -> None:
    if tuple(tensor.shape) != tuple(shape):
        raise ShapeMismatch(
            f"Expected {name} of shape {tuple(shape)}, got {tuple(tensor.shape)}"
        )


def assert_dtype(tensor: torch.Tensor, dtype: torch.dtype, name: str) -> None:
    if tensor.dtype != dtype:
        raise DtypeMismatch(f"Expected {name} of dtype {dtype}, got {tensor.dtype}")


def assert_device(tensor: torch.Tensor, device: torch.device, name: str) -> None:
    if tensor.device != device:
        raise DeviceMismatch(
            f"Expected {name} on device {device}, got {tensor.device}"
        )


# =============================================================================
# Kernel Registry - Global cache for instantiated kernels
# =============================================================================

class KernelRegistry:
    """
    Global registry for caching instantiated Warp kernels.
    
    Kernels are cached by (factory, dtype), holding a reference to the
    factory. Warp compiles each cached kernel lazily per device on first
    launch, so one entry serves both the CPU and the CUDA path.
    """
    
    _cache: dict[tuple[Callable, type], Any] = {}
    _lock = threading.Lock()
    
    @classmethod
    def get(cls, factory: Callable, dtype: type) -> Any:
        """
        Get or create a kernel for the given factory and dtype.
        
        Args:
            factory: Kernel factory taking a Warp scalar type
            dtype: Warp scalar type (wp.float32)
            
        Returns:
            Instantiated Warp kernel
        """
        key = (factory, dtype)
        with cls._lock:
            if key not in cls._cache:
                cls._cache[key] = factory(dtype)
            return cls._cache[key]
    
    @classmethod
    def clear(cls):
        """Clear the kernel cache (useful for testing)."""
        with cls._lock:
            cls._cache.clear()
