"""
Error taxonomy for transform construction.

Every error is raised synchronously before any arithmetic runs, and each one
also derives from the builtin exception that best describes it, so callers
that only catch ``ValueError`` / ``TypeError`` / ``RuntimeError`` keep working.
"""


class TransformError(Exception):
    """Base class for all errors raised by rigid_warp."""


class ShapeMismatch(TransformError, ValueError):
    """Input tensor rank or extent differs from the required fixed shape."""


class DtypeMismatch(TransformError, TypeError):
    """Input element type is not single precision floating point."""


class DeviceMismatch(TransformError, ValueError):
    """Two inputs of the same call live on different devices."""


class UnsupportedDevice(TransformError, NotImplementedError):
    """Device class is neither CPU nor CUDA."""


class BuildConfigurationError(TransformError, RuntimeError):
    """CUDA device requested but the Warp build carries no CUDA support."""
