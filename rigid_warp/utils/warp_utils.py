import torch
import warp as wp


def wp_scalar_type(dtype: torch.dtype):
    match dtype:
        case torch.float32: return wp.float32
        case _: raise NotImplementedError(f"Only torch.float32 is supported, got {dtype}")
