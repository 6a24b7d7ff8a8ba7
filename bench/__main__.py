"""
Benchmark pose_to_matrix: Warp kernel vs the torch tensor-expression formulation.

Usage:
    python -m bench --mode fwd --device cuda
"""
import argparse
import torch
import typing as T
import warp as wp

wp.init()
wp.config.quiet = True

from rigid_warp import pose_to_matrix, rigid_to_matrix
from rigid_warp.transform import pose_Mat_torch
from torch.utils.benchmark import Timer


def bench_forward(device: T.Literal["cpu", "cuda"], min_run_time: float = 0.2):
    """Benchmark forward pass of pose_to_matrix against the torch baseline."""
    x = torch.randn(6, device=device)
    
    ref_timer = Timer(stmt="pose_Mat_torch(x)", globals=dict(pose_Mat_torch=pose_Mat_torch, x=x))
    wp_timer = Timer(stmt="pose_to_matrix(x)", globals=dict(pose_to_matrix=pose_to_matrix, x=x))
    
    ref_bench = ref_timer.adaptive_autorange(min_run_time=min_run_time)
    wp_bench = wp_timer.adaptive_autorange(min_run_time=min_run_time)
    return ref_bench, wp_bench


def bench_backward(device: T.Literal["cpu", "cuda"], min_run_time: float = 0.2):
    """Benchmark forward + backward pass of pose_to_matrix against the torch baseline."""
    def ref_backward():
        x = torch.randn(6, device=device, requires_grad=True)
        pose_Mat_torch(x).sum().backward()
    
    def wp_backward():
        x = torch.randn(6, device=device, requires_grad=True)
        pose_to_matrix(x).sum().backward()
    
    ref_timer = Timer(stmt="ref_backward()", globals=dict(ref_backward=ref_backward))
    wp_timer = Timer(stmt="wp_backward()", globals=dict(wp_backward=wp_backward))
    
    ref_bench = ref_timer.adaptive_autorange(min_run_time=min_run_time)
    wp_bench = wp_timer.adaptive_autorange(min_run_time=min_run_time)
    return ref_bench, wp_bench


def bench_rigid_forward(device: T.Literal["cpu", "cuda"], min_run_time: float = 0.2):
    """Benchmark rigid_to_matrix."""
    R = torch.eye(3, device=device)
    t = torch.randn(3, device=device)
    timer = Timer(stmt="rigid_to_matrix(R, t)", globals=dict(rigid_to_matrix=rigid_to_matrix, R=R, t=t))
    return timer.adaptive_autorange(min_run_time=min_run_time)


def main():
    parser = argparse.ArgumentParser(description="Benchmark pose_to_matrix forward/backward")
    parser.add_argument("--mode", choices=["fwd", "bwd"], default="fwd", help="Benchmark forward or backward pass")
    parser.add_argument("--device", choices=["cpu", "cuda"], default="cuda", help="Device to run on")
    args = parser.parse_args()
    
    if args.device == "cuda" and not (torch.cuda.is_available() and wp.is_cuda_available()):
        print("CUDA not available, falling back to CPU")
        args.device = "cpu"
    
    print(f"Benchmarking pose_to_matrix {args.mode} | device={args.device}")
    print("-" * 80)
    
    if args.mode == "fwd":
        ref_bench, wp_bench = bench_forward(args.device)
    else:
        ref_bench, wp_bench = bench_backward(args.device)
    
    print(f"Torch:   {ref_bench}")
    print(f"Warp:    {wp_bench}")
    print("-" * 80)
    
    speedup = ref_bench.median / wp_bench.median
    print(f"Speedup: {speedup:.2f}x {'(Warp faster)' if speedup > 1 else '(Torch faster)'}")
    
    if args.mode == "fwd":
        print(f"rigid_to_matrix: {bench_rigid_forward(args.device)}")


if __name__ == "__main__":
    main()
