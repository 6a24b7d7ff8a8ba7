"""Tests for the pose_to_matrix benchmark."""
import torch
from bench.__main__ import bench_forward, bench_backward
from rigid_warp import pose_to_matrix
from rigid_warp.transform import pose_Mat_torch
from conftest import get_fwd_tolerances, Operator


class TestBenchBaseline:
    """The benchmark times the Warp kernel next to the torch baseline."""

    def test_baseline_matches_kernel(self, device):
        x = torch.randn(6, device=device)
        
        torch.testing.assert_close(
            pose_to_matrix(x), pose_Mat_torch(x), **get_fwd_tolerances(operator=Operator.pose_Mat)
        )

    def test_forward_times_both(self, device):
        ref_bench, wp_bench = bench_forward(device, min_run_time=0.01)
        
        assert ref_bench.median > 0
        assert wp_bench.median > 0

    def test_backward_times_both(self, device):
        ref_bench, wp_bench = bench_backward(device, min_run_time=0.01)
        
        assert ref_bench.median > 0
        assert wp_bench.median > 0
