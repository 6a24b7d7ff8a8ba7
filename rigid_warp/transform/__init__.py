from .Rt   import Rt_Mat_fwd
from .Pose import pose_Mat, pose_Mat_fwd, pose_Mat_bwd, pose_Mat_torch
