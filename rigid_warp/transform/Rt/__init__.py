"""
Rt Mat: Compose rotation R (3x3) and translation t (3,) into a 4x4 transformation matrix.
"""

from .fwd import Rt_Mat_fwd
