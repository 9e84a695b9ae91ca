"""Math primitives for posestep."""

from .euler import rotation_x, rotation_y, rotation_z, euler_zyx_to_matrix, matrix_to_euler_zyx
from .se3 import (
    vector6_to_matrix4,
    matrix4_to_vector6,
    skew_symmetric,
    compose,
    invert,
    transform_points,
    apply_pose_updates,
)

__all__ = [
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "euler_zyx_to_matrix",
    "matrix_to_euler_zyx",
    "vector6_to_matrix4",
    "matrix4_to_vector6",
    "skew_symmetric",
    "compose",
    "invert",
    "transform_points",
    "apply_pose_updates",
]
