"""Rigid transforms as 4x4 homogeneous matrices and their 6-vector updates."""

import numpy as np
from typing import List, Sequence

from .euler import euler_zyx_to_matrix, matrix_to_euler_zyx


def vector6_to_matrix4(xi: np.ndarray) -> np.ndarray:
    """Convert an incremental pose vector to a 4x4 rigid transform.

    Args:
        xi: 6-element vector [rx, ry, rz, tx, ty, tz], rotation first

    Returns:
        4x4 homogeneous matrix with R = Rz @ Ry @ Rx and unrotated translation
    """
    xi = np.asarray(xi, dtype=float).reshape(-1)
    if xi.shape != (6,):
        raise ValueError(f"xi must be 6-element vector, got shape {xi.shape}")

    T = np.eye(4)
    T[:3, :3] = euler_zyx_to_matrix(xi[0], xi[1], xi[2])
    T[:3, 3] = xi[3:]
    return T


def matrix4_to_vector6(T: np.ndarray) -> np.ndarray:
    """Convert a 4x4 rigid transform back to [rx, ry, rz, tx, ty, tz]."""
    T = np.asarray(T, dtype=float)
    if T.shape != (4, 4):
        raise ValueError(f"T must be 4x4 matrix, got shape {T.shape}")

    return np.concatenate([matrix_to_euler_zyx(T[:3, :3]), T[:3, 3]])


def skew_symmetric(v: np.ndarray) -> np.ndarray:
    """Create skew-symmetric matrix from 3D vector."""
    if v.shape != (3,):
        raise ValueError(f"v must be 3-element vector, got shape {v.shape}")

    return np.array([
        [0, -v[2], v[1]],
        [v[2], 0, -v[0]],
        [-v[1], v[0], 0]
    ])


def compose(T1: np.ndarray, T2: np.ndarray) -> np.ndarray:
    """Compose two rigid transforms: T1 * T2."""
    if T1.shape != (4, 4) or T2.shape != (4, 4):
        raise ValueError("Both transforms must be 4x4 matrices")

    return T1 @ T2


def invert(T: np.ndarray) -> np.ndarray:
    """Invert a rigid transform."""
    if T.shape != (4, 4):
        raise ValueError(f"T must be 4x4 matrix, got shape {T.shape}")

    R_inv = T[:3, :3].T
    T_inv = np.eye(4)
    T_inv[:3, :3] = R_inv
    T_inv[:3, 3] = -R_inv @ T[:3, 3]
    return T_inv


def transform_points(T: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Apply a rigid transform to an (N, 3) array of points."""
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError(f"points must be (N, 3) array, got shape {points.shape}")

    return points @ T[:3, :3].T + T[:3, 3]


def apply_pose_updates(
    poses: Sequence[np.ndarray],
    updates: Sequence[np.ndarray],
    side: str = "left"
) -> List[np.ndarray]:
    """Apply one incremental transform to each pose.

    Args:
        poses: Current 4x4 pose estimates, one per body
        updates: 4x4 transforms in the same order as poses
        side: "left" gives update @ pose, "right" gives pose @ update

    Returns:
        New list of updated poses; inputs are left untouched
    """
    poses = [np.asarray(pose, dtype=float) for pose in poses]
    updates = [np.asarray(update, dtype=float) for update in updates]

    if len(poses) != len(updates):
        raise ValueError(
            f"Got {len(updates)} updates for {len(poses)} poses"
        )

    if side == "left":
        return [compose(update, pose) for pose, update in zip(poses, updates)]
    elif side == "right":
        return [compose(pose, update) for pose, update in zip(poses, updates)]
    else:
        raise ValueError(f"Unknown composition side: {side}")
