"""Elementary axis rotations and Z-Y-X Euler composition."""

import numpy as np


def rotation_x(angle: float) -> np.ndarray:
    """Rotation matrix about the X axis."""
    c = np.cos(angle)
    s = np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, c, -s],
        [0.0, s, c]
    ])


def rotation_y(angle: float) -> np.ndarray:
    """Rotation matrix about the Y axis."""
    c = np.cos(angle)
    s = np.sin(angle)
    return np.array([
        [c, 0.0, s],
        [0.0, 1.0, 0.0],
        [-s, 0.0, c]
    ])


def rotation_z(angle: float) -> np.ndarray:
    """Rotation matrix about the Z axis."""
    c = np.cos(angle)
    s = np.sin(angle)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0]
    ])


def euler_zyx_to_matrix(rx: float, ry: float, rz: float) -> np.ndarray:
    """Compose R = Rz(rz) @ Ry(ry) @ Rx(rx).

    The X rotation is applied first to a column vector, then Y, then Z.
    Jacobians fed into the normal equations must be linearized with the
    same order, otherwise the recovered update is wrong.

    Args:
        rx: Rotation about X in radians
        ry: Rotation about Y in radians
        rz: Rotation about Z in radians

    Returns:
        3x3 rotation matrix
    """
    return rotation_z(rz) @ rotation_y(ry) @ rotation_x(rx)


def matrix_to_euler_zyx(R: np.ndarray) -> np.ndarray:
    """Recover (rx, ry, rz) from R = Rz @ Ry @ Rx.

    Unique for |ry| < pi/2. At gimbal lock rx is set to zero and the
    remaining angle is folded into rz.

    Args:
        R: 3x3 rotation matrix

    Returns:
        3-element array [rx, ry, rz]
    """
    if R.shape != (3, 3):
        raise ValueError(f"R must be 3x3 matrix, got shape {R.shape}")

    ry = np.arcsin(np.clip(-R[2, 0], -1.0, 1.0))
    cos_ry = np.cos(ry)

    if abs(cos_ry) < 1e-9:
        rx = 0.0
        rz = np.arctan2(-R[0, 1], R[1, 1])
    else:
        rx = np.arctan2(R[2, 1], R[2, 2])
        rz = np.arctan2(R[1, 0], R[0, 0])

    return np.array([rx, ry, rz])
