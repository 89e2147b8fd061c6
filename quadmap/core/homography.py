"""
Homography Estimation
Exact 4-point homography (h33 fixed to 1) and point mapping
"""

import logging
from typing import NamedTuple, Optional

import numpy as np

from .errors import IllConditionedError, PointAtInfinityError
from .linear_solver import DEFAULT_SOLVER, EPS, LinearSolver
from .mat3 import invert_mat3
from .types import Mat3, Point, Vec3, as_mat3, as_point, as_quad

logger = logging.getLogger(__name__)


class Homography(NamedTuple):
    forward: Mat3
    inverse: Mat3


def build_system(src, dst):
    """
    Stack the 8x8 system for 4 correspondences

    Unknowns are [h11 h12 h13 h21 h22 h23 h31 h32]; each (u, v) -> (x, y) gives
        h11*u + h12*v + h13 - x*h31*u - x*h32*v = x
        h21*u + h22*v + h23 - y*h31*u - y*h32*v = y
    """
    # as_quad raises ShapeError unless there are exactly 4 points
    src = as_quad(src)
    dst = as_quad(dst)

    A = []
    b = []
    for (u, v), (x, y) in zip(src, dst):
        A.append([u, v, 1.0, 0.0, 0.0, 0.0, -x * u, -x * v])
        b.append(x)

        A.append([0.0, 0.0, 0.0, u, v, 1.0, -y * u, -y * v])
        b.append(y)

    return A, b


def homography_from_4_points(
    src,
    dst,
    solver: Optional[LinearSolver] = None,
    max_condition: Optional[float] = None
) -> Homography:
    """
    Compute H mapping src[k] -> dst[k] for k=0..3, plus its inverse

    Args:
        src: 4 source points, same winding/order as dst
        dst: 4 destination points
        solver: Linear solver strategy (Gaussian elimination by default)
        max_condition: Reject systems whose condition number exceeds this bound

    Returns:
        Homography(forward, inverse)
    """
    A, b = build_system(src, dst)

    if max_condition is not None:
        condition = float(np.linalg.cond(np.array(A, dtype=np.float64)))
        if not condition <= max_condition:
            raise IllConditionedError(
                f"Ill-conditioned correspondence (cond={condition:.3e} > {max_condition:.3e})"
            )

    h = (solver or DEFAULT_SOLVER).solve(A, b)
    forward = Mat3(h[0], h[1], h[2], h[3], h[4], h[5], h[6], h[7], 1.0)
    inverse = invert_mat3(forward)

    logger.debug(f"Estimated homography: {forward}")
    return Homography(forward, inverse)


def apply_homography(H: Mat3, p) -> Point:
    """Map a point through H with perspective division"""
    H = as_mat3(H)
    p = as_point(p)
    x, y, w = H.apply_vec3(Vec3(p.x, p.y, 1.0))
    if abs(w) < EPS:
        raise PointAtInfinityError(f"Point {tuple(p)} mapped to infinity (w ~ 0)")
    return Point(x / w, y / w)
