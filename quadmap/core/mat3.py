"""
3x3 Matrix Helpers
Closed-form inverse via the adjugate
"""

from .errors import NotInvertibleError
from .linear_solver import EPS
from .types import Mat3, as_mat3


def _cofactors(m: Mat3):
    a, b, c, d, e, f, g, h, i = m
    return (
        e * i - f * h,
        -(d * i - f * g),
        d * h - e * g,
        -(b * i - c * h),
        a * i - c * g,
        -(a * h - b * g),
        b * f - c * e,
        -(a * f - c * d),
        a * e - b * d,
    )


def determinant(m) -> float:
    m = as_mat3(m)
    A, B, C = _cofactors(m)[:3]
    return m[0] * A + m[1] * B + m[2] * C


def invert_mat3(m) -> Mat3:
    """
    Invert a 3x3 matrix

    Args:
        m: Mat3 or 9 row-major values

    Returns:
        Inverse matrix

    Raises:
        NotInvertibleError: |det| below EPS
    """
    m = as_mat3(m)
    A, B, C, D, E, F, G, H, I = _cofactors(m)

    det = m[0] * A + m[1] * B + m[2] * C
    if abs(det) < EPS:
        raise NotInvertibleError(f"Matrix not invertible (det ~ 0: {det:.3e})")

    inv_det = 1.0 / det
    # Adjugate is the transposed cofactor matrix
    return Mat3(
        A * inv_det, D * inv_det, G * inv_det,
        B * inv_det, E * inv_det, H * inv_det,
        C * inv_det, F * inv_det, I * inv_det,
    )


def multiply(a, b) -> Mat3:
    return as_mat3(a) @ as_mat3(b)
