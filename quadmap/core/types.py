"""
Value Types
Fixed-length immutable points, quads and 3x3 matrices
"""

from typing import Iterable, NamedTuple, Sequence, Tuple

import numpy as np

from .errors import ShapeError


class Point(NamedTuple):
    x: float
    y: float


class Vec3(NamedTuple):
    x: float
    y: float
    w: float


class Quad(NamedTuple):
    """Four corners in a consistent winding (e.g. TL, TR, BR, BL)"""
    p0: Point
    p1: Point
    p2: Point
    p3: Point


class Mat3(NamedTuple):
    """Row-major 3x3 matrix"""
    m00: float
    m01: float
    m02: float
    m10: float
    m11: float
    m12: float
    m20: float
    m21: float
    m22: float

    @classmethod
    def identity(cls) -> 'Mat3':
        return cls(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, array) -> 'Mat3':
        """Build from a 3x3 nested sequence or numpy array"""
        rows = np.asarray(array, dtype=np.float64)
        if rows.shape != (3, 3):
            raise ShapeError(f"Expected a 3x3 matrix, got shape {rows.shape}")
        return cls(*(float(v) for v in rows.ravel()))

    def rows(self) -> Tuple[Tuple[float, float, float], ...]:
        return (tuple(self[0:3]), tuple(self[3:6]), tuple(self[6:9]))

    def to_array(self) -> np.ndarray:
        return np.array(self, dtype=np.float64).reshape(3, 3)

    def apply_vec3(self, v: Vec3) -> Vec3:
        return Vec3(
            self[0] * v[0] + self[1] * v[1] + self[2] * v[2],
            self[3] * v[0] + self[4] * v[1] + self[5] * v[2],
            self[6] * v[0] + self[7] * v[1] + self[8] * v[2],
        )

    def __matmul__(self, other: 'Mat3') -> 'Mat3':
        values = []
        for r in range(3):
            for c in range(3):
                values.append(sum(self[r * 3 + k] * other[k * 3 + c] for k in range(3)))
        return Mat3(*values)


def as_point(value) -> Point:
    """Coerce a Point, (x, y) pair or numpy row into a Point"""
    if isinstance(value, Point):
        return value
    coords = list(value)
    if len(coords) != 2:
        raise ShapeError(f"A point needs 2 coordinates, got {len(coords)}")
    return Point(float(coords[0]), float(coords[1]))


def as_quad(values: Iterable) -> Quad:
    """Coerce 4 point-likes into a Quad"""
    if isinstance(values, Quad):
        return values
    points = [as_point(p) for p in values]
    if len(points) != 4:
        raise ShapeError(f"A quad needs exactly 4 points, got {len(points)}")
    return Quad(*points)


def as_mat3(values: Sequence[float]) -> Mat3:
    if isinstance(values, Mat3):
        return values
    flat = [float(v) for v in values]
    if len(flat) != 9:
        raise ShapeError(f"A 3x3 matrix needs 9 values, got {len(flat)}")
    return Mat3(*flat)
