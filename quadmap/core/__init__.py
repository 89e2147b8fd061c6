"""
Core package initialization
"""

from .types import Point, Quad, Mat3, Vec3
from .linear_solver import solve_linear_system, GaussianEliminationSolver
from .mat3 import invert_mat3
from .homography import homography_from_4_points, apply_homography
from .rect_space import RectSpace
from . import quad_editor

__all__ = [
    'Point',
    'Quad',
    'Mat3',
    'Vec3',
    'solve_linear_system',
    'GaussianEliminationSolver',
    'invert_mat3',
    'homography_from_4_points',
    'apply_homography',
    'RectSpace',
    'quad_editor',
]
