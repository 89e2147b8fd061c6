"""
quadmap package initialization
"""

from .core.errors import (
    QuadMapError,
    ShapeError,
    SingularSystemError,
    IllConditionedError,
    NotInvertibleError,
    PointAtInfinityError,
    ConfigError,
)
from .core.types import Point, Quad, Mat3, Vec3
from .core.linear_solver import solve_linear_system, LinearSolver, GaussianEliminationSolver
from .core.mat3 import invert_mat3
from .core.homography import Homography, homography_from_4_points, apply_homography
from .core.rect_space import RectSpace
from .utils.config_loader import load_config
from .utils.logger import setup_logger

__all__ = [
    'QuadMapError',
    'ShapeError',
    'SingularSystemError',
    'IllConditionedError',
    'NotInvertibleError',
    'PointAtInfinityError',
    'ConfigError',
    'Point',
    'Quad',
    'Mat3',
    'Vec3',
    'solve_linear_system',
    'LinearSolver',
    'GaussianEliminationSolver',
    'invert_mat3',
    'Homography',
    'homography_from_4_points',
    'apply_homography',
    'RectSpace',
    'load_config',
    'setup_logger',
]

__version__ = '1.0.0'
