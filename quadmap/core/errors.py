"""
Error Taxonomy
Every failure is fatal to the current call and propagates unchanged
"""


class QuadMapError(Exception):
    """Base class for all geometry errors"""


class ShapeError(QuadMapError, ValueError):
    """Input dimensions do not match (non-square matrix, wrong point count)"""


class SingularSystemError(QuadMapError, ArithmeticError):
    """Linear system has no numerically stable unique solution"""


class IllConditionedError(SingularSystemError):
    """System is solvable but its condition number exceeds the allowed bound"""


class NotInvertibleError(QuadMapError, ArithmeticError):
    """3x3 matrix determinant is ~0"""


class PointAtInfinityError(QuadMapError, ArithmeticError):
    """Perspective division denominator is ~0"""


class ConfigError(QuadMapError, ValueError):
    """Configuration is missing a section or holds an invalid value"""
